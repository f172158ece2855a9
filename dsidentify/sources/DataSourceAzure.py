# Copyright (C) 2013 Canonical Ltd.
#
# This file is part of ds-identify. See LICENSE file for license information.

import enum
import logging
from typing import Optional

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)

DS_NAME = "Azure"
SEED_TYPE = "azure"
OVF_ENV_FILE = "ovf-env.xml"


class ChassisAssetTag(enum.Enum):
    AZURE_CLOUD = "7783-7084-3265-9085-8269-3286-77"

    @classmethod
    def query_system(cls, dmi: DMIReader) -> Optional["ChassisAssetTag"]:
        """Check the dmi chassis asset tag against the known Azure tags.

        :returns: ChassisAssetTag if matching tag found, else None.
        """
        asset_tag = dmi.chassis_asset_tag()
        try:
            tag = cls(asset_tag)
        except ValueError:
            LOG.debug("Non-Azure chassis asset tag: %r", asset_tag)
            return None

        LOG.debug("Azure chassis asset tag: %r (%s)", asset_tag, tag.name)
        return tag


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    """Check platform environment to report if this datasource may
    run.
    """
    # A seeded ovf-env.xml wins without looking at dmi at all.
    if paths.seed_path_exists(SEED_TYPE, OVF_ENV_FILE):
        return True
    return ChassisAssetTag.query_system(dmi) is not None
