# This file is part of ds-identify. See LICENSE file for license information.
"""Oracle Cloud Infrastructure (OCI) identifies itself by chassis asset tag."""

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

CHASSIS_ASSET_TAG = "OracleCloud.com"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    return dmi.chassis_asset_tag() == CHASSIS_ASSET_TAG
