# Copyright (C) 2012 Canonical Ltd.
#
# This file is part of ds-identify. See LICENSE file for license information.

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

SEED_TYPE = "config_drive"
# Relative to the seed directory; only the openstack layout is recognized.
META_DATA_FILE = "openstack/latest/meta_data.json"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    return paths.seed_path_exists(SEED_TYPE, META_DATA_FILE)
