# Copyright (C) 2009-2010 Canonical Ltd.
# Copyright (C) 2012 Hewlett-Packard Development Company, L.P.
# Copyright (C) 2012 Yahoo! Inc.
#
# This file is part of ds-identify. See LICENSE file for license information.

from dsidentify import settings
from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

SEED_TYPES = ("nocloud", "nocloud-net")
# None checks the seed directory directly under the root.
SEED_PREFIXES = (None, settings.WRITABLE_SYSTEM_DATA)
REQUIRED_FILES = ("user-data", "meta-data")


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    """Report whether any seed directory has both user-data and meta-data."""
    for seed_type in SEED_TYPES:
        for prefix in SEED_PREFIXES:
            if all(
                paths.seed_path_exists(seed_type, fname, prefix=prefix)
                for fname in REQUIRED_FILES
            ):
                return True
    return False
