# This file is part of ds-identify. See LICENSE file for license information.

# Environment variables consulted by the command line entry point
PATH_ROOT_ENV_NAME = "PATH_ROOT"
DI_LOG_ENV_NAME = "DI_LOG"
DEBUG_LEVEL_ENV_NAME = "DEBUG_LEVEL"

DEFAULT_PATH_ROOT = "/"
DEFAULT_DEBUG_LEVEL = 1

# All of these are relative to the root prefix
CLOUD_CONFIG = "etc/cloud/cloud.cfg"
CLOUD_CONFIG_D = "etc/cloud/cloud.cfg.d"
DEFAULT_RUN_DIR = "run/cloud-init"
CFG_OUT = DEFAULT_RUN_DIR + "/cloud.cfg"
DEFAULT_LOG_FILE = DEFAULT_RUN_DIR + "/ds-identify.log"
DMI_SYS_PATH = "sys/class/dmi/id"
SEED_DIR = "var/lib/cloud/seed"

# Ubuntu Core keeps a copy of the writable partition's data here
WRITABLE_SYSTEM_DATA = "writable/system-data"

# Key read from cloud.cfg and its fragments and written to CFG_OUT
DATASOURCE_LIST_KEY = "datasource_list"

# Fallback datasource which always ends the written list
DS_NONE = "None"

# What u get if no config is provided
DEFAULT_DATASOURCE_LIST = [
    "AliYun",
    "Azure",
    "ConfigDrive",
    "Ec2",
    "Exoscale",
    "GCE",
    "NoCloud",
    "Oracle",
]
