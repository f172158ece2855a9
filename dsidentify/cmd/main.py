#!/usr/bin/env python3

# This file is part of ds-identify. See LICENSE file for license information.

"""Commandline entry point: identify datasources and write cloud.cfg."""

import argparse
import logging
import os
import sys

import yaml

from dsidentify import log, settings, util, version
from dsidentify.helpers import Paths
from dsidentify.identify import DsIdentify

NAME = "ds-identify"

LOG = logging.getLogger(__name__)


def get_parser(parser=None):
    """Build or extend an arg parser for ds-identify.

    @param parser: Optional existing ArgumentParser instance which will be
        extended to support the args of this utility.

    @returns: ArgumentParser with proper argument configuration.
    """
    if not parser:
        parser = argparse.ArgumentParser(
            prog=NAME,
            description=(
                "Detect the datasources this system may be running on and"
                " write them to %s" % os.path.join("/", settings.CFG_OUT)
            ),
        )
    parser.add_argument(
        "--version",
        "-v",
        action="version",
        version="%(prog)s " + (version.version_string()),
        help="Show program's version number and exit.",
    )
    parser.add_argument(
        "--root",
        "-r",
        type=str,
        default=os.environ.get(
            settings.PATH_ROOT_ENV_NAME, settings.DEFAULT_PATH_ROOT
        ),
        help=(
            "Path all other paths are relative to. Defaults to $%s or '%s'."
            % (settings.PATH_ROOT_ENV_NAME, settings.DEFAULT_PATH_ROOT)
        ),
    )
    parser.add_argument(
        "--debug",
        "-d",
        action="store_true",
        default=False,
        help="Show debug logging (default: %(default)s).",
    )
    return parser


def handle_args(name, args):
    """Handle calls to the 'ds-identify' cli.

    @return: 0 on success, 1 when the result could not be written.
    """
    paths = Paths(args.root)
    debug_level = util.get_env_int(
        settings.DEBUG_LEVEL_ENV_NAME, settings.DEFAULT_DEBUG_LEVEL
    )
    level = log.level_from_debug_level(debug_level)
    if args.debug:
        level = logging.DEBUG
    log.setup_logging(
        level=level,
        log_file=os.environ.get(settings.DI_LOG_ENV_NAME, paths.log_file),
    )

    try:
        DsIdentify(paths).run()
    except (OSError, yaml.YAMLError) as e:
        util.logexc(LOG, "Failed writing %s", paths.cfg_out)
        return util.error(
            "%s failed to write %s: %s" % (name, paths.cfg_out, e)
        )
    finally:
        log.flush_loggers(LOG)
    return 0


def main(sysv_args=None):
    parser = get_parser()
    if sysv_args is None:
        sysv_args = sys.argv[1:]
    return handle_args(NAME, parser.parse_args(sysv_args))


if __name__ == "__main__":
    sys.exit(main())
