# Copyright (C) 2012 Canonical Ltd.
# Copyright (C) 2012 Hewlett-Packard Development Company, L.P.
# Copyright (C) 2012 Yahoo! Inc.
#
# This file is part of ds-identify. See LICENSE file for license information.

import logging
import os
import sys
import time
from contextlib import suppress
from typing import Optional

DEFAULT_LOG_FORMAT = "%(asctime)s - %(filename)s[%(levelname)s]: %(message)s"
# DI_LOG value which keeps all output on stderr
LOG_TO_STDERR = "stderr"


def flush_loggers(root):
    if not root:
        return
    for h in root.handlers:
        if isinstance(h, (logging.StreamHandler)):
            with suppress(IOError):
                h.flush()
    flush_loggers(root.parent)


def reset_logging():
    """Remove all current handlers and unset log level."""
    log = logging.getLogger()
    handlers = list(log.handlers)
    for h in handlers:
        h.flush()
        h.close()
        log.removeHandler(h)
    log.setLevel(logging.NOTSET)


def setup_logging(level=logging.INFO, log_file: Optional[str] = None):
    """Log to stderr and, when log_file is given, append to log_file too.

    Failing to open log_file is reported on stderr and otherwise ignored:
    ds-identify runs before most of the filesystem may be writable.
    """
    # Always format logging timestamps as UTC time
    logging.Formatter.converter = time.gmtime
    reset_logging()

    formatter = logging.Formatter(DEFAULT_LOG_FORMAT)
    root = logging.getLogger()
    console = logging.StreamHandler(sys.stderr)
    console.setFormatter(formatter)
    console.setLevel(level)
    root.addHandler(console)
    root.setLevel(level)

    if not log_file or log_file == LOG_TO_STDERR:
        return
    try:
        log_dir = os.path.dirname(log_file)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        file_handler = logging.FileHandler(log_file)
    except OSError as e:
        sys.stderr.write("WARN: unable to log to %s: %s\n" % (log_file, e))
        return
    file_handler.setFormatter(formatter)
    file_handler.setLevel(level)
    root.addHandler(file_handler)


def level_from_debug_level(debug_level: int) -> int:
    """Translate a DEBUG_LEVEL setting (0 quiet .. 2 debug) to a log level."""
    if debug_level >= 2:
        return logging.DEBUG
    if debug_level == 1:
        return logging.INFO
    return logging.WARNING
