# Copyright (C) 2012 Canonical Ltd.
# Copyright (C) 2012, 2013 Hewlett-Packard Development Company, L.P.
# Copyright (C) 2012 Yahoo! Inc.
#
# This file is part of ds-identify. See LICENSE file for license information.

import logging
import os
import sys
from typing import Optional, Union

import yaml

LOG = logging.getLogger(__name__)


def decode_binary(blob: Union[str, bytes], encoding="utf-8") -> str:
    # Converts a binary type into a text type using given encoding.
    return blob if isinstance(blob, str) else blob.decode(encoding=encoding)


def encode_text(text: Union[str, bytes], encoding="utf-8") -> bytes:
    # Converts a text string into a binary type using given encoding.
    return text if isinstance(text, bytes) else text.encode(encoding=encoding)


def obj_name(obj):
    if isinstance(obj, type):
        return str(obj.__name__)
    return obj_name(obj.__class__)


def load_binary_file(fname: Union[str, os.PathLike]) -> bytes:
    LOG.debug("Reading from %s", fname)
    with open(fname, "rb") as ifh:
        contents = ifh.read()
    LOG.debug("Read %s bytes from %s", len(contents), fname)
    return contents


def load_yaml(blob, default=None, allowed=(dict,)):
    loaded = default
    try:
        blob = decode_binary(blob)
        LOG.debug(
            "Attempting to load yaml from string "
            "of length %s with allowed root types %s",
            len(blob),
            allowed,
        )
        converted = yaml.safe_load(blob)
        if converted is None:
            LOG.debug("loaded blob returned None, returning default.")
            converted = default
        elif not isinstance(converted, allowed):
            # Yes this will just be caught, but thats ok for now...
            raise TypeError(
                "Yaml load allows %s root types, but got %s instead"
                % (allowed, obj_name(converted))
            )
        loaded = converted
    except (yaml.YAMLError, TypeError, ValueError) as e:
        msg = "Failed loading yaml blob"
        mark = None
        if hasattr(e, "context_mark") and getattr(e, "context_mark"):
            mark = getattr(e, "context_mark")
        elif hasattr(e, "problem_mark") and getattr(e, "problem_mark"):
            mark = getattr(e, "problem_mark")
        if mark:
            msg += (
                '. Invalid format at line {line} column {col}: "{err}"'.format(
                    line=mark.line + 1, col=mark.column + 1, err=e
                )
            )
        else:
            msg += ". {err}".format(err=e)
        LOG.warning(msg)
    return loaded


def ensure_dir(path):
    if not os.path.isdir(path):
        LOG.debug("Creating directory %s", path)
        os.makedirs(path)


def logexc(
    log, msg, *args, log_level: int = logging.WARNING, exc_info=True
) -> None:
    log.log(log_level, msg, *args)
    log.debug(msg, exc_info=exc_info, *args)


def error(msg, rc=1, fmt="Error:\n{}"):
    r"""
    Print error to stderr and return rc

    @param msg: message to print
    @param rc: return code (default: 1)
    @param fmt: format string for putting message in (default: 'Error:\n {}')
    """
    print(fmt.format(msg), file=sys.stderr)
    return rc


def get_env_int(name: str, default: int) -> int:
    """Return environment variable ``name`` as an int, or ``default``."""
    value: Optional[str] = os.environ.get(name)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        LOG.warning("Ignoring non-integer %s=%r", name, value)
        return default
