# This file is part of ds-identify. See LICENSE file for license information.

"""Find the datasource_list configured in cloud.cfg and cloud.cfg.d/."""

import logging
import os
from typing import List, Optional

from dsidentify import settings, util
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)


def get_datasource_list_from_path(path: str) -> Optional[List[str]]:
    """Return the datasource_list defined in the yaml file at ``path``.

    None means the file does not define one: it is missing, unreadable, not
    a yaml mapping, has no datasource_list key, or the value is not a list.
    Entries which are not strings are dropped from an otherwise valid list.
    """
    try:
        blob = util.load_binary_file(path)
    except OSError as e:
        LOG.debug("Unable to read config %s: %s", path, e)
        return None

    # Anything that is not a yaml mapping loads as the empty default.
    cfg = util.load_yaml(blob, default={})
    if settings.DATASOURCE_LIST_KEY not in cfg:
        return None

    dslist = cfg[settings.DATASOURCE_LIST_KEY]
    if not isinstance(dslist, list):
        LOG.warning(
            "Ignoring %s in %s: expected a list, got %s",
            settings.DATASOURCE_LIST_KEY,
            path,
            util.obj_name(dslist),
        )
        return None

    found = []
    for entry in dslist:
        if isinstance(entry, str):
            found.append(entry)
        else:
            LOG.debug("Skipping non-string datasource %r in %s", entry, path)
    return found


def list_conf_d(confd: str) -> List[str]:
    """Return the files in ``confd`` in the order they are applied."""
    try:
        names = sorted(os.listdir(confd))
    except OSError as e:
        LOG.debug("No config fragments read from %s: %s", confd, e)
        return []
    return [
        path
        for path in (os.path.join(confd, name) for name in names)
        if os.path.isfile(path)
    ]


def get_datasource_list(paths: Paths) -> List[str]:
    """Return the datasource_list to search.

    cloud.cfg is read first, then every file in cloud.cfg.d in filename
    order. The last file defining datasource_list wins outright; lists are
    never merged. Without any definition the builtin list is returned.
    """
    dslist = get_datasource_list_from_path(paths.cloud_cfg)
    source = paths.cloud_cfg if dslist is not None else None
    for path in list_conf_d(paths.cloud_cfg_d):
        found = get_datasource_list_from_path(path)
        if found is not None:
            dslist = found
            source = path

    if dslist is None:
        LOG.debug("No datasource_list configured, using builtin list")
        return list(settings.DEFAULT_DATASOURCE_LIST)
    LOG.debug("Using datasource_list %s from %s", dslist, source)
    return dslist
