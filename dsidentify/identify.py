# This file is part of ds-identify. See LICENSE file for license information.

"""Decide which datasources cloud-init should try on this boot.

The decision is written to /run/cloud-init/cloud.cfg as a datasource_list
which cloud-init reads in place of the configured one.
"""

import logging
import os
from typing import List, Optional

from dsidentify import atomic_helper, config, safeyaml, settings, sources, util
from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)

MODE_SEARCH = "search"
# A configured list of one entry is trusted without running any check.
MODE_SINGLE = "single"


class DsIdentify:
    def __init__(self, paths: Paths, dmi: Optional[DMIReader] = None):
        self.paths = paths
        self.dmi = dmi if dmi is not None else DMIReader(paths)
        LOG.debug("PATH_ROOT: %s", self.paths.root)
        LOG.debug("CFG_OUT: %s", self.paths.cfg_out)

    def dscheck(self, dsname: str) -> bool:
        found = sources.ds_detect(dsname, self.dmi, self.paths)
        LOG.debug("check for '%s' returned %s", dsname, found)
        return found

    def find_datasources(self, dslist: List[str]) -> List[str]:
        """Return the entries of dslist whose platform check passes."""
        return [dsname for dsname in dslist if self.dscheck(dsname)]

    def identify(self) -> List[str]:
        dslist = config.get_datasource_list(self.paths)
        if len(dslist) == 1:
            mode = MODE_SINGLE
            found = list(dslist)
        else:
            mode = MODE_SEARCH
            found = self.find_datasources(dslist)

        if settings.DS_NONE not in found:
            found.append(settings.DS_NONE)

        self.print_info(dslist, mode, found)
        return found

    def print_info(self, dslist: List[str], mode: str, found: List[str]):
        lines = [
            "DMI_%s=%s" % (field.upper(), "" if value is None else value)
            for field, value in self.dmi.snapshot().items()
        ]
        lines.extend(
            [
                "DSLIST=%s" % " ".join(dslist),
                "MODE=%s" % mode,
                "FOUND=%s" % " ".join(found),
            ]
        )
        LOG.info("ds-identify results:\n%s", "\n".join(lines))

    def write_cfg_out(self, dslist: List[str]):
        """Write dslist to the cloud.cfg under the run directory.

        Errors are not handled here; without this file the run has failed.
        """
        content = safeyaml.dumps({settings.DATASOURCE_LIST_KEY: dslist})
        util.ensure_dir(os.path.dirname(self.paths.cfg_out))
        atomic_helper.write_file(self.paths.cfg_out, content, omode="w")
        LOG.info(
            "Wrote %s: %s=%s",
            self.paths.cfg_out,
            settings.DATASOURCE_LIST_KEY,
            dslist,
        )

    def run(self) -> List[str]:
        found = self.identify()
        self.write_cfg_out(found)
        return found
