# This file is part of ds-identify. See LICENSE file for license information.

import logging
import os
from typing import Optional

from dsidentify import settings

LOG = logging.getLogger(__name__)


class Paths:
    """Filesystem locations used by ds-identify, rooted at ``root``.

    Tests (and image builders) point ``root`` at a populated directory tree;
    on a booting system it is ``/``.
    """

    def __init__(self, root: str = settings.DEFAULT_PATH_ROOT):
        self.root: str = root
        self.cloud_cfg: str = self._rooted(settings.CLOUD_CONFIG)
        self.cloud_cfg_d: str = self._rooted(settings.CLOUD_CONFIG_D)
        self.run_dir: str = self._rooted(settings.DEFAULT_RUN_DIR)
        self.cfg_out: str = self._rooted(settings.CFG_OUT)
        self.log_file: str = self._rooted(settings.DEFAULT_LOG_FILE)
        self.dmi_dir: str = self._rooted(settings.DMI_SYS_PATH)

    def _rooted(self, *parts: str) -> str:
        return os.path.join(self.root, *parts)

    def get_dmi_path(self, field: str) -> str:
        return os.path.join(self.dmi_dir, field)

    def get_seed_path(
        self, seed_type: str, filename: str, prefix: Optional[str] = None
    ) -> str:
        """Return <root>/[prefix/]var/lib/cloud/seed/<seed_type>/<filename>"""
        parts = [prefix] if prefix else []
        parts.extend([settings.SEED_DIR, seed_type, filename])
        return self._rooted(*parts)

    def seed_path_exists(
        self, seed_type: str, filename: str, prefix: Optional[str] = None
    ) -> bool:
        path = self.get_seed_path(seed_type, filename, prefix=prefix)
        try:
            os.stat(path)
        except FileNotFoundError:
            return False
        except OSError as e:
            LOG.debug("Unable to check seed path %s: %s", path, e)
            return False
        return True

    def __repr__(self):
        return "%s(root=%r)" % (self.__class__.__name__, self.root)
