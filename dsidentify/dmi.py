# This file is part of ds-identify. See LICENSE file for license information.
import logging
from typing import Dict, Optional

from dsidentify import util
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)

CHASSIS_ASSET_TAG = "chassis_asset_tag"
PRODUCT_NAME = "product_name"
PRODUCT_SERIAL = "product_serial"
PRODUCT_UUID = "product_uuid"

# The fields any datasource check may ask for, in reporting order.
DMI_FIELDS = (
    PRODUCT_NAME,
    PRODUCT_SERIAL,
    PRODUCT_UUID,
    CHASSIS_ASSET_TAG,
)


def _read_dmi_syspath(dmi_key_path: str) -> Optional[str]:
    """
    Reads a single dmi value from /sys/class/dmi/id
    """
    LOG.debug("querying dmi data %s", dmi_key_path)
    try:
        key_data = util.load_binary_file(dmi_key_path)
    except FileNotFoundError:
        LOG.debug("did not find %s", dmi_key_path)
        return None
    except OSError as e:
        LOG.debug("Could not read %s: %s", dmi_key_path, e)
        return None

    # uninitialized dmi values show as all \xff and /sys appends a '\n'.
    # in that event, return empty string.
    if key_data and key_data == b"\xff" * (len(key_data) - 1) + b"\n":
        key_data = b""

    try:
        return key_data.decode("utf8").strip()
    except UnicodeDecodeError as e:
        LOG.error(
            "utf-8 decode of content (%s) in %s failed: %s",
            key_data,
            dmi_key_path,
            e,
        )

    return None


class DMIReader:
    """Lazily read and cache dmi identity fields for one run.

    Each field is read from storage at most once. A missing field is cached
    as None just like a present one, so asking again returns None without
    another filesystem access.
    """

    def __init__(self, paths: Paths):
        self.paths = paths
        self._cache: Dict[str, Optional[str]] = {}

    def read(self, field: str) -> Optional[str]:
        if field not in self._cache:
            self._cache[field] = _read_dmi_syspath(
                self.paths.get_dmi_path(field)
            )
        return self._cache[field]

    def chassis_asset_tag(self) -> Optional[str]:
        return self.read(CHASSIS_ASSET_TAG)

    def product_name(self) -> Optional[str]:
        return self.read(PRODUCT_NAME)

    def product_serial(self) -> Optional[str]:
        return self.read(PRODUCT_SERIAL)

    def product_uuid(self) -> Optional[str]:
        return self.read(PRODUCT_UUID)

    def snapshot(self) -> Dict[str, Optional[str]]:
        return {field: self.read(field) for field in DMI_FIELDS}
