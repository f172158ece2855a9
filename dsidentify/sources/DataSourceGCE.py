# Author: Vaidas Jablonskis <jablonskis@gmail.com>
#
# This file is part of ds-identify. See LICENSE file for license information.

import logging

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)

GCE_PRODUCT_NAME = "Google Compute Engine"
GCE_SERIAL_PREFIX = "GoogleCloud"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    if dmi.product_name() == GCE_PRODUCT_NAME:
        return True

    # system-product-name is not always guaranteed (LP: #1674861)
    serial = dmi.product_serial()
    if serial is not None and serial.startswith(GCE_SERIAL_PREFIX):
        return True

    LOG.debug(
        "Not running on google cloud. product-name=%s serial=%s",
        dmi.product_name(),
        serial,
    )
    return False
