# Copyright (C) 2009-2010 Canonical Ltd.
# Copyright (C) 2012 Hewlett-Packard Development Company, L.P.
# Copyright (C) 2012 Yahoo! Inc.
#
# This file is part of ds-identify. See LICENSE file for license information.

import logging

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

LOG = logging.getLogger(__name__)

# Both the system serial and uuid of an AWS hvm instance start with this,
# though the uuid is often reported in upper case.
EC2_ID_PREFIX = "ec2"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    """Identify AWS hvm instances by matching dmi serial and uuid.

    Both values must be present, must start with 'ec2' and must be equal
    ignoring case.
    """
    serial = dmi.product_serial()
    uuid = dmi.product_uuid()
    if serial is None or uuid is None:
        return False

    if not (
        serial.lower().startswith(EC2_ID_PREFIX)
        and uuid.lower().startswith(EC2_ID_PREFIX)
    ):
        return False
    if serial.lower() != uuid.lower():
        LOG.debug(
            "Ec2 prefixed product serial %s does not match uuid %s",
            serial,
            uuid,
        )
        return False
    return True
