# Author: Mathieu Corbin <mathieu.corbin@exoscale.com>
# Author: Christopher Glass <christopher.glass@exoscale.com>
#
# This file is part of ds-identify. See LICENSE file for license information.

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

EXOSCALE_DMI_NAME = "Exoscale"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    return dmi.product_name() == EXOSCALE_DMI_NAME
