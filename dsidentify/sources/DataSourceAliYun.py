# This file is part of ds-identify. See LICENSE file for license information.

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths

ALIYUN_PRODUCT = "Alibaba Cloud ECS"


def ds_detect(dmi: DMIReader, paths: Paths) -> bool:
    return dmi.product_name() == ALIYUN_PRODUCT
