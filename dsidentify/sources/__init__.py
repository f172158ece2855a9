# This file is part of ds-identify. See LICENSE file for license information.

import enum
from typing import Callable, Dict

from dsidentify.dmi import DMIReader
from dsidentify.helpers import Paths
from dsidentify.sources import (
    DataSourceAliYun,
    DataSourceAzure,
    DataSourceConfigDrive,
    DataSourceEc2,
    DataSourceExoscale,
    DataSourceGCE,
    DataSourceNoCloud,
    DataSourceOracle,
)

DetectFunc = Callable[[DMIReader, Paths], bool]


class DataSourceName(enum.Enum):
    ALIYUN = "AliYun"
    AZURE = "Azure"
    CONFIG_DRIVE = "ConfigDrive"
    EC2 = "Ec2"
    EXOSCALE = "Exoscale"
    GCE = "GCE"
    NOCLOUD = "NoCloud"
    ORACLE = "Oracle"
    # Any configured name this tool has no check for
    UNKNOWN = "_undef"

    @classmethod
    def from_name(cls, name: str) -> "DataSourceName":
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


def _never_detected(dmi: DMIReader, paths: Paths) -> bool:
    return False


DS_DETECT: Dict[DataSourceName, DetectFunc] = {
    DataSourceName.ALIYUN: DataSourceAliYun.ds_detect,
    DataSourceName.AZURE: DataSourceAzure.ds_detect,
    DataSourceName.CONFIG_DRIVE: DataSourceConfigDrive.ds_detect,
    DataSourceName.EC2: DataSourceEc2.ds_detect,
    DataSourceName.EXOSCALE: DataSourceExoscale.ds_detect,
    DataSourceName.GCE: DataSourceGCE.ds_detect,
    DataSourceName.NOCLOUD: DataSourceNoCloud.ds_detect,
    DataSourceName.ORACLE: DataSourceOracle.ds_detect,
    DataSourceName.UNKNOWN: _never_detected,
}


def ds_detect(dsname: str, dmi: DMIReader, paths: Paths) -> bool:
    """Run the platform check registered for ``dsname``.

    Unknown names are never detected.
    """
    return DS_DETECT[DataSourceName.from_name(dsname)](dmi, paths)
