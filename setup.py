# Copyright (C) 2009 Canonical Ltd.
# Copyright (C) 2012 Yahoo! Inc.
#
# This file is part of ds-identify. See LICENSE file for license information.

# Distutils magic for ds-identify

import os
import sys

import setuptools

# Python-path here is a little unpredictable as setup.py could be run
# from a directory other than the root of the repo, so ensure we can find
# our utils
sys.path.insert(0, os.path.dirname(os.path.realpath(__file__)))
# isort: off
from setup_utils import get_version, read_requires  # noqa: E402

# isort: on
del sys.path[0]

requirements = read_requires()
test_requirements = read_requires("test-requirements.txt")

setuptools.setup(
    name="ds-identify",
    version=get_version(),
    description="Early boot cloud datasource identification for cloud-init",
    python_requires=">=3.8",
    packages=setuptools.find_packages(exclude=["tests.*", "tests"]),
    license="Dual-licensed under GPLv3 or Apache 2.0",
    install_requires=requirements,
    extras_require={"test": test_requirements},
    entry_points={
        "console_scripts": [
            "ds-identify = dsidentify.cmd.main:main",
        ],
    },
)
