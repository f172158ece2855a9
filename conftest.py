"""Global conftest.py

This conftest is used for the unit tests in ``tests/unittests/``.

Any imports that are performed at the top-level here must be installed wherever
any of these tests run: that is to say, they must be listed in
``test-requirements.txt``.
"""
import logging

import pytest

from dsidentify import helpers


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any logging setup done by the code under test.

    The command line entry point replaces the root logger's handlers and may
    open a log file below the test's root directory.
    """
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            h.close()
            root.removeHandler(h)
    for h in handlers:
        if h not in root.handlers:
            root.addHandler(h)
    root.setLevel(level)


@pytest.fixture
def paths(tmp_path):
    """
    Return a helpers.Paths object rooted at a tmp_path.

    (This uses the builtin tmp_path fixture.)
    """
    return helpers.Paths(str(tmp_path))
