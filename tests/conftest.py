# Copyright (c) 2026 - 2026, Oracle and/or its affiliates. All rights reserved.
# Licensed under the Universal Permissive License v 1.0 as shown at https://oss.oracle.com/licenses/upl/.

"""Fixtures for tests."""
from collections.abc import Iterator
from pathlib import Path

import pytest

from mvnpom.config.defaults import defaults, load_defaults

# We need to pass fixture names as arguments to maintain an order.
# pylint: disable=redefined-outer-name


@pytest.fixture()
def test_dir() -> Path:
    """Set the root test_dir path.

    Returns
    -------
    Path
        The root path to the test directory.
    """
    return Path(__file__).parent


@pytest.fixture(autouse=True)
def setup_test() -> Iterator[None]:
    """Load the packaged defaults before each test and clear them afterwards."""
    load_defaults("")
    yield
    defaults.clear()
