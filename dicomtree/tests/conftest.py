# Copyright 2008-2021 dicomtree authors. See LICENSE file for details.
"""Fixtures used in different tests."""

import pytest

from dicomtree import config


@pytest.fixture
def enable_debugging():
    original = config.debugging
    config.debug(True, default_handler=False)
    yield
    config.debug(original, default_handler=False)


@pytest.fixture
def shallow_nesting():
    value = config.max_nesting_depth
    config.max_nesting_depth = 1
    yield
    config.max_nesting_depth = value


@pytest.fixture
def tiny_buffer_limit():
    value = config.max_buffer_size
    config.max_buffer_size = 16
    yield
    config.max_buffer_size = value


@pytest.fixture
def write_file(tmp_path):
    """Return a function that writes bytes to a temporary file."""
    def _write(data, name="test.dcm"):
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
