"""Shared fixtures for slnpath tests."""

import pytest

from slnpath.config import PathConfig, PathFlavor


@pytest.fixture
def posix_config():
    """POSIX host: '/' is both native and canonical."""
    return PathConfig(flavor=PathFlavor.POSIX, native_separator="/", canonical_separator="/")


@pytest.fixture
def windows_config():
    """Windows host canonicalizing to forward slashes."""
    return PathConfig(flavor=PathFlavor.WINDOWS, native_separator="\\", canonical_separator="/")


@pytest.fixture
def windows_native_config():
    """Windows host keeping its native backslashes."""
    return PathConfig(flavor=PathFlavor.WINDOWS, native_separator="\\", canonical_separator="\\")
