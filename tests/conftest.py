"""Shared fixtures for jvmlocate tests."""

import pathlib

import pytest

from tests.jvm.helpers import create_jdk, make_executable


@pytest.fixture
def jdk_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a temporary JDK with tools.jar and an embedded JRE."""
    return create_jdk(tmp_path)


@pytest.fixture
def path_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a directory standing in for a PATH entry holding javac."""
    bin_dir = tmp_path / "path-bin"
    make_executable(bin_dir / "javac")
    return bin_dir
