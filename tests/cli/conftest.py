"""Shared fixtures for CLI tests.

Provides a Click runner and an environment builder that points
``JAVA_HOME`` at a temporary installation and ``PATH`` at an empty
directory, so nothing on the real machine leaks into results.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def runner() -> CliRunner:
    """Create a Click CliRunner for invoking commands."""
    return CliRunner()


@pytest.fixture
def cli_env(tmp_path: Path) -> Callable[..., dict[str, str | None]]:
    """Build an environment mapping for ``CliRunner.invoke``."""
    empty_path = tmp_path / "empty-path"
    empty_path.mkdir()

    def build(
        java_home: Path | None,
        vendor: str = "Oracle Corporation",
        search_path: Path | None = None,
        **extra: str,
    ) -> dict[str, str | None]:
        env: dict[str, str | None] = {
            "JAVA_HOME": str(java_home) if java_home is not None else None,
            "JVMLOCATE_JAVA_VENDOR": vendor,
            "JVMLOCATE_JAVA_VERSION": "1.6.0_20",
            "JVMLOCATE_JAVA_VM_VERSION": "16.3-b01",
            "JVMLOCATE_PROPERTIES": None,
            "PATH": str(search_path or empty_path),
        }
        env.update(extra)
        return env

    return build
