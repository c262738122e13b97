"""Rich output formatting helpers for the jvmlocate CLI.

Text output renders installations and executables as tables; JSON output
goes through the ``*_to_json`` helpers so both formats report the same
fields.
"""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table
from rich.text import Text

from jvmlocate.jvm import ExecutableSource, Installation, PathResolver, ResolvedExecutable

_SOURCE_STYLES: dict[ExecutableSource, str] = {
    ExecutableSource.HOME: "bold green",
    ExecutableSource.PATH: "yellow",
    ExecutableSource.UNRESOLVED: "bold red",
}

console = Console()


def source_style(source: ExecutableSource) -> str:
    """Return the Rich style string for an executable source."""
    return _SOURCE_STYLES.get(source, "white")


def _optional_path(path: Path | None) -> str | None:
    return str(path) if path is not None else None


def executable_to_json(executable: ResolvedExecutable) -> dict[str, Any]:
    return {
        "tool": executable.tool,
        "path": str(executable.path),
        "source": executable.source.value,
        "resolved": executable.is_resolved,
    }


def installation_to_json(
    installation: Installation,
    paths: PathResolver,
    java: ResolvedExecutable,
) -> dict[str, Any]:
    """Convert an installation and its derived paths to a JSON-ready dict.

    Args:
        installation: The resolved installation.
        paths: Resolver used to derive library locations.
        java: The already-resolved ``java`` executable.

    Returns:
        Dictionary of installation attributes and derived paths.
    """
    return {
        "description": paths.describe(installation),
        "base": str(installation.base),
        "home": str(installation.home),
        "vendor": installation.vendor.value,
        "user_supplied": installation.user_supplied,
        "java_executable": executable_to_json(java),
        "tools_jar": _optional_path(paths.tools_jar(installation)),
        "runtime_jar": _optional_path(paths.runtime_jar(installation)),
        "supports_apple_script": paths.supports_apple_script(installation),
    }


def print_installation(data: Mapping[str, Any]) -> None:
    """Print an installation summary table.

    Args:
        data: Output of ``installation_to_json``.
    """
    java = data["java_executable"]
    table = Table(title=data["description"], show_header=False)
    table.add_column("Field", style="bold")
    table.add_column("Value")
    table.add_row("Base", data["base"])
    table.add_row("Home", data["home"])
    table.add_row("Vendor", data["vendor"])
    table.add_row("User supplied", "yes" if data["user_supplied"] else "no")
    table.add_row(
        "java",
        Text(f"{java['path']} ({java['source']})",
             style=source_style(ExecutableSource(java["source"]))),
    )
    table.add_row("tools.jar", data["tools_jar"] or Text("-", style="dim"))
    table.add_row("Runtime jar", data["runtime_jar"] or Text("-", style="dim"))
    console.print(table)


def print_executable(executable: ResolvedExecutable) -> None:
    """Print a single resolved executable with its source."""
    style = source_style(executable.source)
    console.print(
        Text.assemble(
            (f"{executable.tool}: ", "bold"),
            (str(executable.path), ""),
            ("  ", ""),
            (executable.source.value, style),
        )
    )


def print_environment(env: Mapping[str, str]) -> None:
    """Print environment variables as sorted KEY=value lines."""
    if not env:
        console.print("[dim]No environment variables to inherit.[/dim]")
        return
    for key in sorted(env):
        console.print(f"{key}={env[key]}", markup=False, highlight=False, soft_wrap=True)
