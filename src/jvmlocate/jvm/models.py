"""Data models for JVM discovery.

Contains the value types produced by ``InstallationResolver`` and
``PathResolver``: the vendor tag, the resolved installation, and the
result of an executable lookup.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path


class Vendor(Enum):
    """Closed classification of JVM vendors with layout quirks."""

    GENERIC = "generic"
    APPLE = "apple"
    IBM = "ibm"


class ExecutableSource(Enum):
    """Where an executable path came from.

    ``UNRESOLVED`` marks the bare platform executable name returned when
    neither the installation nor ``PATH`` had the tool.
    """

    HOME = "home"
    PATH = "path"
    UNRESOLVED = "unresolved"


@dataclass(frozen=True)
class Installation:
    """A discovered or user-supplied JVM installation.

    Attributes:
        base: Directory supplied by the caller or reported by the process.
        home: Computed installation root used for all path derivations.
        vendor: Vendor tag, fixed at construction.
        user_supplied: True when ``base`` came from an explicit caller
            directory. Executable lookup is then strict.
    """

    base: Path
    home: Path
    vendor: Vendor
    user_supplied: bool


@dataclass(frozen=True)
class ResolvedExecutable:
    """Outcome of resolving one tool against an installation.

    Attributes:
        tool: Logical tool name that was looked up (e.g. "javac").
        path: The executable path. Relative bare name when unresolved.
        source: Which step of the lookup produced ``path``.
    """

    tool: str
    path: Path
    source: ExecutableSource

    @property
    def is_resolved(self) -> bool:
        return self.source is not ExecutableSource.UNRESOLVED

    def __fspath__(self) -> str:
        return str(self.path)

    def __str__(self) -> str:
        return str(self.path)
