"""Host operating-system collaborator.

``HostPlatform`` is the narrow seam through which the resolvers learn
anything about the machine they run on: whether it is Windows, how an
executable file is named there, and where a command lives on ``PATH``.
Tests construct it directly with a fixed system name and search path
instead of patching the real process.
"""

from __future__ import annotations

import platform
import shutil
from dataclasses import dataclass
from pathlib import Path, PurePath

WINDOWS = "windows"
MACOS = "macos"
LINUX = "linux"

_WINDOWS_EXECUTABLE_SUFFIX = ".exe"


def current_system() -> str:
    """Return the current platform identifier."""
    system = platform.system().lower()
    if system == "darwin":
        return MACOS
    return WINDOWS if system == "windows" else LINUX


@dataclass(frozen=True)
class HostPlatform:
    """Platform flags, executable naming and PATH search.

    Attributes:
        system: One of ``"windows"``, ``"macos"`` or ``"linux"``.
        search_path: Explicit ``PATH`` string to search. ``None`` means
            the live process ``PATH``.
    """

    system: str = LINUX
    search_path: str | None = None

    @classmethod
    def current(cls) -> HostPlatform:
        return cls(system=current_system())

    @property
    def is_windows(self) -> bool:
        return self.system == WINDOWS

    def executable_name(self, path: str | PurePath) -> Path:
        """Return the platform-correct executable name for ``path``.

        On Windows a ``.exe`` suffix is appended unless the final segment
        already ends in ``.exe``. Elsewhere the path is unchanged.
        """
        path = Path(path)
        if self.is_windows and path.suffix.lower() != _WINDOWS_EXECUTABLE_SUFFIX:
            return path.with_name(path.name + _WINDOWS_EXECUTABLE_SUFFIX)
        return path

    def find_in_path(self, command: str) -> Path | None:
        """Search ``PATH`` for ``command``.

        Returns:
            Absolute path of the first match, or None when not found.
        """
        found = shutil.which(command, path=self.search_path)
        if found is None:
            return None
        return Path(found).absolute()
