"""jvmlocate exception hierarchy.

All public exceptions inherit from JvmLocateError, giving callers a single
base class to catch when they want to handle any jvmlocate-specific failure
without swallowing unrelated errors.
"""

from __future__ import annotations

from pathlib import Path


class JvmLocateError(Exception):
    """Base exception for all jvmlocate errors."""


class InvalidHomeError(JvmLocateError, ValueError):
    """Raised when a supplied java home is not an existing directory.

    This is an argument error, not a discovery failure: it is raised
    before any layout heuristic runs and carries the offending path.
    """

    def __init__(self, path: Path | str | None) -> None:
        self.path = path
        super().__init__(
            f"Supplied javaHome must be a valid directory. You supplied: {path}"
        )


class JavaHomeError(JvmLocateError):
    """Raised when an asserted java home lacks an expected executable.

    Only user-supplied installations raise this; installations discovered
    from the process context degrade through the PATH fallback instead.
    """

    def __init__(self, tool: str, location: Path) -> None:
        self.tool = tool
        self.location = location
        super().__init__(
            "The supplied javaHome seems to be invalid. "
            f"I cannot find the {tool} executable. Tried location: {location}"
        )


class PropertiesError(JvmLocateError):
    """Raised when the JVM system properties cannot be loaded.

    Covers a missing ``java.home`` and unreadable or malformed
    properties files.
    """
