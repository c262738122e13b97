"""Path resolver: executables and libraries inside an ``Installation``.

Executable lookup falls back in this order, first hit wins:

    1. ``<home>/bin/<tool>`` (platform executable name).
    2. User-supplied installation: fail with ``JavaHomeError``.
    3. The tool found on ``PATH``. It may belong to a different JVM.
    4. The bare platform executable name, left for the process launcher
       to find. Marked ``ExecutableSource.UNRESOLVED``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path
from typing import TypeVar

from jvmlocate.exceptions import JavaHomeError
from jvmlocate.host.context import JvmContext
from jvmlocate.jvm.models import ExecutableSource, Installation, ResolvedExecutable
from jvmlocate.jvm.vendors import traits_for

logger = logging.getLogger(__name__)

V = TypeVar("V")


class PathResolver:
    """Computes tool and library paths for resolved installations.

    Stateless apart from the context it reads; one resolver serves any
    number of installations.
    """

    def __init__(self, context: JvmContext) -> None:
        self._context = context

    def executable(self, installation: Installation, tool: str) -> ResolvedExecutable:
        """Resolve ``tool`` against ``installation``.

        Args:
            installation: The installation to search.
            tool: Logical tool name, e.g. "java" or "javac".

        Returns:
            The executable and the lookup step that produced it.

        Raises:
            JavaHomeError: If the installation is user supplied and
                ``bin/<tool>`` is missing.
        """
        host = self._context.host
        candidate = host.executable_name(installation.home / "bin" / tool).absolute()
        if candidate.is_file():
            return ResolvedExecutable(tool, candidate, ExecutableSource.HOME)

        if installation.user_supplied:
            raise JavaHomeError(tool, candidate)

        path_executable = host.find_in_path(tool)
        if path_executable is not None:
            logger.info(
                "Unable to find the '%s' executable using home: %s. "
                "We found it on the PATH: %s.",
                tool, installation.home, path_executable,
            )
            return ResolvedExecutable(tool, path_executable, ExecutableSource.PATH)

        logger.warning(
            "Unable to find the '%s' executable. Tried the java home: %s and the PATH. "
            "We will assume the executable can be ran in the current working folder.",
            tool, installation.home,
        )
        return ResolvedExecutable(tool, host.executable_name(tool), ExecutableSource.UNRESOLVED)

    def java_executable(self, installation: Installation) -> ResolvedExecutable:
        return self.executable(installation, "java")

    def javadoc_executable(self, installation: Installation) -> ResolvedExecutable:
        return self.executable(installation, "javadoc")

    def runtime_jar(self, installation: Installation) -> Path | None:
        """Runtime library of the installation, or None if absent."""
        return traits_for(installation.vendor).runtime_jar(installation)

    def tools_jar(self, installation: Installation) -> Path | None:
        """Development archive of the installation, or None if absent."""
        return traits_for(installation.vendor).tools_jar(installation, self._context)

    def inheritable_environment(
        self, installation: Installation, env: Mapping[str, V],
    ) -> Mapping[str, V]:
        """Filter ``env`` down to what a spawned JVM should inherit."""
        return traits_for(installation.vendor).inheritable_environment(env)

    def supports_apple_script(self, installation: Installation) -> bool:
        return traits_for(installation.vendor).supports_apple_script

    def is_ibm(self, installation: Installation) -> bool:
        return traits_for(installation.vendor).is_ibm

    def describe(self, installation: Installation) -> str:
        """Human-readable description of the installation."""
        if installation.user_supplied:
            return f"User-supplied java: {installation.base}"
        props = self._context.properties
        return f"{props.java_version} ({props.java_vendor} {props.java_vm_version})"
