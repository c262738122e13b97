"""Installation resolver: from a candidate directory to an ``Installation``.

Discovery Algorithm (current JVM, no candidate supplied):
    1. Canonicalize the reported ``java.home`` into the base directory.
    2. If ``tools.jar`` is found from the base at ``<X>/lib/tools.jar``,
       the home is ``X``. A JVM often reports its embedded JRE as
       ``java.home``; the archive climbs back to the enclosing JDK.
    3. Else, if the base is named ``jre`` and ``<parent>/bin/java``
       exists, the home is the parent.
    4. Else the base is the home.

A caller-supplied candidate skips the heuristic entirely: it must be an
existing directory and is taken verbatim as both base and home.
"""

from __future__ import annotations

import logging
from pathlib import Path

from jvmlocate.exceptions import InvalidHomeError
from jvmlocate.host.context import JvmContext
from jvmlocate.jvm.models import Installation, Vendor
from jvmlocate.jvm.paths import PathResolver
from jvmlocate.jvm.vendors import classify_vendor, find_tools_jar

logger = logging.getLogger(__name__)


class InstallationResolver:
    """Resolves JVM installations against a read-only context.

    Usage::

        resolver = InstallationResolver(JvmContext.current())
        jvm = resolver.current()
        print(jvm.home, jvm.vendor)
    """

    def __init__(self, context: JvmContext) -> None:
        self._context = context

    def _vendor(self) -> Vendor:
        return classify_vendor(self._context.properties.java_vendor)

    def find_java_home(self, java_base: Path) -> Path:
        """Compute the installation home from a discovered base directory."""
        tools_jar = find_tools_jar(java_base, self._context)
        if tools_jar is not None:
            home = tools_jar.parent.parent
            logger.debug("Found %s, using %s as java home", tools_jar, home)
            return home
        if java_base.name.lower() == "jre" and (java_base.parent / "bin" / "java").exists():
            logger.debug("%s is the JRE of an enclosing JDK", java_base)
            return java_base.parent
        return java_base

    def resolve(self, candidate_base: Path | str | None = None) -> Installation:
        """Resolve an installation.

        Args:
            candidate_base: Directory the caller asserts is a java home.
                None means the JVM described by the context.

        Returns:
            A new, immutable ``Installation``.

        Raises:
            InvalidHomeError: If ``candidate_base`` is not an existing
                directory.
        """
        if candidate_base is None:
            java_base = Path(self._context.properties.java_home).resolve()
            return Installation(
                base=java_base,
                home=self.find_java_home(java_base),
                vendor=self._vendor(),
                user_supplied=False,
            )

        supplied = Path(candidate_base)
        if not str(candidate_base).strip() or not supplied.is_dir():
            raise InvalidHomeError(candidate_base)
        return Installation(
            base=supplied,
            home=supplied,
            vendor=self._vendor(),
            user_supplied=True,
        )

    def current(self) -> Installation:
        """Resolve the JVM described by the context."""
        return self.resolve(None)

    def for_home(self, java_home: Path | str | None) -> Installation:
        """Resolve and validate a caller-supplied java home.

        The home is validated by locating its ``java`` executable.

        Raises:
            InvalidHomeError: If ``java_home`` is None or not a directory.
            JavaHomeError: If ``<java_home>/bin/java`` does not exist.
        """
        if java_home is None:
            raise InvalidHomeError(java_home)
        installation = self.resolve(java_home)
        PathResolver(self._context).java_executable(installation)
        return installation
