"""Shared test helpers for creating fake JVM installations.

Each helper creates a minimal but realistic directory structure that
simulates a JDK, JRE or Apple framework bundle. Executables are empty
files marked executable so ``PATH`` search accepts them.
"""

from __future__ import annotations

import stat
from pathlib import Path

from jvmlocate.host import HostPlatform, JvmContext, JvmProperties


def touch(path: Path) -> Path:
    """Create an empty file, including parent directories."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"")
    return path


def make_executable(path: Path) -> Path:
    """Create an empty executable file."""
    touch(path)
    path.chmod(path.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return path


def create_jre(root: Path, name: str = "jre", exe_suffix: str = "") -> Path:
    """Create a standalone JRE with ``bin/java`` and ``lib/rt.jar``."""
    jre = root / name
    make_executable(jre / "bin" / f"java{exe_suffix}")
    touch(jre / "lib" / "rt.jar")
    return jre


def create_jdk(
    root: Path,
    name: str = "jdk",
    tools_jar: bool = True,
    exe_suffix: str = "",
) -> Path:
    """Create a JDK with an embedded ``jre`` directory.

    Layout::

        <name>/bin/java, <name>/bin/javac, <name>/bin/javadoc
        <name>/lib/tools.jar          (unless tools_jar=False)
        <name>/jre/bin/java
        <name>/jre/lib/rt.jar
    """
    jdk = root / name
    for tool in ("java", "javac", "javadoc"):
        make_executable(jdk / "bin" / f"{tool}{exe_suffix}")
    if tools_jar:
        touch(jdk / "lib" / "tools.jar")
    create_jre(jdk, "jre", exe_suffix)
    return jdk


def create_apple_bundle(root: Path) -> Path:
    """Create an Apple JavaVM.framework version directory.

    Returns the ``Home`` directory; ``classes.jar`` lives in the sibling
    ``Classes`` directory and there is no ``tools.jar``.
    """
    version_dir = root / "JavaVM.framework" / "Versions" / "1.6"
    home = version_dir / "Home"
    for tool in ("java", "javac"):
        make_executable(home / "bin" / tool)
    touch(version_dir / "Classes" / "classes.jar")
    return home


def make_context(
    java_home: Path | str,
    system: str = "linux",
    vendor: str = "Oracle Corporation",
    version: str = "1.6.0_20",
    vm_version: str = "16.3-b01",
    search_path: str = "",
) -> JvmContext:
    """Build a context with fixed properties and a controlled PATH.

    The default ``search_path`` of "" makes every PATH search miss.
    """
    return JvmContext(
        host=HostPlatform(system=system, search_path=search_path),
        properties=JvmProperties(
            java_home=str(java_home),
            java_vendor=vendor,
            java_version=version,
            java_vm_version=vm_version,
        ),
    )
