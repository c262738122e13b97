"""Vendor variants and their layout rules.

Each ``Vendor`` maps to a ``VendorTraits`` record holding the behaviour
that differs between JVM distributions:

=====================  ===========================  ==========================
Behaviour              GENERIC (and IBM)            APPLE
=====================  ===========================  ==========================
runtime library        ``<base>/lib/rt.jar``        ``<home>/../Classes/
                                                    classes.jar``
development archive    ``tools.jar`` search         generic search, else the
                       (see ``find_tools_jar``)     runtime library
inheritable env vars   unchanged                    drops ``APP_NAME_<n>`` and
                                                    ``JAVA_MAIN_CLASS_<n>``
AppleScript support    no                           yes
=====================  ===========================  ==========================

Apple JVMs on macOS ship as framework bundles where ``classes.jar`` holds
both the runtime and the compiler classes, so there may be no separate
``tools.jar`` at all. The macOS application launcher injects
``APP_NAME_<pid>`` and ``JAVA_MAIN_CLASS_<pid>`` into the environment; a
child JVM inheriting them would pick up the parent's dock name and class.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import TypeVar

from jvmlocate.host.context import JvmContext
from jvmlocate.jvm.models import Installation, Vendor

TOOLS_JAR = "tools.jar"
RUNTIME_JAR = "rt.jar"
APPLE_CLASSES_JAR = "classes.jar"

_APPLE_VENDOR_PREFIX = "apple inc."
_IBM_VENDOR_PREFIX = "ibm corporation"

_JRE_DIR = "jre"
_VERSIONED_JRE_DIR = re.compile(r"jre\d+")
_APPLE_LAUNCHER_VARS = re.compile(r"(?:APP_NAME|JAVA_MAIN_CLASS)_\d+")

V = TypeVar("V")


def classify_vendor(vendor: str | None) -> Vendor:
    """Map a ``java.vm.vendor`` string to a ``Vendor``.

    Matching is a case-insensitive prefix test. Unknown or empty values
    are ``Vendor.GENERIC``; classification never fails.
    """
    normalized = (vendor or "").lower()
    if normalized.startswith(_APPLE_VENDOR_PREFIX):
        return Vendor.APPLE
    if normalized.startswith(_IBM_VENDOR_PREFIX):
        return Vendor.IBM
    return Vendor.GENERIC


# ---------------------------------------------------------------------------
# Development archive search
# ---------------------------------------------------------------------------


def _windows_sibling_jdk(java_dir: Path, context: JvmContext) -> Path | None:
    """Find ``tools.jar`` in a ``jdk<version>`` sibling of a ``jre<n>`` dir.

    Windows installers lay out ``C:\\Program Files\\Java\\jre6`` next to
    ``C:\\Program Files\\Java\\jdk1.6.0_20``. Only applies on Windows.
    """
    if not context.host.is_windows:
        return None
    if not _VERSIONED_JRE_DIR.fullmatch(java_dir.name):
        return None
    jdk_dir = java_dir.parent / f"jdk{context.properties.java_version}"
    tools_jar = jdk_dir / "lib" / TOOLS_JAR
    return tools_jar if tools_jar.exists() else None


def find_tools_jar(java_base: Path, context: JvmContext) -> Path | None:
    """Search for ``tools.jar`` starting from ``java_base``.

    Checks, in order:
        1. ``<java_base>/lib/tools.jar``.
        2. If ``java_base`` is named ``jre``: ``<parent>/lib/tools.jar``.
        3. On Windows, if the directory is named ``jre<digits>``:
           ``<parent>/jdk<java.version>/lib/tools.jar``.

    Returns:
        Path to the archive, or None if none of the locations has it.
    """
    tools_jar = java_base / "lib" / TOOLS_JAR
    if tools_jar.exists():
        return tools_jar

    java_dir = java_base
    if java_dir.name.lower() == _JRE_DIR:
        java_dir = java_dir.parent
        tools_jar = java_dir / "lib" / TOOLS_JAR
        if tools_jar.exists():
            return tools_jar

    return _windows_sibling_jdk(java_dir, context)


# ---------------------------------------------------------------------------
# Per-vendor behaviour
# ---------------------------------------------------------------------------


def _generic_runtime_jar(installation: Installation) -> Path | None:
    runtime_jar = installation.base / "lib" / RUNTIME_JAR
    return runtime_jar if runtime_jar.exists() else None


def _apple_runtime_jar(installation: Installation) -> Path | None:
    runtime_jar = installation.home.parent / "Classes" / APPLE_CLASSES_JAR
    return runtime_jar if runtime_jar.exists() else None


def _generic_tools_jar(installation: Installation, context: JvmContext) -> Path | None:
    return find_tools_jar(installation.base, context)


def _apple_tools_jar(installation: Installation, context: JvmContext) -> Path | None:
    tools_jar = find_tools_jar(installation.base, context)
    if tools_jar is not None:
        return tools_jar
    return _apple_runtime_jar(installation)


def _inherit_all(env: Mapping[str, V]) -> Mapping[str, V]:
    return env


def _apple_inheritable(env: Mapping[str, V]) -> dict[str, V]:
    return {
        key: value for key, value in env.items()
        if not _APPLE_LAUNCHER_VARS.fullmatch(key)
    }


@dataclass(frozen=True)
class VendorTraits:
    """Behaviour overrides for one vendor.

    Attributes:
        runtime_jar: Locates the runtime library of an installation.
        tools_jar: Locates the development archive of an installation.
        inheritable_environment: Filters the environment passed to
            spawned JVMs.
        supports_apple_script: Whether the AppleScript bridge is present.
        is_ibm: Whether this is an IBM JVM.
    """

    runtime_jar: Callable[[Installation], Path | None]
    tools_jar: Callable[[Installation, JvmContext], Path | None]
    inheritable_environment: Callable[[Mapping[str, V]], Mapping[str, V]]
    supports_apple_script: bool = False
    is_ibm: bool = False


_GENERIC = VendorTraits(
    runtime_jar=_generic_runtime_jar,
    tools_jar=_generic_tools_jar,
    inheritable_environment=_inherit_all,
)

VENDOR_TRAITS: dict[Vendor, VendorTraits] = {
    Vendor.GENERIC: _GENERIC,
    Vendor.APPLE: VendorTraits(
        runtime_jar=_apple_runtime_jar,
        tools_jar=_apple_tools_jar,
        inheritable_environment=_apple_inheritable,
        supports_apple_script=True,
    ),
    Vendor.IBM: VendorTraits(
        runtime_jar=_generic_runtime_jar,
        tools_jar=_generic_tools_jar,
        inheritable_environment=_inherit_all,
        is_ibm=True,
    ),
}


def traits_for(vendor: Vendor) -> VendorTraits:
    """Return the behaviour record for ``vendor``."""
    return VENDOR_TRAITS[vendor]
