"""JVM system properties: the read-only description of "the current JVM".

The resolvers never read the environment themselves. They receive a
``JvmProperties`` value, loaded here from one of two sources:

1. A YAML properties file whose keys mirror the JVM system property
   names (``java.home``, ``java.vm.vendor``, ``java.version``,
   ``java.vm.version``).
2. Environment variables: ``JAVA_HOME`` plus ``JVMLOCATE_JAVA_VENDOR``,
   ``JVMLOCATE_JAVA_VERSION`` and ``JVMLOCATE_JAVA_VM_VERSION``.

File values win; any key the file omits falls back to the environment.

Example properties file::

    java.home: /usr/lib/jvm/java-8-openjdk/jre
    java.vm.vendor: Oracle Corporation
    java.version: 1.8.0_402
    java.vm.version: 25.402-b06
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import yaml

from jvmlocate.exceptions import PropertiesError

logger = logging.getLogger(__name__)

PROPERTIES_FILE_ENV = "JVMLOCATE_PROPERTIES"

# System property name -> environment variable used when the file is silent.
_ENV_FALLBACKS: dict[str, str] = {
    "java.home": "JAVA_HOME",
    "java.vm.vendor": "JVMLOCATE_JAVA_VENDOR",
    "java.version": "JVMLOCATE_JAVA_VERSION",
    "java.vm.version": "JVMLOCATE_JAVA_VM_VERSION",
}


@dataclass(frozen=True)
class JvmProperties:
    """Snapshot of the system properties describing the current JVM.

    Attributes:
        java_home: Reported ``java.home``; may be a JRE inside a JDK.
        java_vendor: Reported ``java.vm.vendor`` (e.g. "Apple Inc.").
        java_version: Reported ``java.version`` (e.g. "1.6.0_20").
        java_vm_version: Reported ``java.vm.version``.
    """

    java_home: str
    java_vendor: str = ""
    java_version: str = ""
    java_vm_version: str = ""

    @property
    def short_java_name(self) -> str:
        """Short name of the java version, e.g. "1.6"."""
        return self.java_version[:3]

    def is_java_version(self, prefix: str) -> bool:
        return self.java_version.startswith(prefix)

    @property
    def is_java5(self) -> bool:
        return self.is_java_version("1.5")

    @property
    def is_java6(self) -> bool:
        return self.is_java_version("1.6")

    @property
    def is_java7(self) -> bool:
        return self.is_java_version("1.7")

    @property
    def is_java5_compatible(self) -> bool:
        return self.is_java5 or self.is_java6_compatible

    @property
    def is_java6_compatible(self) -> bool:
        return self.is_java6 or self.is_java7_compatible

    @property
    def is_java7_compatible(self) -> bool:
        return self.is_java7


def _load_yaml_properties(path: Path) -> dict[str, Any]:
    """Load a YAML properties file.

    Scalars are kept as the strings written in the file, so versions such
    as ``1.10`` are not read as numbers.

    Raises:
        PropertiesError: If the file is unreadable, malformed, or not a
            mapping at the top level.
    """
    try:
        raw = path.read_text(encoding="utf-8")
        data = yaml.load(raw, Loader=yaml.BaseLoader)
    except (OSError, UnicodeDecodeError) as exc:
        raise PropertiesError(f"Cannot read properties file {path}: {exc}") from exc
    except yaml.YAMLError as exc:
        raise PropertiesError(f"Malformed properties file {path}: {exc}") from exc
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise PropertiesError(
            f"Properties file {path} must contain a mapping, got {type(data).__name__}"
        )
    return data


def load_properties(
    path: Path | str | None = None,
    environ: Mapping[str, str] | None = None,
) -> JvmProperties:
    """Build ``JvmProperties`` from a properties file and the environment.

    Args:
        path: Optional YAML properties file. When None, the file named by
            ``JVMLOCATE_PROPERTIES`` is used if that variable is set.
        environ: Environment mapping. Defaults to ``os.environ``.

    Returns:
        The loaded properties.

    Raises:
        PropertiesError: If no source supplies ``java.home`` or the file
            cannot be loaded.
    """
    env = os.environ if environ is None else environ
    if path is None and env.get(PROPERTIES_FILE_ENV):
        path = env[PROPERTIES_FILE_ENV]

    from_file: dict[str, Any] = {}
    if path is not None:
        from_file = _load_yaml_properties(Path(path))
        logger.debug("Loaded JVM properties from %s", path)

    values: dict[str, str] = {}
    for key, env_name in _ENV_FALLBACKS.items():
        value = from_file.get(key)
        if not value:
            value = env.get(env_name, "")
        values[key] = str(value)

    if not values["java.home"]:
        raise PropertiesError(
            "No java.home available: set JAVA_HOME or supply a properties file"
        )

    return JvmProperties(
        java_home=values["java.home"],
        java_vendor=values["java.vm.vendor"],
        java_version=values["java.version"],
        java_vm_version=values["java.vm.version"],
    )
