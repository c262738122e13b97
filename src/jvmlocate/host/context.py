"""The read-only context handed to the resolvers."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from jvmlocate.host.os_platform import HostPlatform
from jvmlocate.host.properties import JvmProperties, load_properties


@dataclass(frozen=True)
class JvmContext:
    """Host platform plus the system properties of the current JVM.

    Attributes:
        host: The operating-system collaborator.
        properties: The reported JVM system properties.
    """

    host: HostPlatform
    properties: JvmProperties

    @classmethod
    def current(cls, properties_file: Path | str | None = None) -> JvmContext:
        """Build a context from the live host and environment."""
        return cls(
            host=HostPlatform.current(),
            properties=load_properties(properties_file),
        )
