"""Host context: platform collaborator and JVM system properties.

Public API::

    from jvmlocate.host import JvmContext

    context = JvmContext.current()
    print(context.host.is_windows, context.properties.java_home)
"""

from __future__ import annotations

from jvmlocate.host.context import JvmContext
from jvmlocate.host.os_platform import HostPlatform
from jvmlocate.host.properties import JvmProperties, load_properties

__all__ = [
    "HostPlatform",
    "JvmContext",
    "JvmProperties",
    "load_properties",
]
