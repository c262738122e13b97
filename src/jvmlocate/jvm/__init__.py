"""JVM installation discovery and executable resolution.

Public API::

    from jvmlocate.host import JvmContext
    from jvmlocate.jvm import InstallationResolver, PathResolver

    context = JvmContext.current()
    jvm = InstallationResolver(context).current()
    javac = PathResolver(context).executable(jvm, "javac")
    if not javac.is_resolved:
        print(f"javac not found, relying on {javac.path}")
"""

from __future__ import annotations

from jvmlocate.jvm.models import (
    ExecutableSource,
    Installation,
    ResolvedExecutable,
    Vendor,
)
from jvmlocate.jvm.paths import PathResolver
from jvmlocate.jvm.resolver import InstallationResolver
from jvmlocate.jvm.vendors import VendorTraits, classify_vendor, find_tools_jar, traits_for

__all__ = [
    "ExecutableSource",
    "Installation",
    "InstallationResolver",
    "PathResolver",
    "ResolvedExecutable",
    "Vendor",
    "VendorTraits",
    "classify_vendor",
    "find_tools_jar",
    "traits_for",
]
