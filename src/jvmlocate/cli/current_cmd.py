"""``jvmlocate current`` — Describe the JVM of the current context.

The context JVM is the one named by ``java.home`` in the properties file
or by ``JAVA_HOME``. Its home is computed with the JDK/JRE layout
heuristic, and executable lookup falls back to ``PATH``.

Exit Codes:
    0 — Always, once the context could be loaded.
    2 — The JVM properties could not be loaded.
"""

from __future__ import annotations

import json

import click

from jvmlocate.cli.common import FORMAT_OPTION, load_context
from jvmlocate.cli.output import installation_to_json, print_installation
from jvmlocate.jvm import InstallationResolver, PathResolver


@click.command("current")
@FORMAT_OPTION
@click.pass_context
def current_command(ctx: click.Context, output_format: str) -> None:
    """Show the home, vendor and tools of the current JVM."""
    context = load_context(ctx, output_format)
    installation = InstallationResolver(context).current()
    paths = PathResolver(context)
    data = installation_to_json(installation, paths, paths.java_executable(installation))

    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        print_installation(data)
