"""``jvmlocate home <path>`` — Validate a user-supplied java home.

The directory is taken verbatim as the installation home and must
contain ``bin/java``; no fallback search is performed.

Exit Codes:
    0 — PATH is a valid java home.
    2 — PATH is not a directory, or has no java executable.
"""

from __future__ import annotations

import json

import click

from jvmlocate.cli.common import FORMAT_OPTION, fail, load_context
from jvmlocate.cli.output import installation_to_json, print_installation
from jvmlocate.exceptions import JvmLocateError
from jvmlocate.jvm import InstallationResolver, PathResolver


@click.command("home")
@click.argument("path", type=click.Path())
@FORMAT_OPTION
@click.pass_context
def home_command(ctx: click.Context, path: str, output_format: str) -> None:
    """Validate PATH as a java home and show its tools."""
    context = load_context(ctx, output_format)
    paths = PathResolver(context)
    try:
        installation = InstallationResolver(context).for_home(path)
        java = paths.java_executable(installation)
    except JvmLocateError as exc:
        fail(exc, output_format)

    data = installation_to_json(installation, paths, java)
    if output_format == "json":
        click.echo(json.dumps(data, indent=2))
    else:
        print_installation(data)
