"""``jvmlocate exec <tool>`` — Resolve a JDK tool executable.

Without ``--home`` the tool is resolved against the current JVM and may
fall back to ``PATH`` or, failing that, to the bare executable name.
With ``--home`` the directory is asserted and the lookup is strict.

Exit Codes:
    0 — The tool resolved to a concrete path.
    1 — Only the bare executable name is available (unresolved).
    2 — Invalid home, or the tool is missing from an asserted home.
"""

from __future__ import annotations

import json
import sys

import click

from jvmlocate.cli.common import FORMAT_OPTION, fail, load_context
from jvmlocate.cli.output import executable_to_json, print_executable
from jvmlocate.exceptions import JvmLocateError
from jvmlocate.jvm import InstallationResolver, PathResolver


@click.command("exec")
@click.argument("tool")
@click.option(
    "--home", "java_home",
    type=click.Path(),
    default=None,
    help="Java home to resolve against instead of the current JVM.",
)
@FORMAT_OPTION
@click.pass_context
def exec_command(
    ctx: click.Context,
    tool: str,
    java_home: str | None,
    output_format: str,
) -> None:
    """Print the path of the TOOL executable (e.g. javac, jar).

    Exit code 0 if resolved, 1 if only the bare name is known.
    """
    context = load_context(ctx, output_format)
    try:
        installation = InstallationResolver(context).resolve(java_home)
        executable = PathResolver(context).executable(installation, tool)
    except JvmLocateError as exc:
        fail(exc, output_format)

    if output_format == "json":
        click.echo(json.dumps(executable_to_json(executable), indent=2))
    else:
        print_executable(executable)

    sys.exit(0 if executable.is_resolved else 1)
