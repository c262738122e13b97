"""Helpers shared by the jvmlocate subcommands."""

from __future__ import annotations

import json
import sys
from typing import NoReturn

import click

from jvmlocate.exceptions import JvmLocateError
from jvmlocate.host import JvmContext

FORMAT_OPTION = click.option(
    "--format", "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format (default: text).",
)


def fail(error: JvmLocateError | str, output_format: str) -> NoReturn:
    """Report an error in the requested format and exit with code 2."""
    if output_format == "json":
        click.echo(json.dumps({"error": str(error)}))
    else:
        click.echo(f"Error: {error}")
    sys.exit(2)


def load_context(ctx: click.Context, output_format: str) -> JvmContext:
    """Build the ``JvmContext`` for a command, exiting 2 on failure."""
    properties_file = (ctx.obj or {}).get("properties_file")
    try:
        return JvmContext.current(properties_file)
    except JvmLocateError as exc:
        fail(exc, output_format)
