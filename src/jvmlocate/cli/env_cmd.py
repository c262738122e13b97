"""``jvmlocate env`` — Show the environment a spawned JVM should inherit.

Apple JVMs drop the ``APP_NAME_<n>`` and ``JAVA_MAIN_CLASS_<n>``
variables injected by the macOS launcher; other vendors inherit
everything.

Exit Codes:
    0 — Always, once the context could be loaded.
    2 — The JVM properties could not be loaded.
"""

from __future__ import annotations

import json
import os

import click

from jvmlocate.cli.common import FORMAT_OPTION, load_context
from jvmlocate.cli.output import print_environment
from jvmlocate.jvm import InstallationResolver, PathResolver


@click.command("env")
@FORMAT_OPTION
@click.pass_context
def env_command(ctx: click.Context, output_format: str) -> None:
    """List environment variables inherited by spawned JVMs."""
    context = load_context(ctx, output_format)
    installation = InstallationResolver(context).current()
    env = dict(PathResolver(context).inheritable_environment(installation, os.environ))

    if output_format == "json":
        click.echo(json.dumps(env, indent=2, sort_keys=True))
    else:
        print_environment(env)
