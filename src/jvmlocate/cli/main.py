"""jvmlocate CLI — Locate JVM installations and their tools.

Entry point for the ``jvmlocate`` command-line tool. Registers all
subcommands under a single Click group.

Commands:
    current  — Describe the JVM of the current context.
    home     — Validate a user-supplied java home.
    exec     — Resolve a JDK tool executable.
    env      — Show the environment a spawned JVM should inherit.

Usage::

    jvmlocate current
    jvmlocate --properties jvm.yaml current --format json
    jvmlocate home /usr/lib/jvm/java-8-openjdk
    jvmlocate exec javac
    jvmlocate exec javadoc --home /opt/jdk1.6.0_20
    jvmlocate env
"""

from __future__ import annotations

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from jvmlocate import __version__
from jvmlocate.cli.current_cmd import current_command
from jvmlocate.cli.env_cmd import env_command
from jvmlocate.cli.exec_cmd import exec_command
from jvmlocate.cli.home_cmd import home_command


def _configure_logging() -> None:
    package_logger = logging.getLogger("jvmlocate")
    package_logger.setLevel(logging.DEBUG)
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--properties", "properties_file",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="YAML file of JVM system properties (java.home, java.vm.vendor, ...).",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log discovery decisions.")
@click.pass_context
def cli(ctx: click.Context, properties_file: str | None, verbose: bool) -> None:
    """jvmlocate: Find JVM installations and resolve their tools.

    Works out the real JDK home behind a reported java.home, classifies
    the vendor, and locates java, javac, tools.jar and friends.
    """
    ctx.ensure_object(dict)
    ctx.obj["properties_file"] = properties_file
    if verbose:
        _configure_logging()


# Register all subcommands
cli.add_command(current_command)
cli.add_command(home_command)
cli.add_command(exec_command)
cli.add_command(env_command)
