"""tokman CLI entry point: Click group with subcommands."""

import click

from tokman import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tokman")
def cli() -> None:
    """tokman - design token extraction and synchronization."""


# Import and register subcommands
from tokman.cli.build import build  # noqa: E402
from tokman.cli.init import init  # noqa: E402
from tokman.cli.inspect import inspect  # noqa: E402

cli.add_command(build)
cli.add_command(init)
cli.add_command(inspect)
