"""
Main CLI entry point for autofolders.
"""

import click

from .. import __version__
from .config_cli import config
from .organize import organize, run


@click.group()
@click.version_option(version=__version__, prog_name="autofolders")
def cli() -> None:
    """Organize date-named journal notes into year/month folders."""


cli.add_command(organize)
cli.add_command(run)
cli.add_command(config)


if __name__ == "__main__":
    cli()
