from __future__ import annotations

import sys

import click
from rich.console import Console

from .. import __version__
from .formatting import RichGroup

console = Console()


@click.group(cls=RichGroup)
@click.version_option(
    version=__version__, prog_name="classmonkey"
)
def cli():
    """Patch classes and objects you do not own."""
    pass


from . import commands  # noqa: E402, F401


def main():
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[dim]Interrupted[/dim]")
        sys.exit(130)
