from __future__ import annotations

import sys
from pathlib import Path

import click

from ... import __version__
from ...logging import setup_logging
from ...registry import get_registry
from .. import cli, console
from ..branding import ConsoleBranding
from ..formatting import RichCommand
from ..loaders import PatchScriptLoader
from ..renderers import BindingTableRenderer

_branding = ConsoleBranding(console, __version__)
_loader = PatchScriptLoader()
_binding_renderer = BindingTableRenderer(console)


@cli.command(cls=RichCommand)
@click.argument("path", type=click.Path(exists=True))
@click.option(
    "-l", "--level", default="WARNING",
    help="Log level while the script runs",
)
def check(path: str, level: str):
    """
    Import a patch script and list the methods it patched.

    Examples:
      classmonkey check ./patches.py
      classmonkey check ./patches.py --level DEBUG
    """
    _branding.banner("mini")
    console.print()
    _branding.status(
        f"Loading: [cyan]{path}[/cyan]", "loading"
    )

    logger = setup_logging(level=level, rich_output=True)
    registry = get_registry()
    before = {
        binding.handle: binding
        for binding in registry.bindings()
    }

    module = _loader.load(Path(path), logger)
    if module is None:
        _branding.status("Failed to load patch script", "error")
        sys.exit(1)

    after = registry.bindings()
    touched = [
        binding
        for binding in after
        if before.get(binding.handle) is not binding
    ]
    restored = len(
        set(before) - {binding.handle for binding in after}
    )

    _branding.status(
        f"{len(touched)} method(s) patched", "success"
    )
    if restored:
        _branding.status(
            f"{restored} method(s) restored", "info"
        )
    _binding_renderer.render(touched)
