from __future__ import annotations

import sys

from rich import box
from rich.table import Table

from ... import __version__
from ...registry import get_registry
from .. import cli, console
from ..branding import ConsoleBranding
from ..formatting import RichCommand

_branding = ConsoleBranding(console, __version__)


class SystemInfoRenderer:
    def __init__(self):
        self._console = console

    def render(self):
        self._render_system_properties()
        self._console.print("  [bold]Modifiers[/bold]")
        self._console.print(
            _branding.modifier_table(with_signatures=True)
        )
        self._console.print()

    def _render_system_properties(self):
        table = Table(
            box=box.SIMPLE,
            show_header=False,
            padding=(0, 2),
        )
        table.add_column("Property", style="cyan")
        table.add_column("Value", style="white")
        table.add_row("Version", __version__)
        table.add_row("Python", sys.version.split()[0])
        table.add_row("Platform", sys.platform)
        registry = get_registry()
        timeout = registry.config.lock_timeout_s
        table.add_row(
            "Conflict policy", registry.config.conflict_policy.value
        )
        table.add_row(
            "Lock timeout",
            "none" if timeout is None else f"{timeout}s",
        )
        table.add_row("Active patches", str(len(registry)))

        self._console.print(table)
        self._console.print()


@cli.command(cls=RichCommand)
def info():
    """Show classmonkey version, registry settings and modifiers."""
    _branding.banner("small")
    console.print()
    SystemInfoRenderer().render()
