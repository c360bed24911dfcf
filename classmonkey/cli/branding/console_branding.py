from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from .assets import (
    BANNER_STYLE_MAP,
    LOGO_MINI,
    MODIFIER_HELP,
    STATUS_ICON_MAP,
    TARGET_SYNTAX,
)


class ConsoleBranding:
    """Banner, status lines and the modifier / target cheat sheets."""

    def __init__(self, console: Console, version: str):
        self._console = console
        self._version = version

    def banner(self, style: str = "small"):
        template = BANNER_STYLE_MAP.get(style, LOGO_MINI)
        self._console.print(
            template.format(version=self._version)
        )

    def status(self, message: str, status: str = "info"):
        icon = STATUS_ICON_MAP.get(
            status, STATUS_ICON_MAP["info"]
        )
        self._console.print(f"  {icon} {message}")

    def modifier_table(self, with_signatures: bool = False) -> Table:
        table = Table(
            box=box.SIMPLE,
            show_header=False,
            padding=(0, 1),
            show_edge=False,
        )
        table.add_column("Keyword")
        table.add_column("Description", style="dim")
        if with_signatures:
            table.add_column("Body", style="cyan")

        for keyword, (style, summary, signature) in MODIFIER_HELP.items():
            row = [f"[{style}]{keyword}[/{style}]", summary]
            if with_signatures:
                row.append(signature)
            table.add_row(*row)
        return table

    def target_table(self) -> Table:
        table = Table(
            box=box.SIMPLE,
            show_header=False,
            padding=(0, 1),
            show_edge=False,
        )
        table.add_column("Target", style="green")
        table.add_column("Meaning", style="dim")
        for target, meaning in TARGET_SYNTAX:
            table.add_row(target, meaning)
        return table
