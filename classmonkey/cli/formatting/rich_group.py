from __future__ import annotations

import click
from rich import box
from rich.table import Table

from ..branding import ConsoleBranding


class RichGroup(click.Group):
    """
    Top-level help: commands, then a cheat sheet of the patch keywords
    and target forms a patch script can use.
    """

    def format_help(self, ctx, formatter):
        from ... import __version__
        from .. import console

        branding = ConsoleBranding(console, __version__)
        branding.banner("small")
        console.print()

        if self.help:
            console.print(f"  {self.help}")
            console.print()

        console.print("  [bold]Commands[/bold]")
        console.print(self._commands_table(ctx))
        console.print()

        console.print("  [bold]Patch keywords[/bold]")
        console.print(branding.modifier_table(with_signatures=True))
        console.print()

        console.print("  [bold]Targets[/bold]")
        console.print(branding.target_table())
        console.print()

        console.print(
            "  [dim]Run[/dim]"
            " [cyan]classmonkey check <script.py>[/cyan]"
            " [dim]to see what a patch script changes[/dim]"
        )
        console.print()

    def _commands_table(self, ctx) -> Table:
        table = Table(
            box=box.ROUNDED,
            show_header=False,
            border_style="dim",
            padding=(0, 2),
        )
        table.add_column("Command", style="green")
        table.add_column("Description", style="white")

        for name in self.list_commands(ctx):
            command = self.commands[name]
            if not command.hidden:
                table.add_row(
                    name, command.get_short_help_str(limit=60)
                )
        return table
