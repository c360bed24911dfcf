from __future__ import annotations

import click
from rich import box
from rich.console import Console
from rich.table import Table

from ..branding import LOGO_MINI


class RichCommand(click.Command):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self._console = None

    def format_help(self, ctx, formatter):
        from ... import __version__
        from .. import console

        if self._console is None:
            self._console = console

        self._console.print(
            LOGO_MINI.format(version=__version__)
        )
        self._console.print()
        self._render_command_header(ctx)
        self._render_usage_line(ctx)
        self._render_params_table()
        self._render_examples_section()

    def _render_command_header(self, ctx):
        self._console.print(
            f"  [bold cyan]{ctx.info_name}[/bold cyan]",
            end="",
        )
        if self.help:
            first_line = self.help.strip().split("\n")[0]
            self._console.print(f" - {first_line}")
        else:
            self._console.print()
        self._console.print()

    def _render_usage_line(self, ctx):
        pieces = self.collect_usage_pieces(ctx)
        self._console.print(
            f"  [bold]Usage:[/bold]"
            f" [green]classmonkey {ctx.info_name}[/green]"
            f" {' '.join(pieces)}"
        )
        self._console.print()

    def _render_params_table(self):
        params = [
            p
            for p in self.params
            if isinstance(p, (click.Argument, click.Option))
        ]
        if not params:
            return

        table = Table(
            box=box.SIMPLE,
            show_header=True,
            header_style="bold",
            padding=(0, 2),
            show_edge=False,
        )
        table.add_column("Parameter", style="cyan")
        table.add_column("Description", style="white")

        for param in params:
            if isinstance(param, click.Argument):
                table.add_row(
                    f"[yellow]{param.name.upper()}[/yellow]",
                    "[red]required[/red]"
                    if param.required
                    else "",
                )
            else:
                table.add_row(
                    ", ".join(param.opts),
                    param.help or "",
                )

        self._console.print(table)
        self._console.print()

    def _render_examples_section(self):
        if not self.help or "Examples:" not in self.help:
            return

        start = self.help.index("Examples:")
        examples_text = self.help[start:]

        self._console.print("  [bold]Examples[/bold]")
        for line in examples_text.split("\n")[1:]:
            if line.strip():
                self._console.print(
                    f"  [dim]{line.strip()}[/dim]"
                )
        self._console.print()
