from __future__ import annotations

from rich import box
from rich.console import Console
from rich.table import Table

from ...types import ActiveBinding, ModifierKind

MODIFIER_STYLE_MAP = {
    ModifierKind.BEFORE: "[blue]before[/blue]",
    ModifierKind.AFTER: "[blue]after[/blue]",
    ModifierKind.AROUND: "[magenta]around[/magenta]",
    ModifierKind.OVERRIDE: "[yellow]override[/yellow]",
    ModifierKind.NEW: "[green]method[/green]",
    ModifierKind.INSTANCE_REPLACE: "[yellow]instance[/yellow]",
}


class BindingTableRenderer:
    def __init__(self, console: Console):
        self._console = console

    def render(self, bindings: list[ActiveBinding]):
        self._console.print()

        if not bindings:
            self._console.print(
                "  [dim]No methods patched[/dim]"
            )
            return

        table = Table(
            title="[bold]Active Patches[/bold]",
            box=box.ROUNDED,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Target", style="white")
        table.add_column("Method", style="bold white")
        table.add_column("Scope", style="dim")
        table.add_column("Modifiers")
        table.add_column("Original", justify="center")

        for binding in bindings:
            handle = binding.handle
            target, _, _ = handle.describe().rpartition(".")
            modifiers = " → ".join(
                MODIFIER_STYLE_MAP.get(kind, kind.value)
                for kind in binding.kinds
            )
            table.add_row(
                target,
                handle.method_name,
                handle.target_kind.value,
                modifiers,
                "[green]✓[/green]"
                if binding.original.exists
                else "[dim]-[/dim]",
            )

        self._console.print(table)
