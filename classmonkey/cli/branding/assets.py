LOGO_SMALL = """[bold yellow]
  🐒 classmonkey   [dim]v{version}[/dim]
[/bold yellow]  [dim]before · after · around · override · method[/dim]"""

LOGO_MINI = (
    "[bold yellow]🐒 classmonkey[/bold yellow] [dim]v{version}[/dim]"
)

BANNER_STYLE_MAP = {
    "small": LOGO_SMALL,
    "mini": LOGO_MINI,
}

STATUS_ICON_MAP = {
    "info": "[blue]ℹ[/blue]",
    "success": "[green]✓[/green]",
    "warning": "[yellow]⚠[/yellow]",
    "error": "[red]✗[/red]",
    "loading": "[cyan]⟳[/cyan]",
}

# Keyword -> (style, one-line summary, body signature)
MODIFIER_HELP = {
    "before": (
        "blue",
        "Run code before the method",
        "body(self, *args)",
    ),
    "after": (
        "blue",
        "Run code after the method returns",
        "body(self, *args)",
    ),
    "around": (
        "magenta",
        "Wrap the method, deciding how to call it",
        "body(orig, self, *args)",
    ),
    "override": (
        "yellow",
        "Replace an existing method",
        "body(self, *args)",
    ),
    "method": (
        "green",
        "Add a method that does not exist yet",
        "body(self, *args)",
    ),
    "instance": (
        "yellow",
        "Replace a method on one object",
        "body(self, *args)",
    ),
}

TARGET_SYNTAX = [
    ("Greeter", "the class: every instance and subclass"),
    ('"pkg.mod.Greeter"', "a class path, imported on demand"),
    ('"pkg.mod:Outer.Inner"', "a nested class"),
    ("greeter", "one live object only"),
    ("[Greeter, other]", "each target independently"),
]
