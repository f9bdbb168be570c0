"""Message command implementation."""

import typer
from rich.console import Console
from rich.markup import escape

from hexterm.output.console import LEVEL_WRITERS

console = Console()


def message(
    text: str = typer.Argument(..., help="Message to print"),
    level: str = typer.Option("info", "--level", "-l", help="Level: error, warning, info, debug"),
) -> None:
    """Print a message styled for its level."""

    writer = LEVEL_WRITERS.get(level.lower())
    if writer is None:
        console.print(f"[red]Error: unknown level '{escape(level)}'[/red]")
        console.print(f"Available: {', '.join(LEVEL_WRITERS)}")
        raise typer.Exit(1)

    writer(text)
