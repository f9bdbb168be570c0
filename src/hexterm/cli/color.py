"""Color command implementation."""

from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from hexterm.colors.codec import InvalidColorFormat
from hexterm.config import TerminalConfig
from hexterm.output.console import custom_color

console = Console()
err_console = Console(stderr=True)


def color(
    text_color: str = typer.Argument(..., help="Foreground hex color, e.g. 00ffff"),
    message: str = typer.Argument(..., help="Text to print"),
    bg: Optional[str] = typer.Option(None, "--bg", "-b", help="Background hex color"),
) -> None:
    """Print text in a custom foreground and optional background color."""

    config = TerminalConfig.from_env()
    if not config.true_color:
        err_console.print("[yellow]Warning: COLORTERM does not advertise true color support[/yellow]")

    try:
        custom_color(text_color, message, bg)
    except InvalidColorFormat as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)
