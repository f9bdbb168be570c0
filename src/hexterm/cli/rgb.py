"""RGB command implementation."""

import json

import typer
from rich.console import Console
from rich.markup import escape

from hexterm.colors.codec import InvalidColorFormat, background, foreground, parse_hex

console = Console()


def rgb(
    hex_color: str = typer.Argument(..., help="Hex color, RRGGBB or #RRGGBB"),
    format_output: str = typer.Option("text", "--format", "-f", help="Output format: text, json"),
) -> None:
    """Show the RGB components of a hex color."""

    try:
        triple = parse_hex(hex_color)
    except InvalidColorFormat as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    if format_output == "json":
        # Plain print so rich does not read the brackets as markup.
        print(json.dumps({
            **triple._asdict(),
            "foreground": foreground(hex_color),
            "background": background(hex_color),
        }, indent=2))
        return

    console.print(f"{triple.red} {triple.green} {triple.blue}")
