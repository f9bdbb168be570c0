"""Probe command implementation."""

import json

import typer
from rich.console import Console
from rich.markup import escape

from hexterm.config import TerminalConfig

console = Console()


def probe(
    format_output: str = typer.Option("text", "--format", "-f", help="Output format: text, json"),
) -> None:
    """Report whether the terminal advertises true color support."""

    config = TerminalConfig.from_env()

    if format_output == "json":
        print(json.dumps(config.to_dict(), indent=2))
        return

    console.print(f"  COLORTERM: {escape(config.colorterm or '(unset)')}")
    if config.true_color:
        console.print("[green]OK True color supported[/green]")
    else:
        console.print("[yellow]! True color not advertised[/yellow]")
