"""Table command implementation."""

import json
import sys
from pathlib import Path

import typer
import yaml
from rich.console import Console
from rich.markup import escape

from hexterm.output.console import table as write_table

console = Console()


def _load_rows(source: str):
    if source == "-":
        return json.loads(sys.stdin.read())

    path = Path(source)
    text = path.read_text(encoding="utf-8")
    if path.suffix.lower() in (".yaml", ".yml"):
        return yaml.safe_load(text)
    return json.loads(text)


def table(
    source: str = typer.Argument(..., help="JSON or YAML file with a list of rows, or - for JSON on stdin"),
) -> None:
    """Print a list of records as an aligned table."""

    if source != "-" and not Path(source).exists():
        console.print(f"[red]File not found: {escape(source)}[/red]")
        raise typer.Exit(1)

    try:
        rows = _load_rows(source)
    except (json.JSONDecodeError, yaml.YAMLError, UnicodeDecodeError) as e:
        console.print(f"[red]Error: could not parse {escape(source)}: {escape(str(e))}[/red]")
        raise typer.Exit(1)
    except OSError as e:
        console.print(f"[red]Error: could not read {escape(source)}: {escape(str(e))}[/red]")
        raise typer.Exit(1)

    write_table(rows)
