"""hexterm CLI entry point."""

import typer
from rich.console import Console

app = typer.Typer(
    name="hexterm",
    help="True-color terminal output from hex colors",
    no_args_is_help=True,
    invoke_without_command=True,
)

console = Console()


@app.callback()
def main(
    show_version: bool = typer.Option(
        False, "--version", "-V", help="Show version and exit"
    ),
) -> None:
    """hexterm: true-color terminal output from hex colors."""
    if show_version:
        from hexterm import __version__

        console.print(f"hexterm {__version__}")
        raise typer.Exit()


@app.command()
def version():
    """Show hexterm version."""
    from hexterm import __version__

    console.print(f"hexterm {__version__}")


# Writers
from hexterm.cli.color import color
from hexterm.cli.message import message
from hexterm.cli.table import table

app.command()(color)
app.command()(message)
app.command()(table)

# Codec and terminal inspection
from hexterm.cli.rgb import rgb
from hexterm.cli.probe import probe

app.command()(rgb)
app.command()(probe)


if __name__ == "__main__":
    app()
