from __future__ import annotations

import typer

from errtext import __version__
from errtext.cli.commands.render import render


app = typer.Typer(
    add_completion=False,
    no_args_is_help=True,
)


# Commands
app.command()(render)


def _print_version(value: bool) -> None:
    if value:
        typer.echo(__version__)
        raise typer.Exit(code=0)


@app.callback()
def _main(  # pyright: ignore[reportUnusedFunction]
    version: bool = typer.Option(
        False,
        "--version",
        callback=_print_version,
        is_eager=True,
        help="Show version and exit.",
    ),
) -> None:
    """Compose structured error messages."""


def main() -> None:
    app()
