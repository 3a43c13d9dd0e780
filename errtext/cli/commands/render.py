from __future__ import annotations

from pathlib import Path

import typer

from errtext.cli.context import build_context
from errtext.core.config import RenderConfig
from errtext.core.errors import InvalidMessage
from errtext.core.loader import load_message
from errtext.core.message import ErrorMessage
from errtext.core.result import Err
from errtext.output.errors import cli_error_exit_code, print_cli_error
from errtext.services.composer import render as render_message


def render(
    problem: str | None = typer.Argument(None, help="Problem statement."),
    context: list[str] | None = typer.Option(
        None, "--context", "-c", help="Contextual bullet (repeatable)."
    ),
    fault: list[str] | None = typer.Option(
        None, "--fault", "-f", help="Faulty-input bullet (repeatable)."
    ),
    hint: str | None = typer.Option(None, "--hint", help="Suggested fix, phrased as a question."),
    symbols: bool | None = typer.Option(
        None, "--symbols/--ascii", help="Use ℹ/✖ markers or ASCII '*'."
    ),
    color: bool | None = typer.Option(None, "--color/--no-color", help="Colorize markers."),
    max_items: int | None = typer.Option(
        None, "--max-items", min=1, help="Bullets shown before summarizing."
    ),
    file: Path | None = typer.Option(
        None, "--file", help="Read the message from a TOML file instead of arguments."
    ),
    config: Path | None = typer.Option(None, "--config", help="Path to errtext.toml."),
) -> None:
    """Render a structured error message."""
    ctx = build_context(config, RenderConfig(symbols=symbols, color=color, max_items=max_items))

    if file is not None:
        loaded = load_message(file)
        if isinstance(loaded, Err):
            print_cli_error(loaded.error, ctx.err_console)
            raise typer.Exit(code=cli_error_exit_code(loaded.error))
        message = loaded.value
    else:
        try:
            message = ErrorMessage(problem or "", context or (), fault or (), hint)
        except InvalidMessage as e:
            print_cli_error(e, ctx.err_console)
            raise typer.Exit(code=cli_error_exit_code(e))

    ctx.console.write(render_message(message, ctx.options))
