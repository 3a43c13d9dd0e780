from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer

from errtext.core.config import Config, RenderConfig, find_config, load_config
from errtext.core.message import RenderOptions
from errtext.core.result import Err
from errtext.output.console import ConsoleProtocol, RichConsole
from errtext.output.errors import cli_error_exit_code, print_cli_error
from errtext.platform.terminal import TerminalInfo, detect


@dataclass(frozen=True, slots=True)
class CLIContext:
    options: RenderOptions
    console: ConsoleProtocol
    err_console: ConsoleProtocol


def resolve_options(terminal: TerminalInfo, config: Config, overrides: RenderConfig) -> RenderOptions:
    """Terminal detection, then config file, then command-line flags."""
    return overrides.apply(config.render.apply(terminal.to_options()))


def build_context(
    config_path: Path | None = None,
    overrides: RenderConfig | None = None,
) -> CLIContext:
    """Load config, detect the terminal and settle the render options.

    Having no config file is fine; an unreadable or invalid one is reported.
    """
    overrides = overrides or RenderConfig()
    err_console = RichConsole(color=overrides.color, stderr=True)

    path = config_path if config_path is not None else find_config(Path.cwd())
    config = Config()
    if path is not None:
        result = load_config(path)
        if isinstance(result, Err):
            print_cli_error(result.error, err_console)
            raise typer.Exit(code=cli_error_exit_code(result.error))
        config = result.value

    terminal = detect()
    options = resolve_options(terminal, config, overrides)

    return CLIContext(
        options=options,
        console=RichConsole(color=options.use_color),
        err_console=err_console,
    )
