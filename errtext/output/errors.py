"""Error presentation utilities.

Centralized formatting and exit code mapping for failures the CLI reports.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from errtext.core.config import ConfigError
from errtext.core.errors import ErrorCode, InvalidMessage
from errtext.core.loader import MessageFileError

if TYPE_CHECKING:
    from errtext.output.console import ConsoleProtocol

__all__ = ["CliError", "print_cli_error", "cli_error_exit_code"]

type CliError = InvalidMessage | ConfigError | MessageFileError


def print_cli_error(error: CliError, console: ConsoleProtocol) -> None:
    """Print a CLI failure with a follow-up hint where one helps."""
    match error:
        case InvalidMessage(field="hint"):
            console.error(f"invalid message: {error.reason}")
            console.hint("phrase the hint as a question")
        case InvalidMessage():
            console.error(f"invalid message: {error}")
        case ConfigError(message=message, path=path):
            console.error(f"config: {message}")
            if path is not None:
                console.hint(f"check {path} or pass --config")
        case MessageFileError(message=message, path=path):
            console.error(f"{path}: {message}")


def cli_error_exit_code(error: CliError) -> int:
    """Get exit code for a CLI failure."""
    match error:
        case InvalidMessage():
            return int(ErrorCode.USER_ERROR)
        case ConfigError():
            return int(ErrorCode.IO_ERROR)
        case MessageFileError(io=True):
            return int(ErrorCode.IO_ERROR)
        case MessageFileError():
            return int(ErrorCode.USER_ERROR)
    # Fallback for exhaustiveness
    return int(ErrorCode.USER_ERROR)
