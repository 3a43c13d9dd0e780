"""Console output abstraction.

Commands write through `ConsoleProtocol` so they can be exercised with
`MockConsole` in tests. `RichConsole` is the production backend. `ansi()`
turns a styled fragment into a plain string with ANSI escapes for callers
that build text instead of printing it.

This is the only module allowed to import Rich.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
    "ansi",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    ERROR = auto()  # Faulty-input marker, error lines
    WARNING = auto()  # Hint marker
    INFO = auto()  # Context marker
    DIM = auto()  # Summary lines, hints under errors

    def __str__(self) -> str:
        return self.name.lower()


_RICH_STYLES: dict[Style, str] = {
    Style.DEFAULT: "",
    Style.ERROR: "red bold",
    Style.WARNING: "yellow",
    Style.INFO: "cyan",
    Style.DIM: "dim",
}


def ansi(text: str, style: Style) -> str:
    """Wrap text in the ANSI sequence for a style (16-color palette).

    The result does not depend on the current terminal, so rendering stays
    deterministic. DEFAULT style and empty text are returned unchanged.
    """
    rich_style = _RICH_STYLES.get(style, "")
    if not text or not rich_style:
        return text

    from rich.color import ColorSystem
    from rich.style import Style as RichStyle

    return RichStyle.parse(rich_style).render(text, color_system=ColorSystem.STANDARD)


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a message with optional styling.

        Args:
            message: The text to print
            style: The style to apply
        """
        ...

    def write(self, text: str) -> None:
        """Print pre-rendered text verbatim (ANSI escapes are honored)."""
        ...

    def error(self, message: str) -> None:
        """Print an error message."""
        ...

    def hint(self, message: str) -> None:
        """Print a dimmed hint line."""
        ...


class RichConsole:
    """Console implementation using Rich.

    Args:
        color: True forces styled output, False disables it, None lets Rich
            decide from the terminal.
        stderr: Write to stderr instead of stdout.
    """

    def __init__(self, *, color: bool | None = None, stderr: bool = False) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        self._console = Console(
            force_terminal=True if color else None,
            no_color=(not color) if color is not None else None,
            stderr=stderr,
            highlight=False,
        )

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        from rich.text import Text

        self._console.print(Text(message, style=_RICH_STYLES.get(style, "")), soft_wrap=True)

    def write(self, text: str) -> None:
        from rich.text import Text

        self._console.print(Text.from_ansi(text), soft_wrap=True)

    def error(self, message: str) -> None:
        from rich.markup import escape

        self._console.print(f"[red bold]error:[/red bold] {escape(message)}", soft_wrap=True)

    def hint(self, message: str) -> None:
        self.print(f"hint: {message}", Style.DIM)


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console implementation that captures output for testing."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def write(self, text: str) -> None:
        self.outputs.append(OutputRecord(text, Style.DEFAULT))

    def error(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR))

    def hint(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"hint: {message}", Style.DIM))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        """All output as a single newline-separated string."""
        return "\n".join(self.messages)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)
