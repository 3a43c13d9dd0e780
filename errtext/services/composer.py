"""Compose error messages into display text.

Output layout:

    <problem statement><connector>
    <context bullets>
    <fault bullets>
    ... and N more problems
    <hint>

The connector is ":" when bullets follow and "." otherwise. Bullets beyond
`max_items` are counted in the summary line; truncation applies to the
combined context-then-fault sequence. Lines are joined with "\\n" and the
result carries no trailing newline.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from errtext.core.message import ErrorMessage, RenderOptions, validate_message
from errtext.output.console import Style, ansi

__all__ = [
    "LineKind",
    "MessageComposer",
    "RenderedLine",
    "render",
    "render_lines",
]

SYMBOL_INFO = "ℹ"
SYMBOL_FAULT = "✖"
SYMBOL_ASCII = "*"

_TERMINAL = ".:"
_KEEP_TERMINAL = ("?", "!")


class LineKind(Enum):
    PROBLEM = auto()
    CONTEXT = auto()
    FAULT = auto()
    SUMMARY = auto()
    HINT = auto()


_MARKER_STYLES: dict[LineKind, Style] = {
    LineKind.CONTEXT: Style.INFO,
    LineKind.FAULT: Style.ERROR,
    LineKind.HINT: Style.WARNING,
    LineKind.SUMMARY: Style.DIM,
}


@dataclass(frozen=True, slots=True)
class RenderedLine:
    """One output line: an optional bullet marker and the body text."""

    kind: LineKind
    body: str
    marker: str = ""

    @property
    def text(self) -> str:
        if not self.marker:
            return self.body
        return f"{self.marker} {self.body}"

    def styled(self) -> str:
        style = _MARKER_STYLES.get(self.kind)
        if style is None:
            return self.text
        if self.kind == LineKind.SUMMARY:
            return ansi(self.text, style)
        return f"{ansi(self.marker, style)} {self.body}"


def _marker(kind: LineKind, options: RenderOptions) -> str:
    if not options.use_symbols:
        return SYMBOL_ASCII
    if kind == LineKind.FAULT:
        return SYMBOL_FAULT
    return SYMBOL_INFO


def _problem_line(statement: str, has_bullets: bool) -> str:
    text = statement.strip()
    if text.endswith(_KEEP_TERMINAL):
        return f"{text}:" if has_bullets else text
    text = text.rstrip(_TERMINAL).rstrip()
    return f"{text}{':' if has_bullets else '.'}"


def render_lines(message: ErrorMessage, options: RenderOptions | None = None) -> list[RenderedLine]:
    """Build the structured lines for a message.

    Raises:
        InvalidMessage: If the message violates its construction rules.
    """
    options = options or RenderOptions()
    validate_message(message)

    bullets = [
        *((LineKind.CONTEXT, item) for item in message.context_items),
        *((LineKind.FAULT, item) for item in message.fault_items),
    ]

    lines = [RenderedLine(LineKind.PROBLEM, _problem_line(message.problem_statement, bool(bullets)))]
    for kind, item in bullets[: options.max_items]:
        lines.append(RenderedLine(kind, item.strip(), _marker(kind, options)))

    hidden = len(bullets) - options.max_items
    if hidden > 0:
        lines.append(RenderedLine(LineKind.SUMMARY, f"... and {hidden} more problems"))

    if message.hint is not None:
        lines.append(RenderedLine(LineKind.HINT, message.hint.strip(), _marker(LineKind.HINT, options)))

    return lines


def render(message: ErrorMessage, options: RenderOptions | None = None) -> str:
    """Render a message to text.

    Args:
        message: The message to render.
        options: Symbol/color/truncation settings; defaults to RenderOptions().

    Returns:
        The formatted message, lines joined by newlines.

    Raises:
        InvalidMessage: If the problem statement is empty or the hint does not
            end with "?".
    """
    options = options or RenderOptions()
    lines = render_lines(message, options)
    if options.use_color:
        return "\n".join(line.styled() for line in lines)
    return "\n".join(line.text for line in lines)


class MessageComposer:
    """Renders messages with a fixed set of options."""

    def __init__(self, options: RenderOptions | None = None) -> None:
        self._options = options or RenderOptions()

    @property
    def options(self) -> RenderOptions:
        return self._options

    def render(self, message: ErrorMessage) -> str:
        return render(message, self._options)

    def render_lines(self, message: ErrorMessage) -> list[RenderedLine]:
        return render_lines(message, self._options)
