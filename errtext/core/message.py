"""Error message and render option types.

An `ErrorMessage` is built once at the error site and handed to the
composer. It is immutable and validated on construction:

- the problem statement must contain text, not only punctuation
- each bullet item is a single non-empty line
- the hint, when given, must be phrased as a question (end with "?")

Context items are always rendered before fault items.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from .errors import InvalidMessage

__all__ = [
    "DEFAULT_MAX_ITEMS",
    "ErrorMessage",
    "RenderOptions",
    "validate_message",
]

DEFAULT_MAX_ITEMS = 5

_PUNCTUATION = ".:;,!?"


@dataclass(frozen=True, slots=True)
class ErrorMessage:
    """A problem statement with categorized bullets and an optional hint.

    Attributes:
        problem_statement: Leading sentence stating what went wrong.
        context_items: Background bullets, in display order.
        fault_items: Bullets naming the faulty input, in display order.
        hint: Suggested fix phrased as a question, or None.
    """

    problem_statement: str
    context_items: Sequence[str] = ()
    fault_items: Sequence[str] = ()
    hint: str | None = None

    def __post_init__(self) -> None:
        # Store sequences as tuples.
        object.__setattr__(self, "context_items", tuple(self.context_items))
        object.__setattr__(self, "fault_items", tuple(self.fault_items))
        validate_message(self)


@dataclass(frozen=True, slots=True)
class RenderOptions:
    """How a message is turned into text.

    Attributes:
        use_symbols: Use ℹ/✖ bullet markers instead of ASCII "*".
        use_color: Wrap markers in ANSI color sequences.
        max_items: Maximum number of bullets shown before summarizing (>= 1).
    """

    use_symbols: bool = True
    use_color: bool = False
    max_items: int = DEFAULT_MAX_ITEMS

    def __post_init__(self) -> None:
        if self.max_items < 1:
            raise ValueError(f"max_items must be >= 1, got {self.max_items}")


def validate_message(message: ErrorMessage) -> None:
    """Check construction rules, raising InvalidMessage on the first violation.

    Each bullet must be a single non-empty line so it renders as exactly one
    bulleted line.
    """
    statement = message.problem_statement.strip()
    if not statement:
        raise InvalidMessage("problem_statement", "must not be empty")
    if not statement.strip(_PUNCTUATION).strip():
        raise InvalidMessage("problem_statement", f"must contain text: {statement!r}")
    for field, items in (("context_items", message.context_items), ("fault_items", message.fault_items)):
        for item in items:
            if not item.strip():
                raise InvalidMessage(field, "items must not be empty")
            if len(item.strip().splitlines()) > 1:
                raise InvalidMessage(field, f"items must be a single line: {item!r}")
    if message.hint is not None and not message.hint.rstrip().endswith("?"):
        raise InvalidMessage("hint", f"must end with '?': {message.hint!r}")
