"""Terminal capability detection.

Rendering never inspects the environment itself. Callers that want
terminal-appropriate output call `detect_options()` once and pass the
resulting `RenderOptions` to the composer.
"""

from __future__ import annotations

import os as _os
import sys as _sys
from collections.abc import Mapping
from dataclasses import dataclass
from typing import TextIO

from errtext.core.message import DEFAULT_MAX_ITEMS, RenderOptions

__all__ = [
    "TerminalInfo",
    "detect",
    "detect_options",
    "supports_color",
    "supports_unicode",
]

_UTF_ENCODINGS = frozenset({"utf-8", "utf8", "utf_8", "utf-16", "utf-32"})


@dataclass(frozen=True, slots=True)
class TerminalInfo:
    """What the output stream can display."""

    unicode: bool
    color: bool

    def to_options(self, max_items: int = DEFAULT_MAX_ITEMS) -> RenderOptions:
        return RenderOptions(use_symbols=self.unicode, use_color=self.color, max_items=max_items)


def _isatty(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    if isatty is None:
        return False
    try:
        return bool(isatty())
    except ValueError:
        # Closed stream
        return False


def supports_unicode(stream: TextIO, env: Mapping[str, str]) -> bool:
    """Check whether the stream can encode the ℹ/✖ markers.

    Falls back to the locale variables when the stream has no encoding.
    """
    encoding = getattr(stream, "encoding", None)
    if isinstance(encoding, str) and encoding:
        return encoding.lower() in _UTF_ENCODINGS

    for var in ("LC_ALL", "LC_CTYPE", "LANG"):
        value = env.get(var)
        if value:
            return "utf-8" in value.lower() or "utf8" in value.lower()
    return False


def supports_color(stream: TextIO, env: Mapping[str, str]) -> bool:
    """Check whether colored output is appropriate.

    Precedence: NO_COLOR (any non-empty value) disables, FORCE_COLOR
    enables, TERM=dumb disables, otherwise color follows isatty().
    """
    if env.get("NO_COLOR"):
        return False
    if env.get("FORCE_COLOR"):
        return True
    if env.get("TERM") == "dumb":
        return False
    return _isatty(stream)


def detect(stream: TextIO | None = None, env: Mapping[str, str] | None = None) -> TerminalInfo:
    """Detect terminal capabilities for a stream (defaults to stdout)."""
    stream = stream if stream is not None else _sys.stdout
    env = env if env is not None else _os.environ
    return TerminalInfo(
        unicode=supports_unicode(stream, env),
        color=supports_color(stream, env),
    )


def detect_options(
    stream: TextIO | None = None,
    env: Mapping[str, str] | None = None,
    *,
    max_items: int = DEFAULT_MAX_ITEMS,
) -> RenderOptions:
    """Build RenderOptions matching the terminal behind a stream."""
    return detect(stream, env).to_options(max_items)
