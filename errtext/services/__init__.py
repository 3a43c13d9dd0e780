"""Message composition services."""

from .composer import LineKind, MessageComposer, RenderedLine, render, render_lines

__all__ = [
    "LineKind",
    "MessageComposer",
    "RenderedLine",
    "render",
    "render_lines",
]
