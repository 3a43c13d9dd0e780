"""Structured error-message composer.

    >>> from errtext import ErrorMessage, render
    >>> print(render(ErrorMessage(
    ...     "Must index an existing element",
    ...     context_items=["There are 26 elements."],
    ...     fault_items=["You've tried to subset element 100."],
    ... )))
    Must index an existing element:
    ℹ There are 26 elements.
    ✖ You've tried to subset element 100.
"""

__version__ = "0.1.0"

from errtext.core.errors import InvalidMessage
from errtext.core.message import ErrorMessage, RenderOptions
from errtext.services.composer import MessageComposer, render

__all__ = [
    "ErrorMessage",
    "InvalidMessage",
    "MessageComposer",
    "RenderOptions",
    "render",
]
