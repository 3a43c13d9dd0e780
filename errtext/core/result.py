"""Result type for loaders that read untrusted input.

Config and message files can be missing or malformed; loaders return
`Ok(value)` or `Err(error)` so the CLI decides how to report the failure.

    match load_config(path):
        case Ok(config):
            ...
        case Err(error):
            console.error(error.message)
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["Ok", "Err", "Result"]


@dataclass(frozen=True, slots=True)
class Ok[T]:
    """Successful result holding `value`."""

    value: T


@dataclass(frozen=True, slots=True)
class Err[E]:
    """Failed result holding `error`."""

    error: E


type Result[T, E] = Ok[T] | Err[E]
