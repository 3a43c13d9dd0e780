"""Load error messages from TOML files.

    problem = "Must index an existing element"
    context = ["There are 26 elements."]
    fault = ["You've tried to subset element 100."]
    hint = "Did you mean element 10?"

`context` and `fault` accept a single string or a list of strings.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .config import parse_toml
from .errors import InvalidMessage
from .message import ErrorMessage
from .result import Err, Ok, Result
from .structured import get_str, get_str_list

__all__ = ["MessageFileError", "load_message"]


@dataclass(frozen=True, slots=True)
class MessageFileError:
    """A message file that could not be read or does not describe a valid message."""

    message: str
    path: Path
    io: bool = False


def load_message(path: Path) -> Result[ErrorMessage, MessageFileError]:
    """Read an ErrorMessage from a TOML file.

    Returns:
        Ok(ErrorMessage), or Err(MessageFileError) when the file is unreadable
        (io=True) or its content is invalid (io=False).
    """
    parsed = parse_toml(path)
    if isinstance(parsed, Err):
        return Err(MessageFileError(parsed.error.message, path, io=True))

    data = parsed.value
    problem = get_str(data, "problem")
    if problem is None:
        return Err(MessageFileError("missing 'problem' string", path))

    context: list[str] = []
    fault: list[str] = []
    for key, target in (("context", context), ("fault", fault)):
        if key not in data:
            continue
        items = get_str_list(data, key)
        if items is None:
            return Err(MessageFileError(f"'{key}' must be a string or a list of strings", path))
        target.extend(items)

    hint = data.get("hint")
    if hint is not None and not isinstance(hint, str):
        return Err(MessageFileError("'hint' must be a string", path))

    try:
        return Ok(ErrorMessage(problem, context, fault, hint))
    except InvalidMessage as e:
        return Err(MessageFileError(str(e), path))
