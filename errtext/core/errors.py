"""Error types and CLI exit codes.

`InvalidMessage` signals a malformed error message at the point where it is
built. It is a programming error in the calling code, so it is raised rather
than returned.

`ErrorCode` maps failure kinds to stable process exit codes for the CLI.
"""

from __future__ import annotations

from enum import IntEnum

__all__ = ["ErrorCode", "InvalidMessage"]


class InvalidMessage(ValueError):
    """Raised when an error message violates its construction rules.

    Attributes:
        field: Name of the offending field (e.g. "problem_statement", "hint").
        reason: Short description of the violated rule.
    """

    def __init__(self, field: str, reason: str) -> None:
        self.field = field
        self.reason = reason
        super().__init__(f"{field}: {reason}")


class ErrorCode(IntEnum):
    """Exit codes for CLI commands.

    Values are used as process exit codes and should remain stable:
    - 0: Success
    - 1: User error (invalid message, bad arguments)
    - 5: I/O error (config or message file unreadable)
    """

    OK = 0
    USER_ERROR = 1
    IO_ERROR = 5

    def __str__(self) -> str:
        return self.name.lower().replace("_", " ")

    @property
    def is_success(self) -> bool:
        """Check if this code indicates success."""
        return self == ErrorCode.OK
