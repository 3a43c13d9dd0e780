"""Tests for errtext.core.errors module."""

from errtext.core.errors import ErrorCode, InvalidMessage


class TestInvalidMessage:
    def test_attributes(self) -> None:
        err = InvalidMessage("hint", "must end with '?'")
        assert err.field == "hint"
        assert err.reason == "must end with '?'"

    def test_str(self) -> None:
        assert str(InvalidMessage("problem_statement", "must not be empty")) == (
            "problem_statement: must not be empty"
        )


class TestErrorCode:
    def test_values(self) -> None:
        assert ErrorCode.OK == 0
        assert ErrorCode.USER_ERROR == 1
        assert ErrorCode.IO_ERROR == 5

    def test_str(self) -> None:
        assert str(ErrorCode.USER_ERROR) == "user error"

    def test_is_success(self) -> None:
        assert ErrorCode.OK.is_success is True
        assert ErrorCode.IO_ERROR.is_success is False
