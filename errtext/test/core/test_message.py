"""Tests for errtext.core.message module."""

from __future__ import annotations

import pytest

from errtext.core.errors import InvalidMessage
from errtext.core.message import DEFAULT_MAX_ITEMS, ErrorMessage, RenderOptions


class TestErrorMessage:
    """Test ErrorMessage construction and validation."""

    def test_minimal(self) -> None:
        message = ErrorMessage("Can't open file")
        assert message.context_items == ()
        assert message.fault_items == ()
        assert message.hint is None

    def test_lists_are_frozen_to_tuples(self) -> None:
        context = ["There are 26 elements."]
        message = ErrorMessage("Must index an existing element", context_items=context)
        context.append("Mutated later.")
        assert message.context_items == ("There are 26 elements.",)

    def test_frozen(self) -> None:
        message = ErrorMessage("Problem")
        with pytest.raises(AttributeError):
            message.hint = "Why?"  # type: ignore[misc]

    def test_empty_problem_statement_rejected(self) -> None:
        with pytest.raises(InvalidMessage) as exc:
            ErrorMessage("")
        assert exc.value.field == "problem_statement"

    def test_whitespace_problem_statement_rejected(self) -> None:
        with pytest.raises(InvalidMessage):
            ErrorMessage("   \n")

    @pytest.mark.parametrize("statement", ["...", ":", " ?! ", ". ."])
    def test_punctuation_only_problem_statement_rejected(self, statement: str) -> None:
        with pytest.raises(InvalidMessage) as exc:
            ErrorMessage(statement)
        assert exc.value.field == "problem_statement"

    @pytest.mark.parametrize("item", ["", "   "])
    def test_empty_items_rejected(self, item: str) -> None:
        with pytest.raises(InvalidMessage) as exc:
            ErrorMessage("Problem", context_items=[item])
        assert exc.value.field == "context_items"

    @pytest.mark.parametrize("item", ["a\nb", "a\r\nb", "first\n\nsecond"])
    def test_multi_line_items_rejected(self, item: str) -> None:
        with pytest.raises(InvalidMessage) as exc:
            ErrorMessage("Problem", fault_items=["ok.", item])
        assert exc.value.field == "fault_items"

    def test_item_trailing_newline_allowed(self) -> None:
        message = ErrorMessage("Problem", fault_items=["`x` is missing.\n"])
        assert message.fault_items == ("`x` is missing.\n",)

    def test_hint_must_be_question(self) -> None:
        with pytest.raises(InvalidMessage) as exc:
            ErrorMessage("Problem", hint="Try again.")
        assert exc.value.field == "hint"

    def test_empty_hint_rejected(self) -> None:
        with pytest.raises(InvalidMessage):
            ErrorMessage("Problem", hint="")

    def test_hint_trailing_whitespace_allowed(self) -> None:
        message = ErrorMessage("Problem", hint="Did you mean `x`? ")
        assert message.hint == "Did you mean `x`? "

    def test_invalid_message_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            ErrorMessage("")


class TestRenderOptions:
    """Test RenderOptions defaults and bounds."""

    def test_defaults(self) -> None:
        options = RenderOptions()
        assert options.use_symbols is True
        assert options.use_color is False
        assert options.max_items == DEFAULT_MAX_ITEMS == 5

    def test_max_items_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="max_items"):
            RenderOptions(max_items=0)

    def test_max_items_one_allowed(self) -> None:
        assert RenderOptions(max_items=1).max_items == 1
