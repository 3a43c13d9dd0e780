"""Tests for errtext.core.loader module."""

from __future__ import annotations

from pathlib import Path

from errtext.core.loader import load_message
from errtext.core.message import ErrorMessage
from errtext.core.result import Err, Ok


def _write(tmp_path: Path, content: str) -> Path:
    path = tmp_path / "message.toml"
    path.write_text(content, encoding="utf-8")
    return path


def test_full_message(tmp_path: Path) -> None:
    path = _write(
        tmp_path,
        'problem = "Must index an existing element"\n'
        'context = ["There are 26 elements."]\n'
        "fault = [\"You've tried to subset element 100.\"]\n"
        'hint = "Did you mean element 10?"\n',
    )

    result = load_message(path)

    assert isinstance(result, Ok)
    assert result.value == ErrorMessage(
        "Must index an existing element",
        ("There are 26 elements.",),
        ("You've tried to subset element 100.",),
        "Did you mean element 10?",
    )


def test_single_string_items(tmp_path: Path) -> None:
    path = _write(tmp_path, 'problem = "Bad input"\nfault = "`x` is missing."\n')
    result = load_message(path)
    assert isinstance(result, Ok)
    assert result.value.fault_items == ("`x` is missing.",)


def test_missing_problem(tmp_path: Path) -> None:
    result = load_message(_write(tmp_path, 'context = ["a"]\n'))
    assert isinstance(result, Err)
    assert "problem" in result.error.message
    assert result.error.io is False


def test_bad_item_type(tmp_path: Path) -> None:
    result = load_message(_write(tmp_path, 'problem = "Bad"\nfault = [1, 2]\n'))
    assert isinstance(result, Err)
    assert "'fault'" in result.error.message


def test_invalid_hint(tmp_path: Path) -> None:
    result = load_message(_write(tmp_path, 'problem = "Bad"\nhint = "Try again."\n'))
    assert isinstance(result, Err)
    assert "hint" in result.error.message


def test_non_string_hint(tmp_path: Path) -> None:
    result = load_message(_write(tmp_path, 'problem = "Bad"\nhint = 3\n'))
    assert isinstance(result, Err)
    assert "'hint'" in result.error.message


def test_unreadable_file_is_io_error(tmp_path: Path) -> None:
    result = load_message(tmp_path / "missing.toml")
    assert isinstance(result, Err)
    assert result.error.io is True
    assert result.error.path == tmp_path / "missing.toml"
