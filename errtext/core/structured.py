"""Helpers for narrowing untyped TOML data.

Loaders call these at the boundary where parsed TOML enters typed code.
Each getter returns None when the key is missing or has the wrong type.
"""

from __future__ import annotations

from typing import Mapping, TypeGuard, cast

StrDict = dict[str, object]


def is_str_dict(obj: object) -> TypeGuard[StrDict]:
    """Return True if obj is a dict with string keys."""
    if not isinstance(obj, dict):
        return False
    d = cast(dict[object, object], obj)
    return all(isinstance(k, str) for k in d.keys())


def as_str_dict(obj: object) -> StrDict | None:
    if is_str_dict(obj):
        return obj
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table from a mapping."""
    return as_str_dict(table.get(key))


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value, stripped. Empty strings count as missing."""
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip()
    return s or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_int(table: Mapping[str, object], key: str) -> int | None:
    """Get an integer value. Booleans are rejected even though they are ints."""
    value = table.get(key)
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def get_str_list(table: Mapping[str, object], key: str) -> list[str] | None:
    """Get a list of strings. A bare string is treated as a one-item list."""
    value = table.get(key)
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        return None
    items = cast(list[object], value)
    if not all(isinstance(item, str) for item in items):
        return None
    return [cast(str, item) for item in items]
