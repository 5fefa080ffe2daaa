"""Helpers for reading untyped TOML tables.

Used at the config boundary: they validate at runtime and narrow types
statically. A value of the wrong type raises TypeError so the loader can
report it, a missing value returns None.
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
    """Get a nested table from a mapping.

    Raises:
        TypeError: The key exists but is not a table.
    """
    value = table.get(key)
    if value is None:
        return None
    d = as_str_dict(value)
    if d is None:
        raise TypeError(f"'{key}' must be a table")
    return d


def get_str(table: Mapping[str, object], key: str) -> str | None:
    """Get a string value without stripping it.

    Empty strings are kept: an empty tag prefix or namespace is meaningful.

    Raises:
        TypeError: The key exists but is not a string.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"'{key}' must be a string")
    return value


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value.

    Raises:
        TypeError: The key exists but is not a boolean.
    """
    value = table.get(key)
    if value is None:
        return None
    if not isinstance(value, bool):
        raise TypeError(f"'{key}' must be a boolean")
    return value
