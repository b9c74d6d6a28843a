"""Helpers for reading untyped configuration mappings.

Hook configuration arrives from the host as an arbitrary mapping (decoded
JSON or TOML). These helpers narrow values to the expected type and return
None for anything missing or mistyped, leaving defaults to the caller.
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
    """Return obj as StrDict if it matches, else None."""
    if is_str_dict(obj):
        return obj
    return None


def get_str(table: Mapping[str, object], key: str, *, strip: bool = True) -> str | None:
    """Get a non-empty string value from a mapping.

    With ``strip=False`` the value is returned verbatim so that validators
    can inspect embedded whitespace and control characters.

    Returns None if missing, not a str, or empty.
    """
    value = table.get(key)
    if not isinstance(value, str):
        return None
    s = value.strip() if strip else value
    return s or None


def get_bool(table: Mapping[str, object], key: str) -> bool | None:
    """Get a boolean value from a mapping.

    Only real booleans count; ``"true"`` or ``1`` return None.
    """
    value = table.get(key)
    if isinstance(value, bool):
        return value
    return None


def get_table(table: Mapping[str, object], key: str) -> StrDict | None:
    """Get a nested table (dict with string keys) from a mapping."""
    return as_str_dict(table.get(key))
