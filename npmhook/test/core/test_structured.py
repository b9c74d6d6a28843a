from __future__ import annotations

from npmhook.core.structured import as_str_dict, get_bool, get_str, get_table


def test_as_str_dict_rejects_non_string_keys() -> None:
    assert as_str_dict({"a": 1}) == {"a": 1}
    assert as_str_dict({1: "a"}) is None
    assert as_str_dict(["a"]) is None


def test_get_str_strips_by_default() -> None:
    assert get_str({"k": "  v  "}, "k") == "v"
    assert get_str({"k": "   "}, "k") is None
    assert get_str({"k": 3}, "k") is None
    assert get_str({}, "k") is None


def test_get_str_without_strip_keeps_raw_value() -> None:
    assert get_str({"k": "https://x\n"}, "k", strip=False) == "https://x\n"
    assert get_str({"k": ""}, "k", strip=False) is None


def test_get_bool_only_accepts_real_booleans() -> None:
    assert get_bool({"k": True}, "k") is True
    assert get_bool({"k": False}, "k") is False
    assert get_bool({"k": "true"}, "k") is None
    assert get_bool({"k": 1}, "k") is None


def test_get_table() -> None:
    assert get_table({"t": {"a": 1}}, "t") == {"a": 1}
    assert get_table({"t": "x"}, "t") is None
