"""Tests for the built-in token dictionaries and dictionary lookup by name."""

import pytest

import datetok as dtok
from datetok.dictionary import resolve_dictionary
from datetok.errors import DictionaryError
from datetok._sanitise import render_bytes


def test_builtin_sizes():
    assert len(dtok.STRICT_TOKENS) == 29
    assert len(dtok.STANDARD_TOKENS) == 70


def test_builtins_are_read_only():
    with pytest.raises(TypeError):
        dtok.STANDARD_TOKENS["YYYY"] = "2007"


@pytest.mark.parametrize("n", range(1, 10))
def test_fractional_second_runs(n):
    assert dtok.STRICT_TOKENS["f" * n] == "9" * n
    assert dtok.STANDARD_TOKENS["F" * n] == "9" * n
    assert dtok.STANDARD_TOKENS["F" + "f" * (n - 1)] == "9" * n


def test_strict_is_a_subset_of_standard():
    """Every strict key also translates identically under standard."""
    for key, value in dtok.STRICT_TOKENS.items():
        assert dtok.STANDARD_TOKENS[key] == value


def test_lookup_by_name():
    assert dtok.list_dictionaries() == ["strict", "standard"]
    assert dtok.get_dictionary("STANDARD") is dtok.STANDARD_TOKENS
    assert dtok.TokenDictionary.STRICT.tokens is dtok.STRICT_TOKENS


def test_unknown_name_raises():
    with pytest.raises(DictionaryError) as exc_info:
        dtok.get_dictionary("rfc3339")
    assert exc_info.value.available == ["strict", "standard"]


def test_resolve_validates_custom_mappings():
    custom = {"Q": "Quarter"}
    assert resolve_dictionary(custom) is custom
    with pytest.raises(DictionaryError) as exc_info:
        resolve_dictionary({1: "one"})
    assert exc_info.value.invalid_key == 1


def test_render_escapes_control_bytes():
    assert render_bytes(b"YY\x00") == "YY\\u0000"
    assert str(dtok.Token(b"\n")) == "\\u000a"
