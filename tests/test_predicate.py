"""Unit tests for adjacency predicates and the predicate registry."""

import itertools

import pytest

import datetok as dtok
from datetok.errors import PredicateError
from datetok.predicate import (
    END_OF_INPUT,
    check_next_part_of_token,
    check_next_part_of_token_strict,
    resolve_predicate,
)

EXCEPTION_PAIRS = {
    (ord(a), ord(b))
    for a, b in ["Yy", "Mm", "Dd", "Hh", "Ss", "Ff", "Zz", "Da", "ay"]
}

ALL_PAIRS = list(itertools.product(range(256), repeat=2))


# Default and strict tables
# ---------------------------------------------------------------------------


def test_default_predicate_table_is_exact():
    """Over every byte pair, only identity and the nine exception pairs continue."""
    pred = dtok.DefaultPredicate()
    for cur, nxt in ALL_PAIRS:
        expected = cur == nxt or (cur, nxt) in EXCEPTION_PAIRS
        assert pred.continues(cur, nxt) is expected, (chr(cur), chr(nxt))


def test_strict_predicate_table_is_identity():
    pred = dtok.StrictPredicate()
    for cur, nxt in ALL_PAIRS:
        assert pred.continues(cur, nxt) is (cur == nxt)


def test_sentinel_only_continues_nul():
    assert dtok.DEFAULT.continues(0, END_OF_INPUT)
    assert not dtok.DEFAULT.continues(ord("Y"), END_OF_INPUT)


def test_predicates_are_callable():
    assert dtok.DEFAULT(ord("D"), ord("a"))
    assert not dtok.STRICT(ord("D"), ord("a"))


# Registry
# ---------------------------------------------------------------------------


def test_list_predicates():
    assert dtok.list_predicates() == ["default", "strict", "custom"]


@pytest.mark.parametrize(
    ("name", "cls"),
    [("default", dtok.DefaultPredicate), ("strict", dtok.StrictPredicate)],
)
def test_get_predicate_by_name(name, cls):
    assert isinstance(dtok.get_predicate(name), cls)


def test_get_custom_predicate():
    pred = dtok.get_predicate("custom", lambda cur, nxt: True)
    assert isinstance(pred, dtok.CallablePredicate)
    assert pred.continues(1, 2)


def test_custom_predicate_requires_func():
    with pytest.raises(PredicateError):
        dtok.get_predicate("custom")


def test_unknown_predicate_name_raises():
    with pytest.raises(PredicateError) as exc_info:
        dtok.get_predicate("fuzzy")
    assert exc_info.value.invalid_name == "fuzzy"
    assert "default" in exc_info.value.available


def test_callable_predicate_rejects_non_callables():
    with pytest.raises(PredicateError):
        dtok.CallablePredicate(42)


def test_resolve_predicate_passes_instances_through():
    pred = dtok.StrictPredicate()
    assert resolve_predicate(pred) is pred
    assert isinstance(resolve_predicate(None), dtok.DefaultPredicate)


def test_legacy_names_are_deprecated():
    with pytest.deprecated_call():
        assert check_next_part_of_token(ord("a"), ord("y"))
    with pytest.deprecated_call():
        assert not check_next_part_of_token_strict(ord("a"), ord("y"))
