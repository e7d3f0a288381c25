"""
Tests for the sort entry point.
"""

import logging

import pytest

from recsort import SortDescriptor, SortOptions, sort
from recsort.core.exceptions import InvalidSequenceError, ValidationError


@pytest.mark.parametrize("value", ["abc", 42, (3, 1, 2), {"a": 1}, {3, 1}])
def test_non_list_input_raises(value):
    """Test that anything other than a list or None is rejected."""
    with pytest.raises(InvalidSequenceError, match="sort expects an array"):
        sort(value, "a")


def test_invalid_input_is_a_type_error():
    """Test that the invalid input error is catchable as TypeError."""
    with pytest.raises(TypeError):
        sort("abc")


def test_none_returns_empty_list():
    """Test that None means nothing to sort."""
    assert sort(None) == []
    assert sort(None, "a", {"direction": "desc"}) == []


def test_single_element_unchanged():
    """Test single-element lists with any criteria."""
    record = {"a": 1}
    assert sort([record], "a") == [record]
    assert sort([record], lambda a, b: 1 / 0) == [record]


def test_sorts_in_place_and_returns_same_list():
    """Test the in-place contract."""
    values = [3, 1, 2]
    result = sort(values, None)
    assert result is values
    assert values == [1, 2, 3]


def test_no_criteria_compares_string_forms():
    """Test that the list is ordered by string form when no criteria are given."""
    assert sort([10, 9, 1]) == [1, 10, 9]
    assert sort(["b", "a"]) == ["a", "b"]


def test_no_criteria_mixed_types():
    """Test that mixed, None and dict records sort without criteria."""
    assert sort([2, None, 1]) == [1, 2, None]
    assert sort(["b", 3, "a"]) == [3, "a", "b"]
    assert sort([{"a": 2}, {"a": 1}]) == [{"a": 1}, {"a": 2}]


def test_no_criteria_sorts_in_place():
    """Test that the default ordering still returns the same list."""
    values = [3, 1, 2]
    assert sort(values) is values


def test_nested_path():
    """Test sorting by a nested path."""
    records = [{"a": {"b": 2}}, {"a": {"b": 1}}]
    assert sort(records, "a.b") == [{"a": {"b": 1}}, {"a": {"b": 2}}]


def test_attribute_path(person_objects, names):
    """Test sorting objects through attribute paths."""
    assert names(sort(person_objects, "address.city")) == ["kim", "amy", "zed"]
    assert names(sort(person_objects, "tags[0]")) == ["kim", "zed", "amy"]


def test_custom_function():
    """Test a two-argument comparison function."""
    assert sort([3, 1, 2], lambda a, b: b - a) == [3, 2, 1]


def test_custom_function_with_fallback(people, names):
    """Test a function that defers to the default comparator."""

    def devs_first(a, b, fallback):
        a_dev, b_dev = a["team"]["name"] == "dev", b["team"]["name"] == "dev"
        if a_dev != b_dev:
            return -1 if a_dev else 1
        return fallback(a["name"], b["name"])

    assert names(sort(people, devs_first)) == ["alice", "bob", "carol", "dave"]


def test_custom_order():
    """Test ranking primitive records by a custom order."""
    assert sort(["b", "a", "c"], {"order": ["c", "b", "a"]}) == ["c", "b", "a"]


def test_custom_order_on_field(people, names):
    """Test ranking field values by a custom order."""
    result = sort(people, "team.name", "age", {"order": ["qa", "ops", "dev"]})
    assert names(result) == ["dave", "carol", "alice", "bob"]


def test_custom_order_with_unranked_values():
    """Test that values missing from the order sort after ranked ones."""
    assert sort(["x", "b", "a"], {"order": ["b", "a"]}) == ["b", "a", "x"]


def test_multi_key_precedence(people, names):
    """Test that later criteria only break ties."""
    assert names(sort(people, "age", "name")) == ["alice", "dave", "bob", "carol"]
    assert names(sort(people, "age", {"field": "name", "direction": "desc"})) == [
        "dave",
        "alice",
        "bob",
        "carol",
    ]


def test_tie_breaker_irrelevant_without_ties():
    """Test that sorting by x then y equals sorting by x when x never ties."""
    records = [{"x": 3, "y": 1}, {"x": 1, "y": 1}, {"x": 2, "y": 1}]
    assert sort(list(records), "x", "y") == sort(list(records), "x")
    assert sort(list(records), "y", "x") == sort(list(records), "x")


def test_criteria_as_single_list(people, names):
    """Test passing criteria pre-flattened in one list."""
    assert names(sort(people, ["team.rank", "age"])) == ["alice", "bob", "carol", "dave"]


def test_global_direction_reverses():
    """Test that desc is the exact reversal when there are no ties."""
    records = [{"x": 2}, {"x": 3}, {"x": 1}]
    ascending = sort(list(records), "x")
    descending = sort(list(records), "x", {"direction": "desc"})
    assert descending == list(reversed(ascending))


def test_descriptor_matches_global_direction():
    """Test a descending descriptor without global direction."""
    records = [{"x": 2}, {"x": 3}, {"x": 1}]
    by_descriptor = sort(list(records), {"field": "x", "direction": "desc"})
    by_options = sort(list(records), "x", {"direction": "desc"})
    assert by_descriptor == by_options == [{"x": 3}, {"x": 2}, {"x": 1}]


def test_descriptor_and_options_instances(people, names):
    """Test typed descriptors and options."""
    result = sort(people, SortDescriptor("team.rank", "desc"), "age", SortOptions())
    assert names(result) == ["dave", "carol", "alice", "bob"]


def test_options_only_direction():
    """Test reversing records with options alone."""
    assert sort([1, 3, 2], {"direction": "desc"}) == [3, 2, 1]


def test_idempotent(people):
    """Test that re-sorting a sorted list changes nothing."""
    once = list(sort(people, "team.name", {"field": "age", "direction": "desc"}))
    twice = sort(list(once), "team.name", {"field": "age", "direction": "desc"})
    assert twice == once


def test_stable_for_ties(people, names):
    """Test that tied records keep their relative order."""
    assert names(sort(people, "team.name")) == ["alice", "bob", "carol", "dave"]
    assert names(sort(people, "missing")) == ["alice", "bob", "carol", "dave"]


def test_missing_fields_sort_last():
    """Test that records without the field sort after the others."""
    records = [{"n": None}, {}, {"n": 2}, {"n": 1}]
    assert sort(records, "n") == [{"n": 1}, {"n": 2}, {"n": None}, {}]


def test_mixed_type_records():
    """Test that mixed records sort without errors."""
    assert sort(["b", 2, None, "a", 1], None) == [1, 2, "a", "b", None]


def test_function_errors_propagate():
    """Test that errors from user functions reach the caller."""

    def broken(a, b):
        raise ValueError("bad compare")

    with pytest.raises(ValueError, match="bad compare"):
        sort([1, 2], broken)


def test_invalid_options_logged(caplog):
    """Test that invalid options are logged and ignored by default."""
    with caplog.at_level(logging.WARNING, logger="recsort.core.sorting"):
        result = sort([2, 1], {"direction": "sideways"})
    assert result == [1, 2]
    assert "Invalid options" in caplog.text


def test_invalid_options_raise_in_strict_mode():
    """Test strict validation."""
    values = [2, 1]
    with pytest.raises(ValidationError, match="Invalid options"):
        sort(values, {"direction": "sideways"}, strict=True)
    assert values == [2, 1]


def test_invalid_descriptor_raises_in_strict_mode():
    """Test strict validation of descriptor mappings."""
    with pytest.raises(ValidationError, match="Invalid descriptor"):
        sort([{"x": 1}], {"field": "x", "direction": "down"}, strict=True)


def test_valid_arguments_pass_strict_mode(people, names):
    """Test that strict mode accepts well-formed arguments."""
    result = sort(people, {"field": "age", "direction": "desc"}, {"order": [1]}, strict=True)
    assert names(result) == ["carol", "bob", "alice", "dave"]


def test_enum_member_as_path(people, names):
    """Test sorting by a path given as a str enum member."""
    from enum import Enum

    class Field(str, Enum):
        TEAM = "team.name"

    assert names(sort(people, Field.TEAM, "age")) == ["alice", "bob", "carol", "dave"]
