"""Tests for config value kinds."""
from __future__ import annotations

from types import MappingProxyType

import pytest

from sonoma.core.config.tree import ValueKind, check_value, is_tree, kind_of


@pytest.mark.parametrize(
    "value,expected",
    [
        (None, ValueKind.NULL),
        (True, ValueKind.BOOLEAN),
        (False, ValueKind.BOOLEAN),
        (0, ValueKind.NUMBER),
        (2.5, ValueKind.NUMBER),
        ("", ValueKind.STRING),
        ([1, "a"], ValueKind.SEQUENCE),
        ((1, 2), ValueKind.SEQUENCE),
        ({}, ValueKind.TREE),
        (MappingProxyType({"a": 1}), ValueKind.TREE),
    ],
)
def test_kind_of_classifies_values(value, expected) -> None:
    assert kind_of(value) is expected


def test_bool_is_not_a_number() -> None:
    assert kind_of(True) is not ValueKind.NUMBER


def test_kind_of_rejects_unsupported_types() -> None:
    with pytest.raises(TypeError):
        kind_of({1, 2})
    with pytest.raises(TypeError):
        kind_of(object())


def test_is_tree() -> None:
    assert is_tree({"a": 1})
    assert not is_tree([("a", 1)])
    assert not is_tree("a")
    assert not is_tree(object())


def test_check_value_walks_nested_values() -> None:
    assert check_value({"a": [1, {"b": None}], "c": "x"}) is ValueKind.TREE

    with pytest.raises(TypeError):
        check_value({"a": [1, {"b": {1, 2}}]})


def test_check_value_rejects_non_string_keys() -> None:
    with pytest.raises(TypeError, match="keys must be strings"):
        check_value({"a": {1: "one"}})


def test_check_value_finite_rejects_nan_and_infinity() -> None:
    assert check_value({"a": [1.5, 10**400]}, finite=True) is ValueKind.TREE
    assert check_value({"a": float("nan")}) is ValueKind.TREE

    with pytest.raises(ValueError, match="finite"):
        check_value({"a": [float("inf")]}, finite=True)
    with pytest.raises(ValueError, match="finite"):
        check_value({"a": {"b": float("nan")}}, finite=True)
