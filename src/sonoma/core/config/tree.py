"""Value kinds for configuration trees.

A config tree is a plain ``dict`` so it serializes to JSON unchanged, but every
value stored in it belongs to exactly one ``ValueKind``. Merge and path code
branch on ``kind_of()`` rather than probing types ad hoc.
"""
from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any, Dict, List, Union

ConfigValue = Union[None, bool, int, float, str, List[Any], Dict[str, Any]]
ConfigTree = Dict[str, Any]


class ValueKind(str, Enum):
    """Tag for a value that may appear anywhere in a config tree."""

    NULL = "null"
    BOOLEAN = "boolean"
    NUMBER = "number"
    STRING = "string"
    SEQUENCE = "sequence"
    TREE = "tree"


def kind_of(value: Any) -> ValueKind:
    """Classify ``value``.

    ``bool`` is checked before numbers because it subclasses ``int``. Tuples
    count as sequences; any ``Mapping`` counts as a tree.

    Raises:
        TypeError: If the value cannot be stored in a config tree.
    """
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOLEAN
    if isinstance(value, (int, float)):
        return ValueKind.NUMBER
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, Mapping):
        return ValueKind.TREE
    if isinstance(value, (list, tuple)):
        return ValueKind.SEQUENCE
    raise TypeError(f"Unsupported config value type: {type(value).__name__}")


def is_tree(value: Any) -> bool:
    """Return True when ``value`` is a nested config tree."""
    try:
        return kind_of(value) is ValueKind.TREE
    except TypeError:
        return False


def check_value(value: Any, *, finite: bool = False) -> ValueKind:
    """Classify ``value`` and every value nested inside it.

    With ``finite=True``, NaN and infinite numbers are rejected as well.

    Raises:
        TypeError: If any nested value is unsupported or a tree key is not a string.
        ValueError: If ``finite`` is set and a number is not finite.
    """
    kind = kind_of(value)
    if kind is ValueKind.TREE:
        for key, item in value.items():
            if not isinstance(key, str):
                raise TypeError(f"Config tree keys must be strings, got {type(key).__name__}")
            check_value(item, finite=finite)
    elif kind is ValueKind.SEQUENCE:
        for item in value:
            check_value(item, finite=finite)
    elif finite and isinstance(value, float) and not math.isfinite(value):
        raise ValueError(f"Config numbers must be finite, got {value!r}")
    return kind


__all__ = [
    "ConfigTree",
    "ConfigValue",
    "ValueKind",
    "kind_of",
    "is_tree",
    "check_value",
]
