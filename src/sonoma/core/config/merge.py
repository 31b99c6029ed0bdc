"""Canonical deep merge utilities.

Single source of truth for combining config trees. Semantics:
- Trees (mappings) on both sides merge recursively
- Any other pairing is won by the override value
- Sequences are replaced wholesale, never concatenated
- Keys present only in the base are kept
"""
from __future__ import annotations

import copy
from typing import Any, Dict, Iterable, Mapping

from .tree import ValueKind, kind_of


def deep_merge(base: Mapping[str, Any], override: Mapping[str, Any]) -> Dict[str, Any]:
    """Recursively merge dictionaries without mutating inputs.

    The result shares no mutable containers with either input, so in-place
    edits on it never leak back into a source.

    Args:
        base: Base dictionary (lower priority)
        override: Override dictionary (higher priority)

    Returns:
        New merged dictionary

    Example:
        >>> deep_merge({"a": {"b": 1, "c": 2}}, {"a": {"c": 3, "d": 4}})
        {'a': {'b': 1, 'c': 3, 'd': 4}}
        >>> deep_merge({"x": [1, 2]}, {"x": [3]})
        {'x': [3]}
    """
    result: Dict[str, Any] = {key: copy.deepcopy(value) for key, value in base.items()}
    for key, value in (override or {}).items():
        if (
            key in result
            and kind_of(result[key]) is ValueKind.TREE
            and kind_of(value) is ValueKind.TREE
        ):
            result[key] = deep_merge(result[key], value)
        elif kind_of(value) is ValueKind.TREE:
            result[key] = deep_merge({}, value)
        else:
            result[key] = copy.deepcopy(value)
    return result


def merge_all(sources: Iterable[Mapping[str, Any]]) -> Dict[str, Any]:
    """Fold ``deep_merge`` over ``sources``, lowest precedence first.

    Example:
        >>> merge_all([{"network": "devnet"}, {}, {"network": "mainnet"}])
        {'network': 'mainnet'}
    """
    merged: Dict[str, Any] = {}
    for source in sources:
        merged = deep_merge(merged, source)
    return merged


__all__ = ["deep_merge", "merge_all"]
