"""Dotted-path navigation over config trees.

Paths such as ``agents.my-agent.deployment.status`` address nested keys. There
is no escape syntax: a key that itself contains ``.`` cannot be addressed.
"""
from __future__ import annotations

from typing import Any, Tuple, Union

from sonoma.core.exceptions import InvalidPathError

from .tree import ConfigTree, is_tree

ConfigPath = Tuple[str, ...]
PathLike = Union[str, ConfigPath]


class _Missing:
    """Sentinel type for "no value at this path" (distinct from ``None``)."""

    _instance: "_Missing | None" = None

    def __new__(cls) -> "_Missing":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "MISSING"

    def __bool__(self) -> bool:
        return False


MISSING: Any = _Missing()


def parse_path(path: str) -> ConfigPath:
    """Split a dotted path into its non-empty segments.

    Empty segments (``a..b``, ``.a``, ``a.``) are dropped.

    Raises:
        InvalidPathError: If ``path`` is not a string or yields no segments.
    """
    if not isinstance(path, str):
        raise InvalidPathError(path, f"Config path must be a string, got {type(path).__name__}")
    parts = tuple(p for p in path.split(".") if p)
    if not parts:
        raise InvalidPathError(path)
    return parts


def _segments(path: PathLike) -> ConfigPath:
    if isinstance(path, tuple):
        if not path or not all(isinstance(p, str) and p for p in path):
            raise InvalidPathError(path)
        return path
    return parse_path(path)


def get_path(tree: ConfigTree, path: PathLike) -> Any:
    """Return the value at ``path`` or ``MISSING``.

    Navigation stops with ``MISSING`` as soon as an intermediate value is not
    a tree or a key is absent.
    """
    current: Any = tree
    for part in _segments(path):
        if not is_tree(current) or part not in current:
            return MISSING
        current = current[part]
    return current


def set_path(tree: ConfigTree, path: PathLike, value: Any) -> ConfigTree:
    """Assign ``value`` at ``path``, creating intermediate trees as needed.

    A non-tree value found at an intermediate segment is replaced by a new
    tree. Mutates and returns ``tree``.
    """
    parts = _segments(path)
    current = tree
    for part in parts[:-1]:
        if not is_tree(current.get(part)):
            current[part] = {}
        current = current[part]
    current[parts[-1]] = value
    return tree


def delete_path(tree: ConfigTree, path: PathLike) -> None:
    """Remove the key at ``path``.

    A no-op when any intermediate segment does not resolve to a tree or the
    final key is absent.
    """
    parts = _segments(path)
    current: Any = tree
    for part in parts[:-1]:
        nxt = current.get(part)
        if not is_tree(nxt):
            return
        current = nxt
    current.pop(parts[-1], None)


__all__ = [
    "MISSING",
    "ConfigPath",
    "PathLike",
    "parse_path",
    "get_path",
    "set_path",
    "delete_path",
]
