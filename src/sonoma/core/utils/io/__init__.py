"""I/O utilities for Sonoma.

This package provides safe file operations for config sources:
- Core: atomic writes, directory management, text I/O
- JSON: read and atomic write
- YAML: string dump for display
"""
from __future__ import annotations

from .core import (
    PathLike,
    atomic_write,
    ensure_directory,
    ensure_parent_dir,
    read_text,
)
from .json import (
    DEFAULT_JSON_CONFIG,
    parse_json_string,
    read_json,
    write_json_atomic,
)
from .yaml import dump_yaml_string

__all__ = [
    # core
    "PathLike",
    "ensure_parent_dir",
    "ensure_directory",
    "atomic_write",
    "read_text",
    # json
    "DEFAULT_JSON_CONFIG",
    "read_json",
    "parse_json_string",
    "write_json_atomic",
    # yaml
    "dump_yaml_string",
]
