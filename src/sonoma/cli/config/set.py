"""
Sonoma config set command.

SUMMARY: Set a configuration value

The value is parsed as JSON when it is valid JSON (numbers, booleans, null,
arrays, objects, quoted strings); anything else is stored as the raw string.
The change is persisted immediately.
"""

from __future__ import annotations

import argparse
import json
from typing import Any, Optional

from sonoma.cli import OutputFormatter, add_json_flag, format_value
from sonoma.core.config import ConfigStore
from sonoma.core.exceptions import InvalidPathError, PersistError

SUMMARY = "Set a configuration value"


def _reject_constant(name: str) -> Any:
    raise ValueError(f"{name} is not valid JSON")


def parse_value(raw: Optional[str]) -> Any:
    """Parse a command-line value as JSON, falling back to the raw string.

    ``NaN`` and ``Infinity`` are treated as plain strings. A missing value
    becomes null.
    """
    if raw is None:
        return None
    try:
        return json.loads(raw, parse_constant=_reject_constant)
    except ValueError:
        return raw


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", help="Configuration key (e.g., 'auth.apiKey')")
    parser.add_argument("value", nargs="?", help="Configuration value (JSON or plain text)")
    add_json_flag(parser)


def main(args: argparse.Namespace, store: ConfigStore) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))
    value = parse_value(args.value)

    try:
        store.set(args.key, value)
    except InvalidPathError as e:
        formatter.error(e, error_code="invalid_config_path")
        return 1
    except PersistError as e:
        formatter.error(e, error_code="config_persist_error")
        return 1

    formatter.success(
        {"key": args.key, "value": value, "path": str(store.config_path)},
        f"Configuration updated: {args.key} = {format_value(value)}",
    )
    return 0
