"""
Sonoma config get command.

SUMMARY: Get a configuration value

Prints ``key: value`` for a dotted key. Trees and lists are printed as
indented JSON. A key that does not resolve is an error.
"""

from __future__ import annotations

import argparse

from sonoma.cli import OutputFormatter, add_json_flag, format_value
from sonoma.core.config import MISSING, ConfigStore
from sonoma.core.exceptions import InvalidPathError

SUMMARY = "Get a configuration value"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", help="Configuration key (e.g., 'auth.apiKey')")
    add_json_flag(parser)


def main(args: argparse.Namespace, store: ConfigStore) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        value = store.get(args.key, MISSING)
    except InvalidPathError as e:
        formatter.error(e, error_code="invalid_config_path")
        return 1

    if value is MISSING:
        formatter.error(
            LookupError(f"Configuration key not found: {args.key}"),
            error_code="config_key_not_found",
        )
        return 1

    if formatter.json_mode:
        formatter.json_output({"key": args.key, "value": value})
    else:
        formatter.text(f"{args.key}: {format_value(value)}")
    return 0
