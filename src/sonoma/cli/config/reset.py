"""
Sonoma config reset command.

SUMMARY: Reset configuration

Removes a single key, or with ``--all`` the whole configuration (after
confirmation unless ``--yes`` is given).
"""

from __future__ import annotations

import argparse

from sonoma.cli import OutputFormatter, add_json_flag, add_yes_flag
from sonoma.core.config import ConfigStore
from sonoma.core.exceptions import InvalidPathError, PersistError
from sonoma.core.utils.cli import confirm

SUMMARY = "Reset configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument("key", nargs="?", help="Configuration key to reset")
    parser.add_argument(
        "--all",
        action="store_true",
        help="Reset all configuration",
    )
    add_yes_flag(parser)
    add_json_flag(parser)


def main(args: argparse.Namespace, store: ConfigStore) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        if args.all:
            if not args.yes and not confirm(
                "Are you sure you want to reset all configuration?", default=False
            ):
                formatter.success({"reset": None}, "Reset cancelled", status="cancelled")
                return 0
            store.reset_all()
            formatter.success({"reset": "all"}, "All configuration reset successfully")
            return 0

        if not args.key:
            formatter.error(
                ValueError("Please specify a key to reset or use --all"),
                error_code="config_reset_usage",
            )
            return 1

        store.reset(args.key)
        formatter.success({"reset": args.key}, f"Configuration reset successfully: {args.key}")
        return 0

    except InvalidPathError as e:
        formatter.error(e, error_code="invalid_config_path")
        return 1
    except PersistError as e:
        formatter.error(e, error_code="config_persist_error")
        return 1
