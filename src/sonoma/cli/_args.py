"""Common CLI argument registration utilities."""
from __future__ import annotations

import argparse


def add_json_flag(parser: argparse.ArgumentParser) -> None:
    """Add --json flag for JSON output mode."""
    parser.add_argument(
        "--json",
        action="store_true",
        help="Output as JSON",
    )


def add_yes_flag(parser: argparse.ArgumentParser) -> None:
    """Add --yes flag to skip confirmation prompts."""
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Proceed without asking for confirmation",
    )


__all__ = ["add_json_flag", "add_yes_flag"]
