"""
Sonoma config list command.

SUMMARY: List all configuration

Prints the merged configuration tree as JSON (default) or YAML. With
``--sources`` the file-backed sources that contributed are listed too.
"""

from __future__ import annotations

import argparse

from sonoma.cli import OutputFormatter, add_json_flag
from sonoma.core.config import ConfigStore
from sonoma.core.utils.io import dump_yaml_string

SUMMARY = "List all configuration"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--format",
        choices=["json", "yaml"],
        default="json",
        help="Output format (default: json)",
    )
    parser.add_argument(
        "--sources",
        action="store_true",
        help="Also show which configuration files were loaded",
    )
    add_json_flag(parser)


def main(args: argparse.Namespace, store: ConfigStore) -> int:
    json_mode = getattr(args, "json", False)
    formatter = OutputFormatter(json_mode=json_mode)
    config_data = store.get()

    if json_mode:
        if args.sources:
            formatter.json_output({"config": config_data, "sources": store.sources()})
        else:
            formatter.json_output(config_data)
        return 0

    if args.sources:
        for source in store.sources():
            state = "loaded" if source["exists"] else "not found"
            formatter.text(f"# {source['source']}: {source['path'] or '-'} ({state})")

    if args.format == "yaml":
        formatter.text(dump_yaml_string(config_data).rstrip() if config_data else "{}")
    else:
        formatter.json_output(config_data)
    return 0
