"""
Sonoma config network command.

SUMMARY: Configure the target network

With a name, stores ``network = {name, url}`` using the known API URL for that
name unless ``--url`` overrides it. Without a name, shows the current network
and the known ones.
"""

from __future__ import annotations

import argparse
import logging

from sonoma.cli import OutputFormatter, add_json_flag
from sonoma.core.config import ConfigStore
from sonoma.core.config.domains import NETWORKS, NetworkConfig, default_url_for
from sonoma.core.exceptions import PersistError

SUMMARY = "Configure the target network"

logger = logging.getLogger(__name__)


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "name",
        nargs="?",
        help=f"Network name ({', '.join(NETWORKS)})",
    )
    parser.add_argument("--url", help="Custom API URL")
    add_json_flag(parser)


def _show(formatter: OutputFormatter, store: ConfigStore) -> int:
    current = NetworkConfig(store).to_dict()
    if formatter.json_mode:
        formatter.json_output({"current": current, "known": sorted(NETWORKS)})
        return 0
    formatter.text(f"Current network: {current['name']} ({current['url']})")
    formatter.text("Known networks:")
    for name, info in NETWORKS.items():
        marker = "*" if name == current["name"] else " "
        formatter.text(f" {marker} {name:<9} {info.url}")
    return 0


def main(args: argparse.Namespace, store: ConfigStore) -> int:
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    if not args.name:
        return _show(formatter, store)

    if args.name not in NETWORKS and not args.url:
        logger.warning(
            "Unknown network %r without --url; using %s", args.name, default_url_for(args.name)
        )

    network = {"name": args.name, "url": args.url or default_url_for(args.name)}
    try:
        store.set("network", network)
    except PersistError as e:
        formatter.error(e, error_code="config_persist_error")
        return 1

    message = f"Network configured: {args.name}"
    if args.url:
        message += f"\nCustom API URL: {args.url}"
    formatter.success({"network": network}, message)
    return 0
