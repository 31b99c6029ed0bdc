"""Domain-specific configuration accessors.

Available domain configs:
- NetworkConfig: selected network name, API URL and explorer URL
"""
from __future__ import annotations

from .network import DEFAULT_NETWORK, NETWORKS, NetworkConfig, NetworkInfo, default_url_for

__all__ = [
    "DEFAULT_NETWORK",
    "NETWORKS",
    "NetworkConfig",
    "NetworkInfo",
    "default_url_for",
]
