"""Sonoma configuration system.

Configuration is a single nested tree merged from the persisted user file,
the nearest project config and a fixed set of environment variables.

Usage:
    from sonoma.core.config import ConfigStore
    from sonoma.core.config.domains import NetworkConfig

    store = ConfigStore()
    store.set("auth.apiKey", "sk-...")
    api_key = store.get("auth.apiKey")

    network = NetworkConfig(store)
    print(network.name, network.url)
"""
from __future__ import annotations

from .tree import ConfigTree, ConfigValue, ValueKind, check_value, is_tree, kind_of
from .path import MISSING, delete_path, get_path, parse_path, set_path
from .merge import deep_merge, merge_all
from .env import ENV_BINDINGS, EnvBinding, build_env_overlay, coerce_env_value
from .store import ConfigStore
from .base import BaseDomainConfig
from .domains import NETWORKS, NetworkConfig

__all__ = [
    # Values
    "ConfigTree",
    "ConfigValue",
    "ValueKind",
    "kind_of",
    "is_tree",
    "check_value",
    # Paths
    "MISSING",
    "parse_path",
    "get_path",
    "set_path",
    "delete_path",
    # Merge
    "deep_merge",
    "merge_all",
    # Environment
    "EnvBinding",
    "ENV_BINDINGS",
    "coerce_env_value",
    "build_env_overlay",
    # Store and accessors
    "ConfigStore",
    "BaseDomainConfig",
    "NetworkConfig",
    "NETWORKS",
]
