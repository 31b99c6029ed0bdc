"""Base class for domain-specific configuration accessors.

A domain accessor wraps one top-level section of the store's tree and exposes
typed properties over it. Accessors read through the store on every access,
so values written with ``store.set()`` are visible immediately.
"""
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict

from .store import ConfigStore
from .tree import is_tree


class BaseDomainConfig(ABC):
    """Abstract base class for domain-specific configuration accessors.

    Usage:
        class AuthConfig(BaseDomainConfig):
            def _config_section(self) -> str:
                return "auth"

            @property
            def api_key(self) -> str | None:
                return self.section.get("apiKey")

        cfg = AuthConfig(store)
        print(cfg.api_key)
    """

    def __init__(self, store: ConfigStore) -> None:
        self._store = store

    @property
    def store(self) -> ConfigStore:
        return self._store

    @abstractmethod
    def _config_section(self) -> str:
        """Return the top-level config key for this domain."""
        ...

    @property
    def raw(self) -> Any:
        """The section value as stored, whatever its kind (None when absent)."""
        return self._store.get(self._config_section())

    @property
    def section(self) -> Dict[str, Any]:
        """Get this domain's configuration section.

        Returns:
            The section dict, or an empty dict when it is absent or not a tree.
        """
        value = self.raw
        return value if is_tree(value) else {}


__all__ = ["BaseDomainConfig"]
