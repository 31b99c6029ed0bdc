"""Domain-specific configuration for the target network.

The ``network`` key is written in two shapes: a bare name (as supplied by
``SONOMA_NETWORK``) or a ``{name, url}`` tree (as written by
``sonoma config network``). Both are read here.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from ..base import BaseDomainConfig


@dataclass(frozen=True)
class NetworkInfo:
    name: str
    url: str
    explorer: str


NETWORKS: Dict[str, NetworkInfo] = {
    "mainnet": NetworkInfo(
        name="mainnet",
        url="https://api.sonoma.com",
        explorer="https://explorer.sonoma.com",
    ),
    "testnet": NetworkInfo(
        name="testnet",
        url="https://api.testnet.sonoma.com",
        explorer="https://explorer.testnet.sonoma.com",
    ),
    "devnet": NetworkInfo(
        name="devnet",
        url="https://api.devnet.sonoma.com",
        explorer="https://explorer.devnet.sonoma.com",
    ),
    "localnet": NetworkInfo(
        name="localnet",
        url="http://localhost:8899",
        explorer="http://localhost:3000",
    ),
}

DEFAULT_NETWORK = "devnet"


def default_url_for(name: Optional[str]) -> str:
    """Return the API URL for a known network, falling back to devnet's."""
    info = NETWORKS.get(name or "") or NETWORKS[DEFAULT_NETWORK]
    return info.url


class NetworkConfig(BaseDomainConfig):
    """Accessor for the ``network`` section."""

    def _config_section(self) -> str:
        return "network"

    @property
    def name(self) -> str:
        raw = self.raw
        if isinstance(raw, str) and raw:
            return raw
        name = self.section.get("name")
        if isinstance(name, str) and name:
            return name
        return DEFAULT_NETWORK

    @property
    def is_known(self) -> bool:
        return self.name in NETWORKS

    @property
    def url(self) -> str:
        url = self.section.get("url")
        if isinstance(url, str) and url:
            return url
        return default_url_for(self.name)

    @property
    def explorer(self) -> Optional[str]:
        """Explorer URL from the section, else the known network's; None for custom names."""
        explorer = self.section.get("explorer")
        if isinstance(explorer, str) and explorer:
            return explorer
        info = NETWORKS.get(self.name)
        return info.explorer if info else None

    def to_dict(self) -> Dict[str, Optional[str]]:
        return {"name": self.name, "url": self.url, "explorer": self.explorer}


__all__ = [
    "DEFAULT_NETWORK",
    "NETWORKS",
    "NetworkConfig",
    "NetworkInfo",
    "default_url_for",
]
