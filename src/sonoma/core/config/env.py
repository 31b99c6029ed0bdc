"""Environment variable overlay.

Only the variables registered in ``ENV_BINDINGS`` are consulted; there is no
prefix scan. Each present variable is coerced and placed at its mapped path.
"""
from __future__ import annotations

import logging
import os
import re
from dataclasses import dataclass
from typing import Any, Callable, Mapping, Optional, Tuple

from .path import parse_path, set_path
from .tree import ConfigTree

logger = logging.getLogger(__name__)

_INT_RE = re.compile(r"[-+]?\d+")
_FLOAT_RES = (
    re.compile(r"[-+]?\d*\.\d+(?:[eE][-+]?\d+)?"),
    re.compile(r"[-+]?\d+\.\d*(?:[eE][-+]?\d+)?"),
    re.compile(r"[-+]?\d+[eE][-+]?\d+"),
)


def _as_bool(v: str) -> Optional[bool]:
    if v == "true":
        return True
    if v == "false":
        return False
    return None


def _as_int(v: str) -> Optional[int]:
    s = v.strip()
    if _INT_RE.fullmatch(s):
        return int(s)
    return None


def _as_float(v: str) -> Optional[float]:
    s = v.strip()
    if any(rx.fullmatch(s) for rx in _FLOAT_RES):
        return float(s)
    return None


def coerce_env_value(raw: str) -> Any:
    """Coerce an environment string to a config scalar.

    ``"true"``/``"false"`` become booleans, integer and decimal literals become
    numbers, anything else (including ``""``) is returned unchanged.
    """
    for caster in (_as_bool, _as_int, _as_float):
        result = caster(raw)
        if result is not None:
            return result
    return raw


@dataclass(frozen=True)
class EnvBinding:
    """One registered environment variable and the config path it feeds."""

    name: str
    path: str
    coerce: Callable[[str], Any] = coerce_env_value

    @property
    def segments(self) -> Tuple[str, ...]:
        return parse_path(self.path)


ENV_BINDINGS: Tuple[EnvBinding, ...] = (
    EnvBinding("SONOMA_API_KEY", "auth.apiKey"),
    EnvBinding("SONOMA_NETWORK", "network"),
    EnvBinding("SONOMA_DEBUG", "debug"),
)


def build_env_overlay(
    environ: Optional[Mapping[str, str]] = None,
    bindings: Tuple[EnvBinding, ...] = ENV_BINDINGS,
) -> ConfigTree:
    """Build the config fragment contributed by the environment."""
    env = os.environ if environ is None else environ
    overlay: ConfigTree = {}
    for binding in bindings:
        raw = env.get(binding.name)
        if raw is None:
            continue
        set_path(overlay, binding.segments, binding.coerce(raw))
        logger.debug("Applied %s to %s", binding.name, binding.path)
    return overlay


__all__ = [
    "EnvBinding",
    "ENV_BINDINGS",
    "coerce_env_value",
    "build_env_overlay",
]
