"""User configuration path resolution.

This module centralizes detection of the user-level Sonoma directory
(default: ``~/.sonoma``) and the persisted config file inside it.

Precedence (highest to lowest):
1. Environment variable: SONOMA_HOME
2. Hardcoded fallback: ".sonoma"

The directory name is resolved relative to the user's home directory unless an
absolute path is provided.
"""
from __future__ import annotations

import os
from pathlib import Path
from typing import Mapping, Optional

DEFAULT_USER_CONFIG_PRIMARY = ".sonoma"
USER_CONFIG_FILENAME = "config.json"
USER_DIR_ENV = "SONOMA_HOME"


def _resolve_user_dir_name(environ: Optional[Mapping[str, str]] = None) -> str:
    env = os.environ if environ is None else environ
    env_override = env.get(USER_DIR_ENV)
    if isinstance(env_override, str) and env_override.strip():
        return env_override.strip()
    return DEFAULT_USER_CONFIG_PRIMARY


def get_user_config_dir(
    *, create: bool = False, environ: Optional[Mapping[str, str]] = None
) -> Path:
    """Return the user config directory.

    The resolved path is absolute. Relative values are treated as relative to
    the user's home directory (not CWD).
    """
    from sonoma.core.utils.io import ensure_directory

    p = Path(_resolve_user_dir_name(environ)).expanduser()
    if not p.is_absolute():
        p = Path.home() / p

    resolved = p.resolve()
    if create:
        ensure_directory(resolved)
    return resolved


def get_user_config_file(*, environ: Optional[Mapping[str, str]] = None) -> Path:
    """Return the path of the persisted per-user config file."""
    return get_user_config_dir(create=False, environ=environ) / USER_CONFIG_FILENAME


__all__ = [
    "DEFAULT_USER_CONFIG_PRIMARY",
    "USER_CONFIG_FILENAME",
    "USER_DIR_ENV",
    "get_user_config_dir",
    "get_user_config_file",
]
