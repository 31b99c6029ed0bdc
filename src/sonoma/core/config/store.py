"""
Sonoma configuration store (layered sources, write-through persistence).
"""
from __future__ import annotations

import copy
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

from sonoma.core.exceptions import MalformedConfigError, PersistError
from sonoma.core.utils.io import read_json, write_json_atomic
from sonoma.core.utils.paths import find_project_config, get_user_config_file

from .env import build_env_overlay
from .merge import deep_merge, merge_all
from .path import MISSING, delete_path, get_path, parse_path, set_path
from .tree import ConfigTree, check_value, is_tree

logger = logging.getLogger(__name__)


class ConfigStore:
    """Load, merge, query and persist Sonoma configuration.

    Configuration sources (lowest to highest priority):
    1. Persisted user config: ~/.sonoma/config.json
    2. Project config: nearest package.json "sonoma" key / .sonomarc* /
       sonoma.config.* found walking up from the working directory
    3. Environment variables: SONOMA_API_KEY, SONOMA_NETWORK, SONOMA_DEBUG
    4. Explicit ``set()`` calls made in this process

    Every mutation is written through to the persisted file before returning,
    so a later process sees ``set()`` values as part of source 1.

    One store is created per process (by the CLI entry point) and handed to
    whatever needs configuration. The tree is loaded on first access.
    """

    def __init__(
        self,
        config_path: Optional[Path] = None,
        *,
        cwd: Optional[Path] = None,
        environ: Optional[Mapping[str, str]] = None,
        stop_dir: Optional[Path] = None,
    ) -> None:
        self._environ = os.environ if environ is None else environ
        self.config_path = (
            Path(config_path).expanduser()
            if config_path is not None
            else get_user_config_file(environ=self._environ)
        )
        self.cwd = Path(cwd) if cwd is not None else None
        self.stop_dir = Path(stop_dir) if stop_dir is not None else None
        self.project_config_path: Optional[Path] = None
        self._data: ConfigTree = {}
        self._loaded = False

    @property
    def loaded(self) -> bool:
        return self._loaded

    # ========== Loading ==========

    def load(self) -> None:
        """Load and merge all sources once; later calls are no-ops."""
        if self._loaded:
            return

        persisted = self._load_persisted()
        project = self._load_project()
        env = build_env_overlay(self._environ)

        self._data = merge_all([persisted, project, env])
        self._loaded = True
        logger.debug(
            "Configuration loaded (persisted=%s, project=%s, env keys=%d)",
            self.config_path,
            self.project_config_path,
            len(env),
        )

    def _ensure_loaded(self) -> None:
        if not self._loaded:
            self.load()

    def _load_persisted(self) -> ConfigTree:
        try:
            data = read_json(self.config_path, default={})
        except (OSError, ValueError) as exc:
            logger.warning(
                "%s; ignoring it",
                MalformedConfigError(self.config_path, str(exc)),
            )
            return {}
        return self._validated(self.config_path, data)

    def _load_project(self) -> ConfigTree:
        try:
            found = find_project_config(self.cwd, stop_dir=self.stop_dir)
        except MalformedConfigError as exc:
            logger.warning("%s; ignoring it", exc)
            return {}
        except OSError as exc:
            logger.warning("Project config discovery failed: %s", exc)
            return {}

        if found is None:
            return {}
        self.project_config_path = found.path
        if found.data is None:
            return {}
        return self._validated(found.path, found.data)

    def _validated(self, path: Path, data: Any) -> ConfigTree:
        """Return ``data`` as a tree, or ``{}`` with a warning when it cannot be stored.

        A source must be a tree whose values are all ValueKinds with string
        keys and finite numbers; otherwise it could not be merged or persisted.
        """
        if not is_tree(data):
            logger.warning(
                "%s; ignoring it",
                MalformedConfigError(path, "top-level value is not an object"),
            )
            return {}
        try:
            check_value(data, finite=True)
        except (TypeError, ValueError) as exc:
            logger.warning("%s; ignoring it", MalformedConfigError(path, str(exc)))
            return {}
        return dict(data)

    # ========== Accessor Methods ==========

    def get(self, path: Optional[str] = None, default: Any = None) -> Any:
        """Get the whole tree, or a value by dot-notation path.

        Args:
            path: Dot-notation key (e.g., 'auth.apiKey'); None for the full tree
            default: Value to return if the path does not resolve

        Returns:
            Config value or default. The full tree is returned by reference;
            callers must change it only through ``set``/``reset``.

        Example:
            >>> store.get('network')
            'mainnet'
            >>> store.get('nonexistent.key', 'fallback')
            'fallback'
        """
        self._ensure_loaded()
        if path is None:
            return self._data
        value = get_path(self._data, parse_path(path))
        return default if value is MISSING else value

    # ========== Mutation Methods ==========

    def set(self, path_or_tree: Any, value: Any = None) -> None:
        """Set a value at a dotted path, or deep-merge a whole tree, then persist.

        Args:
            path_or_tree: Dot-notation key, or a mapping merged over the current tree
            value: Value to assign (path form only)

        Raises:
            InvalidPathError: If the path is empty; nothing is changed or written
            TypeError: If ``path_or_tree`` is neither a string nor a mapping
            PersistError: If the write fails
        """
        self._ensure_loaded()
        if isinstance(path_or_tree, str):
            segments = parse_path(path_or_tree)
            check_value(value)
            set_path(self._data, segments, copy.deepcopy(value))
        elif is_tree(path_or_tree):
            check_value(path_or_tree)
            self._data = deep_merge(self._data, path_or_tree)
        else:
            raise TypeError(
                f"set() expects a dotted path or a mapping, got {type(path_or_tree).__name__}"
            )
        self.persist()

    def reset(self, path: Optional[str] = None) -> None:
        """Delete the value at ``path`` (or everything when omitted), then persist."""
        self._ensure_loaded()
        if path is None:
            self._data = {}
        else:
            delete_path(self._data, parse_path(path))
        self.persist()

    def reset_all(self) -> None:
        """Clear the whole configuration and persist.

        Equivalent to ``reset()``; kept separate so callers can put a
        confirmation step in front of it.
        """
        self._ensure_loaded()
        self._data = {}
        self.persist()

    def persist(self) -> Path:
        """Write the current tree to the persisted config file.

        Returns:
            Path to the written file

        Raises:
            PersistError: If serialization, directory creation or the write fails
        """
        self._ensure_loaded()
        try:
            write_json_atomic(self.config_path, self._data)
        except (OSError, TypeError, ValueError) as exc:
            raise PersistError(self.config_path, str(exc)) from exc
        logger.debug("Configuration persisted to %s", self.config_path)
        return self.config_path

    # ========== Diagnostics ==========

    def sources(self) -> List[Dict[str, Any]]:
        """Describe the file-backed sources seen by the last load."""
        self._ensure_loaded()
        return [
            {
                "source": "persisted",
                "path": str(self.config_path),
                "exists": self.config_path.exists(),
            },
            {
                "source": "project",
                "path": str(self.project_config_path) if self.project_config_path else None,
                "exists": self.project_config_path is not None,
            },
        ]


__all__ = ["ConfigStore"]
