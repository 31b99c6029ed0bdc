"""Project configuration discovery.

Walks upward from a start directory looking for a recognized Sonoma project
config file. The first directory that holds a candidate wins, and within a
directory candidates are checked in ``PROJECT_CONFIG_CANDIDATES`` order.

``package.json`` only counts when it carries a top-level ``"sonoma"`` key.
The walk stops after ``stop_dir`` (default: the user's home directory) or at
the filesystem root, whichever comes first.
"""
from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterator, Optional

import yaml

from sonoma.core.exceptions import MalformedConfigError
from sonoma.core.utils.io import parse_json_string, read_json, read_text

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
PACKAGE_JSON_KEY = "sonoma"

PROJECT_CONFIG_CANDIDATES = (
    PACKAGE_JSON,
    ".sonomarc",
    ".sonomarc.json",
    ".sonomarc.yaml",
    ".sonomarc.yml",
    "sonoma.config.json",
    "sonoma.config.yaml",
    "sonoma.config.yml",
)

_NOT_JSON = object()


@dataclass(frozen=True)
class ProjectConfig:
    """A discovered project config file and its parsed content."""

    path: Path
    data: Any


def _iter_search_dirs(start: Path, stop_dir: Optional[Path]) -> Iterator[Path]:
    current = start.resolve()
    stop = stop_dir.resolve() if stop_dir is not None else None
    while True:
        yield current
        if stop is not None and current == stop:
            return
        parent = current.parent
        if parent == current:
            return
        current = parent


def _parse_candidate(path: Path) -> tuple[bool, Any]:
    """Return ``(matched, data)`` for one candidate file.

    Raises:
        MalformedConfigError: If the file matches but cannot be parsed.
    """
    if path.name == PACKAGE_JSON:
        try:
            manifest = read_json(path)
        except (OSError, ValueError):
            # A broken package.json is not ours to report; keep searching.
            logger.debug("Ignoring unreadable %s", path)
            return False, None
        if not isinstance(manifest, dict) or PACKAGE_JSON_KEY not in manifest:
            return False, None
        return True, manifest[PACKAGE_JSON_KEY]

    try:
        text = read_text(path)
        if not text.strip():
            return True, None
        if path.suffix == ".json":
            return True, json.loads(text)
        if path.suffix in (".yaml", ".yml"):
            return True, yaml.safe_load(text)
        # Extensionless rc file: JSON first, then YAML.
        data = parse_json_string(text, default=_NOT_JSON)
        if data is _NOT_JSON:
            data = yaml.safe_load(text)
        return True, data
    except (OSError, ValueError, yaml.YAMLError) as exc:
        raise MalformedConfigError(path, str(exc)) from exc


def find_project_config(
    start: Path | None = None, *, stop_dir: Path | None = None
) -> Optional[ProjectConfig]:
    """Find the nearest project config searching upward from ``start``.

    Args:
        start: Directory to start from (default: current working directory)
        stop_dir: Last directory to search (default: the user's home directory)

    Returns:
        The first matching ``ProjectConfig``, or None when nothing matches.

    Raises:
        MalformedConfigError: If the first matching file cannot be parsed.
    """
    origin = Path(start) if start is not None else Path.cwd()
    stop = Path(stop_dir) if stop_dir is not None else Path.home()

    for directory in _iter_search_dirs(origin, stop):
        for candidate in PROJECT_CONFIG_CANDIDATES:
            path = directory / candidate
            if not path.is_file():
                continue
            matched, data = _parse_candidate(path)
            if matched:
                logger.debug("Discovered project config at %s", path)
                return ProjectConfig(path=path, data=data)
    return None


__all__ = [
    "PACKAGE_JSON_KEY",
    "PROJECT_CONFIG_CANDIDATES",
    "ProjectConfig",
    "find_project_config",
]
