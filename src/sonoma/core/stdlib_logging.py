"""Process-wide stdlib logging setup for the CLI.

Log records go to stderr only, so stdout stays machine-readable in ``--json``
mode. Library code never configures logging; it only emits through module
loggers.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

_SONOMA_STREAM_HANDLER: logging.Handler | None = None

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def _level_from_name(name: str) -> int:
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.WARNING


def configure_stdlib_logging(*, level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Install (or replace) the Sonoma stderr handler on the root logger.

    Handlers installed by anything else are left alone.
    """
    global _SONOMA_STREAM_HANDLER

    root = logging.getLogger()
    numeric = _level_from_name(level)
    root.setLevel(numeric)

    if _SONOMA_STREAM_HANDLER is not None:
        root.removeHandler(_SONOMA_STREAM_HANDLER)
        _SONOMA_STREAM_HANDLER.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(numeric)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root.addHandler(handler)
    _SONOMA_STREAM_HANDLER = handler


def reset_stdlib_logging_for_tests() -> None:
    """Test-only: remove the Sonoma handler and restore the default root level."""
    global _SONOMA_STREAM_HANDLER
    root = logging.getLogger()
    root.setLevel(logging.WARNING)
    if _SONOMA_STREAM_HANDLER is not None:
        root.removeHandler(_SONOMA_STREAM_HANDLER)
        _SONOMA_STREAM_HANDLER.close()
    _SONOMA_STREAM_HANDLER = None


__all__ = ["configure_stdlib_logging", "reset_stdlib_logging_for_tests"]
