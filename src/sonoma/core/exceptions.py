from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Mapping


class SonomaError(Exception):
    """Base exception for Sonoma."""

    context: Dict[str, Any]

    def __init__(self, message: str = "", *, context: Mapping[str, Any] | None = None) -> None:
        super().__init__(message)
        if context is not None:
            # Store a shallow copy to avoid accidental mutation.
            self.context = dict(context)
        else:
            self.context = {}

    def to_json_error(self) -> Dict[str, Any]:
        """Return a JSON-serializable error payload."""
        return {
            "message": str(self),
            "code": self.__class__.__name__,
            "context": self.context,
        }


class InvalidPathError(SonomaError, ValueError):
    """Raised when a dotted config path is empty or has no segments."""

    def __init__(self, path: Any, message: str | None = None) -> None:
        msg = message or f"Invalid config path: {path!r}"
        SonomaError.__init__(self, msg, context={"path": path})
        ValueError.__init__(self, msg)


class MalformedConfigError(SonomaError, ValueError):
    """Raised when a config file exists but cannot be parsed into a tree."""

    def __init__(self, path: Path | str, details: str = "") -> None:
        msg = f"Malformed config file: {path}"
        if details:
            msg = f"{msg} ({details})"
        ctx: Dict[str, Any] = {"path": str(path)}
        if details:
            ctx["details"] = details
        SonomaError.__init__(self, msg, context=ctx)
        ValueError.__init__(self, msg)


class PersistError(SonomaError, OSError):
    """Raised when the persisted config file cannot be written."""

    def __init__(self, path: Path | str, details: str = "") -> None:
        msg = f"Failed to persist configuration to {path}"
        if details:
            msg = f"{msg}: {details}"
        SonomaError.__init__(self, msg, context={"path": str(path), "details": details})
        OSError.__init__(self, msg)


__all__ = [
    "SonomaError",
    "InvalidPathError",
    "MalformedConfigError",
    "PersistError",
]
