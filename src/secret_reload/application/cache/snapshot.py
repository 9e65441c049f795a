"""Application cache – immutable cache snapshot and result records."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any


def _iso(value: datetime | None) -> str | None:
    return value.isoformat() if value is not None else None


@dataclasses.dataclass(frozen=True)
class CacheSnapshot:
    """One generation of cached state.

    The three fields are only ever replaced together, by swapping the whole
    snapshot object.
    """
    value: str | None = None
    last_updated: datetime | None = None
    file_modified_at: datetime | None = None


EMPTY_SNAPSHOT = CacheSnapshot()


@dataclasses.dataclass(frozen=True)
class ReloadResult:
    """Outcome of a reload: whether the value changed, and from what to what."""
    changed: bool
    old_value: str | None
    new_value: str
    timestamp: datetime

    def to_dict(self) -> dict[str, Any]:
        return {
            "changed": self.changed,
            "oldValue": self.old_value,
            "newValue": self.new_value,
            "timestamp": _iso(self.timestamp),
        }


@dataclasses.dataclass(frozen=True)
class SecretInfo:
    """Diagnostic record for the secret path.

    ``mode`` is ``"file"`` when the path exists, ``"fallback"`` when it does
    not, and ``"error"`` when it exists but could not be inspected.
    """
    value: str
    path: str
    exists: bool
    mode: str
    real_path: str | None = None
    is_symlink: bool | None = None
    file_modified_at: datetime | None = None
    last_updated: datetime | None = None
    watcher_active: bool = False
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Wire form used by the HTTP adapter (camelCase keys)."""
        if self.mode == "fallback":
            return {
                "value": self.value,
                "path": self.path,
                "exists": False,
                "mode": self.mode,
            }
        payload: dict[str, Any] = {
            "value": self.value,
            "path": self.path,
            "exists": self.exists,
            "mode": self.mode,
            "realPath": self.real_path,
            "isSymlink": self.is_symlink,
            "fileModified": _iso(self.file_modified_at),
            "cacheLastUpdated": _iso(self.last_updated),
            "watcherActive": self.watcher_active,
        }
        if self.error is not None:
            payload["error"] = self.error
        return payload


__all__ = ["CacheSnapshot", "EMPTY_SNAPSHOT", "ReloadResult", "SecretInfo"]
