"""Application – the secret cache, its watcher and the service facade."""

from secret_reload.application.cache import (
    FALLBACK_VALUE,
    UNAVAILABLE_VALUE,
    ReloadResult,
    SecretCache,
    SecretInfo,
)
from secret_reload.application.service import ConfigView, SecretService, ServiceStatus
from secret_reload.application.watch import FileWatcher, RotationEvent, WatcherState

__all__ = [
    "ConfigView",
    "FALLBACK_VALUE",
    "FileWatcher",
    "ReloadResult",
    "RotationEvent",
    "SecretCache",
    "SecretInfo",
    "SecretService",
    "ServiceStatus",
    "UNAVAILABLE_VALUE",
    "WatcherState",
]
