"""Application cache – the read-through secret cache and its file source."""
from secret_reload.application.cache.cache import FALLBACK_VALUE, UNAVAILABLE_VALUE, SecretCache
from secret_reload.application.cache.port import FileDetails, SecretSource
from secret_reload.application.cache.snapshot import (
    EMPTY_SNAPSHOT,
    CacheSnapshot,
    ReloadResult,
    SecretInfo,
)
from secret_reload.application.cache.source import FileSecretSource

__all__ = [
    "CacheSnapshot",
    "EMPTY_SNAPSHOT",
    "FALLBACK_VALUE",
    "FileDetails",
    "FileSecretSource",
    "ReloadResult",
    "SecretCache",
    "SecretInfo",
    "SecretSource",
    "UNAVAILABLE_VALUE",
]
