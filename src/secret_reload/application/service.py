"""Application – SecretService, the facade the transport layer talks to."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any

from watchdog.observers import Observer

from secret_reload.application.cache import (
    UNAVAILABLE_VALUE,
    ReloadResult,
    SecretCache,
    SecretInfo,
)
from secret_reload.application.watch import (
    FileWatcher,
    LoggingRotationListener,
    ObserverFactory,
    RotationEvent,
    RotationListener,
)
from secret_reload.config.settings import SecretSettings
from secret_reload.kernel.time import Clock, SystemClock
from secret_reload.observability.logging import get_logger

logger = get_logger(__name__)


@dataclasses.dataclass(frozen=True)
class ServiceStatus:
    """Aggregate flags for the liveness / info surface."""
    service: str
    version: str
    status: str
    file_watching: bool
    hot_reload: bool = True

    def to_dict(self) -> dict[str, Any]:
        return {
            "service": self.service,
            "status": self.status,
            "version": self.version,
            "features": {
                "fileWatching": self.file_watching,
                "hotReload": self.hot_reload,
            },
        }


@dataclasses.dataclass(frozen=True)
class ConfigView:
    """The secret as served to application code, with freshness metadata."""
    secret: str
    timestamp: datetime
    last_updated: datetime | None
    watcher_active: bool

    def to_dict(self) -> dict[str, Any]:
        return {
            "mySecret": self.secret,
            "timestamp": self.timestamp.isoformat(),
            "lastUpdated": self.last_updated.isoformat() if self.last_updated else None,
            "fileWatcherActive": self.watcher_active,
        }


class SecretService:
    """Owns one :class:`SecretCache` and its :class:`FileWatcher`.

    Create one per process at startup and hand it to the transport layer.
    Tests build as many independent instances as they like.
    """

    def __init__(
        self,
        settings: SecretSettings,
        cache: SecretCache | None = None,
        watcher: FileWatcher | None = None,
        *,
        clock: Clock | None = None,
        listeners: list[RotationListener] | None = None,
        observer_factory: ObserverFactory = Observer,
    ) -> None:
        self._settings = settings
        self._clock: Clock = clock or SystemClock()
        self._listeners = listeners if listeners is not None else [LoggingRotationListener()]
        self._cache = cache or SecretCache.from_settings(settings, clock=self._clock)
        self._watcher = watcher or FileWatcher.from_settings(
            self._cache,
            settings,
            listeners=self._listeners,
            observer_factory=observer_factory,
        )

    @property
    def settings(self) -> SecretSettings:
        return self._settings

    @property
    def cache(self) -> SecretCache:
        return self._cache

    @property
    def watcher(self) -> FileWatcher:
        return self._watcher

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> None:
        """Initial load, then install the watch."""
        value = self._cache.read_from_source()
        logger.info(
            "service.started",
            service=self._settings.service_name,
            path=self._settings.secret_path,
            available=self._is_available(value),
            test_mode=self._settings.test_mode,
        )
        self._watcher.start()

    def stop(self) -> None:
        self._watcher.stop()
        self._cache.close()
        logger.info("service.stopped", service=self._settings.service_name)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def get_secret(self) -> str:
        return self._cache.get()

    def get_secret_info(self) -> SecretInfo:
        return self._cache.info()

    def get_config(self) -> ConfigView:
        secret, snapshot = self._cache.read_with_snapshot()
        return ConfigView(
            secret=secret,
            timestamp=self._clock.now(),
            last_updated=snapshot.last_updated,
            watcher_active=self._cache.watcher_active,
        )

    def trigger_reload(self) -> ReloadResult:
        """Force a reload now instead of waiting for a filesystem event."""
        result = self._cache.reload()
        logger.info("secret.manual_reload", changed=result.changed)
        if result.changed:
            event = RotationEvent(
                old_value=result.old_value,
                new_value=result.new_value,
                timestamp=result.timestamp,
                trigger="manual",
            )
            self._watcher.emitter.emit(event)
        return result

    def is_watcher_active(self) -> bool:
        return self._cache.watcher_active

    def get_service_status(self) -> ServiceStatus:
        return ServiceStatus(
            service=self._settings.service_name,
            version=self._settings.service_version,
            status="running",
            file_watching=self._cache.watcher_active,
        )

    @staticmethod
    def _is_available(value: str) -> bool:
        return value != UNAVAILABLE_VALUE


__all__ = ["ConfigView", "SecretService", "ServiceStatus"]
