"""Application watch – FileWatcher, push-notification reloads for SecretCache.

The watcher observes the directory holding the secret (non-recursively),
filters its events down to the secret file and the ``..data`` swap entry,
and reloads the cache a short debounce delay after each qualifying event.
"""
from __future__ import annotations

import enum
import os
import pathlib
import threading
from typing import Any, Callable

from watchdog.events import FileSystemEvent, FileSystemEventHandler
from watchdog.observers import Observer

from secret_reload.application.cache import ReloadResult, SecretCache
from secret_reload.application.watch.debounce import Debouncer
from secret_reload.application.watch.events import (
    LoggingRotationListener,
    RotationEmitter,
    RotationEvent,
    RotationListener,
)
from secret_reload.application.watch.filters import event_entry_names, is_rotation_event
from secret_reload.config.settings import SecretSettings
from secret_reload.kernel.errors import WatchSetupError
from secret_reload.observability.logging import get_logger

logger = get_logger(__name__)

ObserverFactory = Callable[[], Any]


class WatcherState(str, enum.Enum):
    UNINSTALLED = "uninstalled"
    INSTALLING = "installing"
    ACTIVE = "active"
    STOPPED = "stopped"


class _SecretEventHandler(FileSystemEventHandler):
    def __init__(self, watcher: "FileWatcher") -> None:
        super().__init__()
        self._watcher = watcher

    def on_any_event(self, event: FileSystemEvent) -> None:
        self._watcher.handle_event(event)


class FileWatcher:
    """Installs one directory watch and turns rotations into cache reloads.

    Parameters
    ----------
    cache:
        The shared cache; its ``watcher_active`` flag guards against
        installing a second watch.
    directory:
        Directory to observe (the secret's parent, where ``..data`` lives).
    secret_name:
        Base name of the secret file inside *directory*.
    debounce_seconds:
        Delay between a qualifying event and the reload it triggers.
    coalesce:
        Collapse a burst of events into a single reload.
    test_mode:
        Never install a watch.
    listeners:
        Rotation listeners; defaults to :class:`LoggingRotationListener`.
    observer_factory:
        Builds the watchdog observer; tests inject a fake.
    """

    def __init__(
        self,
        cache: SecretCache,
        directory: str | os.PathLike[str],
        secret_name: str,
        *,
        debounce_seconds: float = 0.1,
        coalesce: bool = False,
        test_mode: bool = False,
        listeners: list[RotationListener] | None = None,
        observer_factory: ObserverFactory = Observer,
    ) -> None:
        self._cache = cache
        self._directory = pathlib.Path(directory)
        self._secret_name = secret_name
        self._test_mode = test_mode
        self._debouncer = Debouncer(debounce_seconds, coalesce=coalesce)
        self._emitter = RotationEmitter(
            listeners if listeners is not None else [LoggingRotationListener()]
        )
        self._observer_factory = observer_factory
        self._observer: Any = None
        self._handler = _SecretEventHandler(self)
        self._state = WatcherState.UNINSTALLED
        self._lock = threading.Lock()

    @classmethod
    def from_settings(
        cls,
        cache: SecretCache,
        settings: SecretSettings,
        listeners: list[RotationListener] | None = None,
        observer_factory: ObserverFactory = Observer,
    ) -> "FileWatcher":
        return cls(
            cache,
            settings.secret_dir,
            settings.secret_name,
            debounce_seconds=settings.debounce_seconds,
            coalesce=settings.coalesce_events,
            test_mode=settings.test_mode,
            listeners=listeners,
            observer_factory=observer_factory,
        )

    @property
    def state(self) -> WatcherState:
        return self._state

    @property
    def directory(self) -> pathlib.Path:
        return self._directory

    @property
    def emitter(self) -> RotationEmitter:
        return self._emitter

    @property
    def debouncer(self) -> Debouncer:
        return self._debouncer

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def start(self) -> bool:
        """Install the watch; returns ``True`` only when a watch was installed.

        Skips (without error) when a watch is already active, in test mode,
        when the directory is missing, or after :meth:`stop`.  A setup
        failure is logged as a warning and leaves the cache serving
        request-time reads only.
        """
        with self._lock:
            if self._test_mode:
                logger.info("watcher.skipped", reason="test_mode")
                return False
            if self._state is WatcherState.STOPPED:
                logger.info("watcher.skipped", reason="stopped")
                return False
            if not self._directory.is_dir():
                logger.info(
                    "watcher.skipped",
                    reason="directory_missing",
                    directory=str(self._directory),
                )
                return False
            # Claiming the flag is the check: only one watcher per cache wins.
            if not self._cache.set_watcher_active(True):
                logger.info("watcher.already_active", directory=str(self._directory))
                return False

            self._state = WatcherState.INSTALLING
            logger.info("watcher.installing", directory=str(self._directory))
            try:
                observer = self._observer_factory()
                observer.schedule(self._handler, str(self._directory), recursive=False)
                observer.daemon = True
                observer.start()
            except Exception as exc:  # noqa: BLE001
                error = WatchSetupError(
                    f"Could not watch '{self._directory}': {exc}",
                    path=str(self._directory),
                    cause=exc,
                )
                self._state = WatcherState.UNINSTALLED
                self._cache.set_watcher_active(False)
                logger.warning(
                    "watcher.setup_failed",
                    fallback="request_time_reads",
                    **error.log_fields(),
                )
                return False

            self._observer = observer
            self._state = WatcherState.ACTIVE
            logger.info("watcher.started", directory=str(self._directory))
            return True

    def stop(self, timeout: float = 2.0) -> None:
        """Release the watch handle and drop pending reloads (shutdown only)."""
        with self._lock:
            self._debouncer.cancel_all()
            observer, self._observer = self._observer, None
            was_active = self._state is WatcherState.ACTIVE
            self._state = WatcherState.STOPPED
        if observer is not None:
            observer.stop()
            observer.join(timeout=timeout)
        if was_active:
            self._cache.set_watcher_active(False)
            logger.info("watcher.stopped", directory=str(self._directory))

    # ------------------------------------------------------------------
    # Events
    # ------------------------------------------------------------------

    def handle_event(self, event: FileSystemEvent) -> bool:
        """Schedule a reload for a qualifying event; ignore anything else."""
        if not is_rotation_event(event, self._secret_name):
            return False
        logger.info(
            "watcher.change_detected",
            event_type=event.event_type,
            entries=sorted(event_entry_names(event)),
        )
        return self._debouncer.schedule(self.reconcile)

    def reconcile(self) -> ReloadResult:
        """Reload the cache and announce a rotation when the value changed."""
        result = self._cache.reload()
        if result.changed:
            self._emitter.emit(
                RotationEvent(
                    old_value=result.old_value,
                    new_value=result.new_value,
                    timestamp=result.timestamp,
                    trigger="watcher",
                )
            )
        return result


__all__ = ["FileWatcher", "ObserverFactory", "WatcherState"]
