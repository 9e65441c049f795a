"""Application watch – directory watcher, debounce and rotation events."""
from secret_reload.application.watch.debounce import Debouncer
from secret_reload.application.watch.events import (
    LoggingRotationListener,
    RotationEmitter,
    RotationEvent,
    RotationListener,
)
from secret_reload.application.watch.filters import (
    DATA_DIR_ENTRY,
    event_entry_names,
    is_rotation_event,
)
from secret_reload.application.watch.watcher import FileWatcher, ObserverFactory, WatcherState

__all__ = [
    "DATA_DIR_ENTRY",
    "Debouncer",
    "FileWatcher",
    "LoggingRotationListener",
    "ObserverFactory",
    "RotationEmitter",
    "RotationEvent",
    "RotationListener",
    "WatcherState",
    "event_entry_names",
    "is_rotation_event",
]
