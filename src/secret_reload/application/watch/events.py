"""Application watch – RotationEvent and its listeners."""
from __future__ import annotations

import dataclasses
from datetime import datetime
from typing import Any, Callable

from secret_reload.observability.logging import get_logger, preview

logger = get_logger(__name__)

RotationListener = Callable[["RotationEvent"], None]


@dataclasses.dataclass(frozen=True)
class RotationEvent:
    """The cached secret changed value."""
    old_value: str | None
    new_value: str
    timestamp: datetime
    trigger: str = "watcher"

    def to_dict(self) -> dict[str, Any]:
        return {
            "old_value": self.old_value,
            "new_value": self.new_value,
            "timestamp": self.timestamp.isoformat(),
            "trigger": self.trigger,
        }


class LoggingRotationListener:
    """Writes a ``secret.rotated`` log entry with previews of both values."""

    def __init__(self, log: Any = None) -> None:
        self._log = log or logger

    def __call__(self, event: RotationEvent) -> None:
        self._log.info(
            "secret.rotated",
            old=preview(event.old_value),
            new=preview(event.new_value),
            timestamp=event.timestamp.isoformat(),
            trigger=event.trigger,
        )


class RotationEmitter:
    """Fans a :class:`RotationEvent` out to every registered listener.

    A failing listener is logged and skipped; the others still run.
    """

    def __init__(self, listeners: list[RotationListener] | None = None) -> None:
        self._listeners: list[RotationListener] = list(listeners or [])

    def subscribe(self, listener: RotationListener) -> None:
        self._listeners.append(listener)

    @property
    def listeners(self) -> list[RotationListener]:
        return list(self._listeners)

    def emit(self, event: RotationEvent) -> None:
        for listener in self._listeners:
            try:
                listener(event)
            except Exception as exc:  # noqa: BLE001
                logger.error(
                    "rotation.listener_failed",
                    listener=getattr(listener, "__name__", repr(listener)),
                    error=str(exc),
                )


__all__ = ["LoggingRotationListener", "RotationEmitter", "RotationEvent", "RotationListener"]
