"""Testing fakes – FakeObserver standing in for a watchdog observer."""
from __future__ import annotations

from typing import Any

from watchdog.events import FileSystemEvent, FileSystemEventHandler


class FakeObserver:
    """Records ``schedule`` calls and lets tests push events by hand.

    Parameters
    ----------
    fail_on:
        ``"schedule"`` or ``"start"`` makes that call raise *error*.
    error:
        The exception to raise (default: ``OSError("inotify watch limit reached")``).
    """

    def __init__(self, fail_on: str | None = None, error: BaseException | None = None) -> None:
        self._fail_on = fail_on
        self._error = error or OSError(28, "inotify watch limit reached")
        self.scheduled: list[tuple[FileSystemEventHandler, str, bool]] = []
        self.daemon = False
        self.started = False
        self.stopped = False
        self.joined = False

    def schedule(self, handler: FileSystemEventHandler, path: str, recursive: bool = False) -> Any:
        if self._fail_on == "schedule":
            raise self._error
        self.scheduled.append((handler, path, recursive))
        return object()

    def start(self) -> None:
        if self._fail_on == "start":
            raise self._error
        self.started = True

    def stop(self) -> None:
        self.stopped = True

    def join(self, timeout: float | None = None) -> None:  # noqa: ARG002
        self.joined = True

    def emit(self, event: FileSystemEvent) -> None:
        """Deliver *event* to every scheduled handler, as the observer thread would."""
        for handler, _path, _recursive in self.scheduled:
            handler.dispatch(event)


class FakeObserverFactory:
    """Observer factory that remembers every observer it built."""

    def __init__(self, fail_on: str | None = None, error: BaseException | None = None) -> None:
        self._fail_on = fail_on
        self._error = error
        self.instances: list[FakeObserver] = []

    def __call__(self) -> FakeObserver:
        observer = FakeObserver(fail_on=self._fail_on, error=self._error)
        self.instances.append(observer)
        return observer

    @property
    def last(self) -> FakeObserver:
        return self.instances[-1]


__all__ = ["FakeObserver", "FakeObserverFactory"]
