"""Application watch – Debouncer scheduling delayed reconciliation."""
from __future__ import annotations

import threading
from typing import Callable


class Debouncer:
    """Runs a callback *delay* seconds after each :meth:`schedule` call.

    By default every call gets its own timer, so a burst of events produces
    a burst of (idempotent) reloads.  With ``coalesce=True`` a new call
    cancels the pending timer and starts over, so only the last event of a
    burst fires.

    Timers are daemon threads: an abandoned timer never holds up shutdown.
    """

    def __init__(self, delay: float, coalesce: bool = False) -> None:
        self._delay = delay
        self._coalesce = coalesce
        self._lock = threading.Lock()
        self._pending: set[threading.Timer] = set()
        self._closed = False

    @property
    def delay(self) -> float:
        return self._delay

    @property
    def pending(self) -> int:
        with self._lock:
            return len(self._pending)

    def schedule(self, callback: Callable[[], object]) -> bool:
        """Arm a timer for *callback*; returns ``False`` once closed."""
        with self._lock:
            if self._closed:
                return False
            if self._coalesce:
                for stale in self._pending:
                    stale.cancel()
                self._pending.clear()

            def _fire() -> None:
                with self._lock:
                    self._pending.discard(timer)
                callback()

            timer = threading.Timer(self._delay, _fire)
            timer.daemon = True
            self._pending.add(timer)
            timer.start()
            return True

    def cancel_all(self) -> None:
        """Cancel pending timers and refuse new ones."""
        with self._lock:
            self._closed = True
            for timer in self._pending:
                timer.cancel()
            self._pending.clear()


__all__ = ["Debouncer"]
