"""Kernel time – Clock protocol + implementations."""
from __future__ import annotations

from datetime import UTC, datetime, timedelta
from typing import Protocol


class Clock(Protocol):
    """Port: wall clock used to stamp cache reloads."""

    def now(self) -> datetime: ...


class SystemClock:
    """Production clock that delegates to ``datetime.now(UTC)``."""

    def now(self) -> datetime:
        return datetime.now(UTC)


class FrozenClock:
    """Test clock pinned to a fixed point in time."""

    def __init__(self, fixed: datetime) -> None:
        self._fixed = fixed

    def now(self) -> datetime:
        return self._fixed

    def advance(self, **kwargs: int | float) -> None:
        """Advance the frozen time by the given ``timedelta`` kwargs."""
        self._fixed += timedelta(**kwargs)


def from_mtime(st_mtime: float) -> datetime:
    """Convert an ``os.stat_result.st_mtime`` to an aware UTC datetime."""
    return datetime.fromtimestamp(st_mtime, tz=UTC)


__all__ = ["Clock", "FrozenClock", "SystemClock", "from_mtime"]
