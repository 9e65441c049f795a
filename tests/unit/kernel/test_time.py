"""Unit tests for kernel time utilities."""

from __future__ import annotations

from datetime import UTC, datetime, timedelta

from secret_reload.kernel.time import FrozenClock, SystemClock, from_mtime


class TestSystemClock:
    def test_now_returns_utc_aware_datetime(self) -> None:
        result = SystemClock().now()
        assert isinstance(result, datetime)
        assert result.utcoffset() == timedelta(0)

    def test_now_close_to_wall_clock(self) -> None:
        assert abs((SystemClock().now() - datetime.now(UTC)).total_seconds()) < 1.0


class TestFrozenClock:
    def _fixed(self) -> datetime:
        return datetime(2024, 6, 15, 12, 0, 0, tzinfo=UTC)

    def test_now_is_fixed(self) -> None:
        clk = FrozenClock(self._fixed())
        assert clk.now() == self._fixed()
        assert clk.now() == clk.now()

    def test_advance(self) -> None:
        clk = FrozenClock(self._fixed())
        clk.advance(seconds=90)
        assert clk.now() == self._fixed() + timedelta(seconds=90)


class TestHelpers:
    def test_from_mtime(self) -> None:
        result = from_mtime(0.0)
        assert result == datetime(1970, 1, 1, tzinfo=UTC)

    def test_from_mtime_keeps_fraction(self) -> None:
        assert from_mtime(1.5).microsecond == 500000
