"""Unit tests for rotation events and listeners."""

from __future__ import annotations

from datetime import UTC, datetime

from structlog.testing import capture_logs

from secret_reload.application.watch import LoggingRotationListener, RotationEmitter, RotationEvent

_TS = datetime(2026, 1, 1, 12, 0, tzinfo=UTC)


class TestRotationEvent:
    def test_to_dict(self) -> None:
        event = RotationEvent(old_value="v1", new_value="v2", timestamp=_TS)
        assert event.to_dict() == {
            "old_value": "v1",
            "new_value": "v2",
            "timestamp": "2026-01-01T12:00:00+00:00",
            "trigger": "watcher",
        }


class TestLoggingRotationListener:
    def test_logs_previews(self) -> None:
        long_value = "n" * 32
        with capture_logs() as logs:
            LoggingRotationListener()(RotationEvent("old", long_value, _TS))
        assert logs[0]["event"] == "secret.rotated"
        assert logs[0]["old"] == "old"
        assert logs[0]["new"] == "n" * 20 + "..."


class TestRotationEmitter:
    def test_delivers_to_all_listeners(self) -> None:
        seen: list[str] = []
        emitter = RotationEmitter([lambda e: seen.append("a")])
        emitter.subscribe(lambda e: seen.append("b"))
        emitter.emit(RotationEvent("v1", "v2", _TS))
        assert seen == ["a", "b"]

    def test_failing_listener_does_not_stop_others(self) -> None:
        seen: list[RotationEvent] = []

        def broken(event: RotationEvent) -> None:
            raise RuntimeError("listener down")

        emitter = RotationEmitter([broken, seen.append])
        with capture_logs() as logs:
            emitter.emit(RotationEvent("v1", "v2", _TS))
        assert len(seen) == 1
        failure = next(e for e in logs if e["event"] == "rotation.listener_failed")
        assert failure["listener"] == "broken"
        assert failure["error"] == "listener down"

    def test_listeners_is_a_copy(self) -> None:
        emitter = RotationEmitter()
        emitter.listeners.append(print)  # type: ignore[arg-type]
        assert emitter.listeners == []
