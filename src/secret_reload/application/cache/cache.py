"""Application cache – SecretCache, a read-through cache of one secret file.

Every read goes back to the source; the cached snapshot exists for status
queries and for change detection.  The watcher only shortens the time until
something re-reads the file, it is never needed for correctness.
"""
from __future__ import annotations

import threading

from secret_reload.application.cache.port import SecretSource
from secret_reload.application.cache.snapshot import (
    EMPTY_SNAPSHOT,
    CacheSnapshot,
    ReloadResult,
    SecretInfo,
)
from secret_reload.application.cache.source import FileSecretSource
from secret_reload.config.settings import SecretSettings
from secret_reload.kernel.time import Clock, SystemClock
from secret_reload.kernel.types import Absent, Failed, Loaded
from secret_reload.observability.logging import get_logger, preview

FALLBACK_VALUE = "TEST_SECRET_VALUE"
UNAVAILABLE_VALUE = "SECRET_NOT_AVAILABLE"

logger = get_logger(__name__)


class SecretCache:
    """Thread-safe holder of the last-known-good secret.

    All snapshot writes and the reads that feed them run under one
    re-entrant lock, so a watcher reload, a manual reload and a request
    read never interleave.
    """

    def __init__(
        self,
        source: SecretSource,
        *,
        test_mode: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self._source = source
        self._test_mode = test_mode
        self._clock: Clock = clock or SystemClock()
        self._lock = threading.RLock()
        self._snapshot: CacheSnapshot = EMPTY_SNAPSHOT
        self._watcher_active = False

    @classmethod
    def from_settings(cls, settings: SecretSettings, clock: Clock | None = None) -> "SecretCache":
        source = FileSecretSource(
            settings.path,
            root=settings.root_dir,
            read_timeout=settings.read_timeout,
        )
        return cls(source, test_mode=settings.test_mode, clock=clock)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def source(self) -> SecretSource:
        return self._source

    @property
    def test_mode(self) -> bool:
        return self._test_mode

    @property
    def snapshot(self) -> CacheSnapshot:
        with self._lock:
            return self._snapshot

    @property
    def value(self) -> str | None:
        return self.snapshot.value

    @property
    def watcher_active(self) -> bool:
        with self._lock:
            return self._watcher_active

    def set_watcher_active(self, active: bool) -> bool:
        """Record the watcher state; returns ``False`` when nothing changed."""
        with self._lock:
            if self._watcher_active == active:
                return False
            self._watcher_active = active
            return True

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def read_from_source(self) -> str:
        """Re-read the secret and return it, or a placeholder on failure.

        A successful read replaces the snapshot.  A failed one leaves it
        as it was and returns :data:`FALLBACK_VALUE` (test mode, or no
        backend) or :data:`UNAVAILABLE_VALUE`.
        """
        with self._lock:
            outcome = self._source.read()
            match outcome:
                case Loaded():
                    previous = self._snapshot
                    self._snapshot = CacheSnapshot(
                        value=outcome.value,
                        last_updated=self._clock.now(),
                        file_modified_at=outcome.modified_at,
                    )
                    if (
                        previous.value != outcome.value
                        or previous.file_modified_at != outcome.modified_at
                    ):
                        logger.info(
                            "secret.loaded",
                            path=str(self._source.path),
                            preview=preview(outcome.value),
                            file_modified=outcome.modified_at.isoformat(),
                        )
                    return outcome.value
                case Absent():
                    logger.debug("secret.backend_absent", root=outcome.error.root)
                    return FALLBACK_VALUE
                case Failed():
                    if self._test_mode:
                        logger.debug("secret.test_fallback", path=str(self._source.path))
                        return FALLBACK_VALUE
                    logger.error("secret.read_failed", **outcome.error.log_fields())
                    return UNAVAILABLE_VALUE

    def get(self) -> str:
        """Always-fresh read of the secret."""
        return self.read_from_source()

    def read_with_snapshot(self) -> tuple[str, CacheSnapshot]:
        """Fresh read plus the snapshot it left behind, under one lock hold."""
        with self._lock:
            value = self.read_from_source()
            return value, self._snapshot

    def reload(self) -> ReloadResult:
        """Re-read and report whether the value differs from the cached one."""
        with self._lock:
            old_value = self._snapshot.value
            new_value = self.read_from_source()
            return ReloadResult(
                changed=old_value != new_value,
                old_value=old_value,
                new_value=new_value,
                timestamp=self._clock.now(),
            )

    def info(self) -> SecretInfo:
        """Diagnostic record; never raises."""
        with self._lock:
            path = str(self._source.path)
            try:
                details = self._source.inspect()
            except OSError as exc:
                logger.error("secret.inspect_failed", path=path, error=str(exc))
                snapshot = self._snapshot
                return SecretInfo(
                    value=self.read_from_source(),
                    path=path,
                    exists=True,
                    mode="error",
                    file_modified_at=snapshot.file_modified_at,
                    last_updated=snapshot.last_updated,
                    watcher_active=self._watcher_active,
                    error=str(exc),
                )
            if details is None:
                return SecretInfo(
                    value=self.read_from_source(),
                    path=path,
                    exists=False,
                    mode="fallback",
                    watcher_active=self._watcher_active,
                )
            value = self.read_from_source()
            snapshot = self._snapshot
            return SecretInfo(
                value=value,
                path=path,
                exists=True,
                mode="file",
                real_path=details.real_path,
                is_symlink=details.is_symlink,
                file_modified_at=snapshot.file_modified_at,
                last_updated=snapshot.last_updated,
                watcher_active=self._watcher_active,
            )

    def close(self) -> None:
        self._source.close()


__all__ = ["FALLBACK_VALUE", "SecretCache", "UNAVAILABLE_VALUE"]
