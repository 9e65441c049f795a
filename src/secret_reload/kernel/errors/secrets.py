"""Secret errors – the failure taxonomy of the mounted secret file.

None of these are raised across the cache boundary: they travel inside
read outcomes and log entries so that request handling never fails on a
broken mount.
"""

from __future__ import annotations

from typing import Any

from secret_reload.kernel.errors.infrastructure import InfrastructureError


class SecretError(InfrastructureError):
    """Base class for failures involving the mounted secret."""

    default_code = "secret_error"

    def __init__(self, message: str, *, path: str | None = None, **kwargs: Any) -> None:
        super().__init__(message, **kwargs)
        self.path = path
        if path is not None:
            self.detail.setdefault("path", path)


class SecretBackendAbsentError(SecretError):
    """The secret root directory does not exist: no backend is configured."""

    default_code = "secret_backend_absent"

    def __init__(self, root: str, **kwargs: Any) -> None:
        super().__init__(f"Secret root '{root}' does not exist", path=root, **kwargs)
        self.root = root


class SecretReadError(SecretError):
    """The secret file could not be read or stat'ed."""

    default_code = "secret_read_failed"


class SecretReadTimeoutError(SecretReadError):
    """Reading the secret file exceeded the configured deadline."""

    default_code = "secret_read_timeout"

    def __init__(self, path: str, timeout_seconds: float, **kwargs: Any) -> None:
        super().__init__(
            f"Reading '{path}' timed out after {timeout_seconds}s",
            path=path,
            **kwargs,
        )
        self.timeout_seconds = timeout_seconds


class WatchSetupError(SecretError):
    """Installing the directory watch failed."""

    default_code = "watch_setup_failed"


__all__ = [
    "SecretBackendAbsentError",
    "SecretError",
    "SecretReadError",
    "SecretReadTimeoutError",
    "WatchSetupError",
]
