"""Application cache – FileSecretSource reading a CSI-mounted secret file."""
from __future__ import annotations

import concurrent.futures
import os
import pathlib

from secret_reload.application.cache.port import FileDetails, SecretSource
from secret_reload.kernel.errors import (
    SecretBackendAbsentError,
    SecretReadError,
    SecretReadTimeoutError,
)
from secret_reload.kernel.time import from_mtime
from secret_reload.kernel.types import Absent, Failed, Loaded, ReadOutcome


class FileSecretSource(SecretSource):
    """Reads the secret file below a mount root.

    Content and modification time come from the same open file handle, so a
    symlink swap between the two calls cannot pair the old text with the new
    mtime.  A failed read is classified as :class:`Absent` when *root* does
    not exist and as :class:`Failed` otherwise.

    Parameters
    ----------
    path:
        The secret file (usually a symlink into ``..data``).
    root:
        Mount root whose absence means "no secret backend configured".
        Defaults to the parent directory of *path*.
    read_timeout:
        Seconds before a read is abandoned and reported as failed.
        ``None`` reads inline on the calling thread.
    """

    def __init__(
        self,
        path: str | os.PathLike[str],
        root: str | os.PathLike[str] | None = None,
        read_timeout: float | None = None,
    ) -> None:
        self._path = pathlib.Path(path)
        self._root = pathlib.Path(root) if root is not None else self._path.parent
        self._read_timeout = read_timeout
        self._executor: concurrent.futures.ThreadPoolExecutor | None = None
        if read_timeout is not None:
            self._executor = concurrent.futures.ThreadPoolExecutor(
                max_workers=2, thread_name_prefix="secret-read"
            )

    @property
    def path(self) -> pathlib.Path:
        return self._path

    @property
    def root(self) -> pathlib.Path:
        return self._root

    def read(self) -> ReadOutcome:
        if self._executor is None:
            return self._read_file()
        future = self._executor.submit(self._read_file)
        try:
            return future.result(timeout=self._read_timeout)
        except concurrent.futures.TimeoutError as exc:
            # A queued read is dropped; one already running finishes unobserved.
            future.cancel()
            return Failed(
                SecretReadTimeoutError(str(self._path), self._read_timeout or 0.0, cause=exc)
            )

    def _read_file(self) -> ReadOutcome:
        try:
            with open(self._path, encoding="utf-8") as fh:
                raw = fh.read()
                st = os.fstat(fh.fileno())
        except (OSError, UnicodeDecodeError) as exc:
            if not self._root.exists():
                return Absent(SecretBackendAbsentError(str(self._root), cause=exc))
            reason = getattr(exc, "strerror", None) or str(exc)
            return Failed(
                SecretReadError(
                    f"Could not read secret '{self._path}': {reason}",
                    path=str(self._path),
                    cause=exc,
                )
            )
        return Loaded(raw.strip(), from_mtime(st.st_mtime))

    def inspect(self) -> FileDetails | None:
        try:
            st = os.stat(self._path)
        except FileNotFoundError:
            # Also covers a path swapped away after the caller saw it.
            return None
        real_path = os.path.realpath(self._path)
        return FileDetails(
            real_path=real_path,
            is_symlink=real_path != os.path.abspath(self._path),
            modified_at=from_mtime(st.st_mtime),
        )

    def close(self) -> None:
        if self._executor is not None:
            self._executor.shutdown(wait=False, cancel_futures=True)


__all__ = ["FileSecretSource"]
