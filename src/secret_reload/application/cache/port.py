"""Application cache – SecretSource port and FileDetails."""
from __future__ import annotations

import abc
import dataclasses
import pathlib
from datetime import datetime

from secret_reload.kernel.types import ReadOutcome


@dataclasses.dataclass(frozen=True)
class FileDetails:
    """Diagnostic view of the secret path as the filesystem reports it."""
    real_path: str
    is_symlink: bool
    modified_at: datetime


class SecretSource(abc.ABC):
    """Port: where the secret value comes from."""

    @property
    @abc.abstractmethod
    def path(self) -> pathlib.Path: ...

    @abc.abstractmethod
    def read(self) -> ReadOutcome:
        """Read content and modification time; never raises."""

    @abc.abstractmethod
    def inspect(self) -> FileDetails | None:
        """Return path details, ``None`` when the path does not exist.

        May raise :class:`OSError` when the path exists but cannot be stat'ed.
        """

    def close(self) -> None:
        """Release any worker resources held by the source."""


__all__ = ["FileDetails", "SecretSource"]
