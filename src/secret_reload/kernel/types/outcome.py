"""ReadOutcome – Loaded, Absent and Failed variants of a secret read."""

from __future__ import annotations

from datetime import datetime
from typing import TypeAlias

from secret_reload.kernel.errors import SecretBackendAbsentError, SecretReadError


class Loaded:
    """The secret file was read successfully."""

    __slots__ = ("_value", "_modified_at")

    def __init__(self, value: str, modified_at: datetime) -> None:
        self._value = value
        self._modified_at = modified_at

    @property
    def value(self) -> str:
        return self._value

    @property
    def modified_at(self) -> datetime:
        return self._modified_at

    def is_loaded(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Loaded):
            return NotImplemented
        return self._value == other._value and self._modified_at == other._modified_at

    def __hash__(self) -> int:
        return hash((self._value, self._modified_at))

    def __repr__(self) -> str:
        return f"Loaded(modified_at={self._modified_at.isoformat()!r})"


class Absent:
    """No secret backend is configured (the secret root does not exist)."""

    __slots__ = ("_error",)

    def __init__(self, error: SecretBackendAbsentError) -> None:
        self._error = error

    @property
    def error(self) -> SecretBackendAbsentError:
        return self._error

    def is_loaded(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Absent({self._error.root!r})"


class Failed:
    """The backend exists but the read or stat call failed."""

    __slots__ = ("_error",)

    def __init__(self, error: SecretReadError) -> None:
        self._error = error

    @property
    def error(self) -> SecretReadError:
        return self._error

    def is_loaded(self) -> bool:
        return False

    def __repr__(self) -> str:
        return f"Failed({self._error!r})"


ReadOutcome: TypeAlias = Loaded | Absent | Failed

__all__ = ["Absent", "Failed", "Loaded", "ReadOutcome"]
