"""Infrastructure errors – I/O failures against the mounted filesystem."""

from __future__ import annotations

from secret_reload.kernel.errors.base import BaseError


class InfrastructureError(BaseError):
    """Infrastructure / I/O failure that is not a business rule violation."""

    default_code = "infrastructure_error"


__all__ = ["InfrastructureError"]
