from __future__ import annotations

import asyncio
from typing import Awaitable, Callable

from secret_reload.application.cache import FALLBACK_VALUE, UNAVAILABLE_VALUE
from secret_reload.application.service import SecretService
from secret_reload.observability.health.check import HealthCheck, HealthStatus

__all__ = ["LambdaHealthCheck", "SecretHealthCheck"]


class LambdaHealthCheck(HealthCheck):
    """Simple health check backed by a callable – useful in tests."""

    def __init__(self, name_: str, fn: Callable[[], Awaitable[HealthStatus]]) -> None:
        self._name = name_
        self._fn = fn

    @property
    def name(self) -> str:
        return self._name

    async def check(self) -> HealthStatus:
        return await self._fn()


class SecretHealthCheck(HealthCheck):
    """Healthy while the secret resolves to something other than the
    unavailable sentinel.  The fallback placeholder counts as healthy: it
    means no backend is configured, which is expected outside a cluster.

    The file read runs in a worker thread so a slow mount does not stall
    the event loop.
    """

    def __init__(self, service: SecretService) -> None:
        self._service = service

    @property
    def name(self) -> str:
        return "secret"

    async def check(self) -> HealthStatus:
        value = await asyncio.to_thread(self._service.get_secret)
        data = {
            "watcher_active": self._service.is_watcher_active(),
            "fallback": value == FALLBACK_VALUE,
        }
        if value == UNAVAILABLE_VALUE:
            return HealthStatus(healthy=False, detail="secret unavailable", data=data)
        return HealthStatus(healthy=True, data=data)
