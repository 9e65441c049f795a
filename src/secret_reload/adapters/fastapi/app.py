"""FastAPI adapter – application factory wiring the secret service."""
from __future__ import annotations

import asyncio
import contextlib
from typing import Any, AsyncIterator

from fastapi import FastAPI

from secret_reload.adapters.fastapi.routers import FastAPIHealthRouter, FastAPISecretRouter
from secret_reload.application.service import SecretService
from secret_reload.config.settings import SecretSettings, load_settings
from secret_reload.observability.health import HealthRegistry, SecretHealthCheck
from secret_reload.observability.logging import JsonLoggerFactory


def create_app(
    settings: SecretSettings | None = None,
    service: SecretService | None = None,
    *,
    configure_logging: bool = False,
    **service_kwargs: Any,
) -> FastAPI:
    """Build a FastAPI app around one :class:`SecretService`.

    The lifespan performs the initial load and installs the watcher on
    startup, and releases the watch on shutdown.  ``service_kwargs`` are
    forwarded to :class:`SecretService` when no *service* is given.
    """
    if service is None:
        settings = settings or load_settings()
        service = SecretService(settings, **service_kwargs)
    else:
        settings = service.settings

    if configure_logging:
        JsonLoggerFactory.configure(settings.log_level)

    registry = HealthRegistry()
    registry.register(SecretHealthCheck(service))

    @contextlib.asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:  # noqa: ARG001
        await asyncio.to_thread(service.start)
        try:
            yield
        finally:
            await asyncio.to_thread(service.stop)

    app = FastAPI(
        title=settings.service_name,
        version=settings.service_version,
        lifespan=lifespan,
    )
    app.state.secret_service = service
    app.state.health_registry = registry
    app.include_router(FastAPIHealthRouter(registry))
    app.include_router(FastAPISecretRouter(service))
    return app


__all__ = ["create_app"]
