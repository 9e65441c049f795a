"""FastAPI adapter – secret and health routers."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter
from fastapi.responses import JSONResponse, PlainTextResponse

from secret_reload.application.service import SecretService
from secret_reload.observability.health import HealthRegistry


def FastAPISecretRouter(service: SecretService, tags: list[str] | None = None) -> APIRouter:
    """Return the router exposing the secret operations.

    Handlers are plain ``def`` functions: FastAPI runs them in its threadpool,
    so file reads never block the event loop.

    Routes
    ------
    ``GET /``               service status and feature flags
    ``GET /health``         plain ``OK``
    ``GET /config``         the secret plus freshness metadata
    ``GET /secret-info``    path diagnostics (symlink target, mtimes)
    ``GET /trigger-reload`` force a reload and report what changed
    """
    router = APIRouter(tags=tags or ["secret"])

    @router.get("/")
    def status() -> dict[str, Any]:
        return service.get_service_status().to_dict()

    @router.get("/health", response_class=PlainTextResponse)
    def health() -> str:
        return "OK"

    @router.get("/config")
    def config() -> dict[str, Any]:
        return service.get_config().to_dict()

    @router.get("/secret-info")
    def secret_info() -> dict[str, Any]:
        return service.get_secret_info().to_dict()

    @router.get("/trigger-reload")
    def trigger_reload() -> dict[str, Any]:
        result = service.trigger_reload()
        return {"message": "Manual reload triggered", **result.to_dict()}

    return router


def FastAPIHealthRouter(
    registry: HealthRegistry,
    path: str = "/health",
    tags: list[str] | None = None,
) -> APIRouter:
    """Return a liveness + readiness health-check router.

    Liveness is at ``{path}/live`` and always answers 200 while the process
    is up.  Readiness at ``{path}/ready`` runs every registered check and
    answers 503 when any of them is unhealthy.
    """
    router = APIRouter(tags=tags or ["ops"])

    @router.get(f"{path}/live")
    async def liveness() -> dict[str, str]:
        return {"status": "ok"}

    @router.get(f"{path}/ready")
    async def readiness() -> Any:
        report = await registry.run_all()
        return JSONResponse(
            status_code=200 if report.overall else 503,
            content=report.to_dict(),
        )

    return router


__all__ = ["FastAPIHealthRouter", "FastAPISecretRouter"]
