from __future__ import annotations

from dataclasses import dataclass, field

from secret_reload.observability.health.check import HealthCheck, HealthStatus

__all__ = ["HealthReport", "HealthRegistry"]


@dataclass
class HealthReport:
    results: dict[str, HealthStatus] = field(default_factory=dict)

    @property
    def overall(self) -> bool:
        return all(s.healthy for s in self.results.values())

    def to_dict(self) -> dict:
        return {
            "status": "ok" if self.overall else "degraded",
            "healthy": self.overall,
            "checks": {
                name: {
                    "healthy": s.healthy,
                    "detail": s.detail,
                    "latency_ms": round(s.latency_ms, 2),
                    **s.data,
                }
                for name, s in self.results.items()
            },
        }


class HealthRegistry:
    """Runs registered health checks and aggregates results.

    A check that raises is reported as unhealthy; it never breaks the probe.
    """

    def __init__(self) -> None:
        self._checks: list[HealthCheck] = []

    def register(self, check: HealthCheck) -> None:
        self._checks.append(check)

    @property
    def checks(self) -> list[HealthCheck]:
        return list(self._checks)

    async def run_all(self) -> HealthReport:
        report = HealthReport()
        for check in self._checks:
            try:
                status = await check.timed_check()
            except Exception as exc:  # noqa: BLE001
                status = HealthStatus(healthy=False, detail=f"exception: {exc}")
            report.results[check.name] = status
        return report
