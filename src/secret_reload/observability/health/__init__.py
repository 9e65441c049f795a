"""Observability – Health Checks."""
from secret_reload.observability.health.builtin import LambdaHealthCheck, SecretHealthCheck
from secret_reload.observability.health.check import HealthCheck, HealthStatus
from secret_reload.observability.health.registry import HealthRegistry, HealthReport

__all__ = [
    "HealthCheck",
    "HealthRegistry",
    "HealthReport",
    "HealthStatus",
    "LambdaHealthCheck",
    "SecretHealthCheck",
]
