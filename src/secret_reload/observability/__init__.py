"""Observability – structured logging and health checks.

Health checks live in :mod:`secret_reload.observability.health` and are not
re-exported here: they depend on the application layer, which itself logs
through this package.
"""

from secret_reload.observability.logging import JsonLoggerFactory, get_logger, preview

__all__ = ["JsonLoggerFactory", "get_logger", "preview"]
