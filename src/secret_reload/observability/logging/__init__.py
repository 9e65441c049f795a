"""Observability – structured logging helpers."""
from secret_reload.observability.logging.factory import JsonLoggerFactory
from secret_reload.observability.logging.processors import get_logger, preview

__all__ = ["JsonLoggerFactory", "get_logger", "preview"]
