"""Observability – get_logger helper and secret-safe log values."""
from __future__ import annotations

from typing import Any

import structlog

PREVIEW_LENGTH = 20


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a bound structlog logger.

    Parameters
    ----------
    name:
        Logger name (typically ``__name__`` of the calling module).
    **initial_values:
        Key-value pairs to bind on the returned logger.
    """
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


def preview(value: str | None, length: int = PREVIEW_LENGTH) -> str | None:
    """Shorten a secret for log output: the first *length* chars plus ``...``."""
    if value is None:
        return None
    if len(value) <= length:
        return value
    return f"{value[:length]}..."


__all__ = ["PREVIEW_LENGTH", "get_logger", "preview"]
