"""Shared fixtures for the unit test suite."""

from __future__ import annotations

import time
from typing import Callable

import pytest

from secret_reload.testing.fixtures import csi_mount, frozen_clock  # noqa: F401


@pytest.fixture
def wait_until() -> Callable[..., bool]:
    """Poll a predicate until it holds or *timeout* seconds pass."""

    def _wait(predicate: Callable[[], bool], timeout: float = 3.0, interval: float = 0.01) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(interval)
        return predicate()

    return _wait
