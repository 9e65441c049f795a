"""Testing fixtures – pytest fixtures for the secret mount and clock.

Register them in ``conftest.py``::

    pytest_plugins = ["secret_reload.testing.fixtures"]
"""
from secret_reload.testing.fixtures.clock import frozen_clock
from secret_reload.testing.fixtures.csi import CsiSecretMount, csi_mount

__all__ = ["CsiSecretMount", "csi_mount", "frozen_clock"]
