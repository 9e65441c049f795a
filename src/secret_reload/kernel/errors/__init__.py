"""Kernel error hierarchy – public re-export surface.

Hierarchy::

    BaseError
    ├── ApplicationError     (application.py)
    │   └── ConfigError      (config.validation)
    └── InfrastructureError  (infrastructure.py)
        └── SecretError      (secrets.py)
            ├── SecretBackendAbsentError
            ├── SecretReadError
            │   └── SecretReadTimeoutError
            └── WatchSetupError
"""

from secret_reload.kernel.errors.application import ApplicationError
from secret_reload.kernel.errors.base import BaseError
from secret_reload.kernel.errors.infrastructure import InfrastructureError
from secret_reload.kernel.errors.secrets import (
    SecretBackendAbsentError,
    SecretError,
    SecretReadError,
    SecretReadTimeoutError,
    WatchSetupError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "InfrastructureError",
    "SecretBackendAbsentError",
    "SecretError",
    "SecretReadError",
    "SecretReadTimeoutError",
    "WatchSetupError",
]
