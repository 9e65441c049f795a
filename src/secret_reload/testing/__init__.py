"""Testing support – fakes and fixtures for code built on secret_reload.

Import in your ``conftest.py``::

    pytest_plugins = ["secret_reload.testing.fixtures"]
"""

from secret_reload.testing.fakes import (
    FakeObserver,
    FakeObserverFactory,
    FakeSecretSource,
    FrozenClock,
)

__all__ = ["FakeObserver", "FakeObserverFactory", "FakeSecretSource", "FrozenClock"]
