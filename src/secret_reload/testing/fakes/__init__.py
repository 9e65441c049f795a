"""Testing fakes – in-memory doubles for the secret source and the observer."""
from secret_reload.kernel.time import FrozenClock
from secret_reload.testing.fakes.observer import FakeObserver, FakeObserverFactory
from secret_reload.testing.fakes.secrets import FakeSecretSource

__all__ = ["FakeObserver", "FakeObserverFactory", "FakeSecretSource", "FrozenClock"]
