"""Kernel time – Clock port + implementations."""
from secret_reload.kernel.time.clock import Clock, FrozenClock, SystemClock, from_mtime

__all__ = ["Clock", "FrozenClock", "SystemClock", "from_mtime"]
