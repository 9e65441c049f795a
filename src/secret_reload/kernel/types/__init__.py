"""Kernel value types – public re-export surface.

Modules:
  outcome.py – Loaded, Absent, Failed, ReadOutcome
"""

from secret_reload.kernel.types.outcome import Absent, Failed, Loaded, ReadOutcome

__all__ = ["Absent", "Failed", "Loaded", "ReadOutcome"]
