"""Config settings – Settings base class."""
from __future__ import annotations

import dataclasses
from typing import ClassVar


@dataclasses.dataclass
class Settings:
    """Base class for 12-factor settings.

    Subclasses declare dataclass fields; :class:`EnvSettingsLoader` maps each
    field to ``{_prefix}_{FIELD}`` in the environment.
    """

    _prefix: ClassVar[str] = ""

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        """Override to add cross-field validation."""


__all__ = ["Settings"]
