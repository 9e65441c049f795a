"""Unit tests for SettingsFactory."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any, ClassVar

import pytest

from secret_reload.config.settings import EnvSettingsLoader, Settings, SettingsFactory, SettingsLoader
from secret_reload.config.validation import ConfigError, MissingRequiredSettingError


@dataclass
class SvcSettings(Settings):
    _prefix: ClassVar[str] = "SVC"

    name: str = "svc"
    port: int = 8000


@dataclass
class RequiredSettings(Settings):
    _prefix: ClassVar[str] = "REQ"

    token: str = dataclasses.field()


class _StaticLoader(SettingsLoader):
    def __init__(self, **values: Any) -> None:
        self._values = values

    def load(self, settings_class):  # type: ignore[no-untyped-def]
        return settings_class(**self._values)


class TestSettingsFactory:
    def test_no_loaders_uses_defaults(self) -> None:
        settings = SettingsFactory.create(SvcSettings)
        assert settings == SvcSettings()

    def test_later_loader_wins(self) -> None:
        settings = SettingsFactory.create(
            SvcSettings,
            loaders=[_StaticLoader(name="first"), _StaticLoader(name="second")],
        )
        assert settings.name == "second"

    def test_overrides_have_highest_priority(self) -> None:
        settings = SettingsFactory.create(
            SvcSettings,
            loaders=[EnvSettingsLoader({"SVC_PORT": "9000"})],
            overrides={"port": 1234},
        )
        assert settings.port == 1234

    def test_unknown_override_rejected(self) -> None:
        with pytest.raises(ConfigError) as exc_info:
            SettingsFactory.create(SvcSettings, overrides={"prot": 1})
        assert "prot" in exc_info.value.message

    def test_missing_required_field(self) -> None:
        with pytest.raises(MissingRequiredSettingError):
            SettingsFactory.create(RequiredSettings)

    def test_required_field_from_override(self) -> None:
        settings = SettingsFactory.create(RequiredSettings, overrides={"token": "t"})
        assert settings.token == "t"

    def test_loader_config_error_propagates(self) -> None:
        with pytest.raises(ConfigError):
            SettingsFactory.create(SvcSettings, loaders=[EnvSettingsLoader({"SVC_PORT": "x"})])

    def test_construction_failure_wrapped(self) -> None:
        @dataclass
        class Exploding(Settings):
            value: int = 0

            def _validate(self) -> None:
                raise RuntimeError("kaboom")

        with pytest.raises(ConfigError) as exc_info:
            SettingsFactory.create(Exploding, overrides={"value": 1})
        assert "kaboom" in exc_info.value.message
