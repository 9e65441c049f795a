"""Config settings – SecretSettings for the mounted secret and its watcher."""
from __future__ import annotations

import dataclasses
import pathlib
from typing import Any, ClassVar

from secret_reload import __version__
from secret_reload.config.settings.base import Settings
from secret_reload.config.settings.factory import SettingsFactory
from secret_reload.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from secret_reload.config.validation import InvalidSettingValueError

DEFAULT_SECRET_PATH = "/mnt/secrets-store/my-secret"
TEST_MODE = "test"


@dataclasses.dataclass
class SecretSettings(Settings):
    """Where the secret lives and how the watcher reacts to it.

    Every field maps to an unprefixed environment variable of the same name
    (``secret_path`` → ``SECRET_PATH``).
    """

    _prefix: ClassVar[str] = ""

    secret_path: str = DEFAULT_SECRET_PATH
    # Empty means "the directory that contains secret_path".
    secret_root: str = ""
    app_env: str = "production"
    debounce_ms: int = 100
    coalesce_events: bool = False
    # 0 disables the read deadline.
    read_timeout_seconds: float = 0.0
    service_name: str = "secret-reload"
    service_version: str = __version__
    log_level: str = "INFO"

    def _validate(self) -> None:
        if not self.secret_path.strip():
            raise InvalidSettingValueError("secret_path", self.secret_path, "must not be empty")
        if self.debounce_ms < 0:
            raise InvalidSettingValueError("debounce_ms", self.debounce_ms, "must be >= 0")
        if self.read_timeout_seconds < 0:
            raise InvalidSettingValueError(
                "read_timeout_seconds", self.read_timeout_seconds, "must be >= 0"
            )

    @property
    def test_mode(self) -> bool:
        return self.app_env.strip().lower() == TEST_MODE

    @property
    def path(self) -> pathlib.Path:
        return pathlib.Path(self.secret_path)

    @property
    def root_dir(self) -> pathlib.Path:
        """The secret root: its absence means no backend is configured."""
        if self.secret_root:
            return pathlib.Path(self.secret_root)
        return self.path.parent

    @property
    def secret_dir(self) -> pathlib.Path:
        """The directory holding the secret file and its ``..data`` entry."""
        return self.path.parent

    @property
    def secret_name(self) -> str:
        return self.path.name

    @property
    def debounce_seconds(self) -> float:
        return self.debounce_ms / 1000.0

    @property
    def read_timeout(self) -> float | None:
        return self.read_timeout_seconds or None


def load_settings(
    overrides: dict[str, Any] | None = None,
    loaders: list[SettingsLoader] | None = None,
) -> SecretSettings:
    """Build :class:`SecretSettings` from the environment plus *overrides*."""
    return SettingsFactory.create(
        SecretSettings,
        loaders=[EnvSettingsLoader()] if loaders is None else loaders,
        overrides=overrides,
    )


__all__ = ["DEFAULT_SECRET_PATH", "SecretSettings", "TEST_MODE", "load_settings"]
