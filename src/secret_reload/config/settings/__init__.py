"""Config settings – 12-factor env-based configuration."""
from secret_reload.config.settings.base import Settings
from secret_reload.config.settings.factory import SettingsFactory
from secret_reload.config.settings.loaders import EnvSettingsLoader, SettingsLoader
from secret_reload.config.settings.secret import (
    DEFAULT_SECRET_PATH,
    TEST_MODE,
    SecretSettings,
    load_settings,
)

__all__ = [
    "DEFAULT_SECRET_PATH",
    "EnvSettingsLoader",
    "SecretSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "TEST_MODE",
    "load_settings",
]
