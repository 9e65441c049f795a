"""Config – 12-factor settings and validation errors."""

from secret_reload.config.settings import (
    DEFAULT_SECRET_PATH,
    EnvSettingsLoader,
    SecretSettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_settings,
)
from secret_reload.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DEFAULT_SECRET_PATH",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "SecretSettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_settings",
]
