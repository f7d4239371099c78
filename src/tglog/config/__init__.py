"""Relay configuration – settings loaders and validation errors."""
from tglog.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    RelaySettings,
    Settings,
    SettingsFactory,
    SettingsLoader,
    load_relay_settings,
)
from tglog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)

__all__ = [
    "ConfigError",
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "InvalidSettingValueError",
    "MissingRequiredSettingError",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_relay_settings",
]
