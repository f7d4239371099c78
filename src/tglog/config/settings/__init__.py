"""Config settings – 12-factor env-based configuration."""
from tglog.config.settings.base import Settings
from tglog.config.settings.factory import SettingsFactory
from tglog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tglog.config.settings.relay import RelaySettings, load_relay_settings

__all__ = [
    "DotenvSettingsLoader",
    "EnvSettingsLoader",
    "RelaySettings",
    "Settings",
    "SettingsFactory",
    "SettingsLoader",
    "load_relay_settings",
]
