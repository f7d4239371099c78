"""Config validation – errors raised while assembling a relay."""
from __future__ import annotations

from tglog.kernel.errors import ApplicationError


class ConfigError(ApplicationError):
    """The relay cannot be built from the options given."""

    default_code = "config_error"


class MissingRequiredSettingError(ConfigError):
    """No value anywhere for an option the relay cannot run without.

    *setting_name* is the builder option (``bot``, ``chat_ids``) or, when the
    value was expected from the environment, the ``TGLOG_*`` key.
    """

    default_code = "missing_required_setting"

    def __init__(self, setting_name: str) -> None:
        super().__init__(f"relay needs '{setting_name}' but none was configured")
        self.setting_name = setting_name


class InvalidSettingValueError(ConfigError):
    default_code = "invalid_setting_value"

    def __init__(self, setting_name: str, value: object, reason: str) -> None:
        super().__init__(f"relay option '{setting_name}'={value!r} rejected: {reason}")
        self.setting_name = setting_name
        self.value = value
        self.reason = reason


__all__ = ["ConfigError", "InvalidSettingValueError", "MissingRequiredSettingError"]
