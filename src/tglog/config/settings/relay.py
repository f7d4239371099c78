"""Config settings – RelaySettings, the environment-driven relay configuration."""
from __future__ import annotations

import dataclasses
from typing import TYPE_CHECKING, Any, ClassVar

from tglog.config.settings.base import Settings
from tglog.config.settings.factory import SettingsFactory
from tglog.config.settings.loaders import DotenvSettingsLoader, EnvSettingsLoader, SettingsLoader
from tglog.config.validation import InvalidSettingValueError

if TYPE_CHECKING:
    from tglog.builder import TelegramRelayBuilder

_FORMATS = frozenset({"text", "markdown", "json", "template"})


def _chat_id(raw: str) -> int | str:
    # numeric ids (including negative group ids) go out as ints, "@channel" stays a string
    return int(raw) if raw.lstrip("-").isdigit() else raw


@dataclasses.dataclass
class RelaySettings(Settings):
    """Relay options read from ``TGLOG_*`` environment variables.

    ``TGLOG_CHAT_IDS`` and ``TGLOG_TAGS`` are comma-separated lists.
    """

    _prefix: ClassVar[str] = "TGLOG"

    bot_token: str
    chat_ids: list[str]
    format: str = "text"
    template: str = ""
    tags: list[str] = dataclasses.field(default_factory=list)
    unknown: str = "Unknown"
    queue_size: int = 100
    failure_delay: float = 60.0
    max_pending: int = 1000

    def _validate(self) -> None:
        self.format = self.format.strip().lower()
        if not self.chat_ids:
            raise InvalidSettingValueError("chat_ids", self.chat_ids, "at least one chat id is required")
        if self.format not in _FORMATS:
            raise InvalidSettingValueError(
                "format", self.format, f"expected one of {', '.join(sorted(_FORMATS))}"
            )
        if self.format == "template" and not self.template:
            raise InvalidSettingValueError("template", self.template, "required when format is 'template'")

    def to_builder(self) -> "TelegramRelayBuilder":
        """Return a builder pre-populated from these settings."""
        from tglog.builder import TelegramRelayBuilder

        builder = (
            TelegramRelayBuilder()
            .bot_token(self.bot_token)
            .chat_ids([_chat_id(c) for c in self.chat_ids])
            .tags(self.tags)
            .unknown(self.unknown)
            .queue_size(self.queue_size)
            .failure_delay(self.failure_delay)
            .max_pending(self.max_pending)
        )
        if self.format == "template":
            return builder.template(self.template)
        return builder.format(self.format)


def load_relay_settings(env_file: str | None = None, **overrides: Any) -> RelaySettings:
    """Load :class:`RelaySettings` from the environment.

    Values in *env_file* are used for keys the process environment lacks;
    keyword *overrides* win over both.
    """
    loaders: list[SettingsLoader] = []
    if env_file is not None:
        loaders.append(DotenvSettingsLoader(env_file))
    loaders.append(EnvSettingsLoader())
    return SettingsFactory.create(RelaySettings, loaders, overrides)


__all__ = ["RelaySettings", "load_relay_settings"]
