"""Configuration builder – assemble an EventSink and its DeliveryQueue.

Every successful build owns an independent queue and worker, even when
several builds share one transport.
"""
from __future__ import annotations

import asyncio
import dataclasses
import logging
from collections.abc import Iterable

from tglog.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)
from tglog.delivery import (
    DEFAULT_FAILURE_DELAY,
    DEFAULT_MAX_PENDING,
    DEFAULT_QUEUE_SIZE,
    TELEGRAM_API_URL,
    BotTransport,
    ChatId,
    DeliveryQueue,
    TelegramBotTransport,
)
from tglog.formatting import (
    DEFAULT_LEVEL_EMOJIS,
    DEFAULT_PLACEHOLDER,
    FormatMode,
    JsonEnvelope,
    LevelEmojis,
    Markdown,
    MessageFormatter,
    PlainText,
    TagFilter,
    Template,
    parse_format_mode,
)
from tglog.kernel.time import Clock, SystemClock
from tglog.kernel.types import Err, Ok, Result
from tglog.observability.logging import TelegramLogHandler, TelegramProcessor
from tglog.sink import EventSink


@dataclasses.dataclass(frozen=True)
class RelayConfig:
    """Validated, immutable relay configuration."""

    transport: BotTransport
    recipients: tuple[ChatId, ...]
    mode: FormatMode = PlainText()
    tags: tuple[str, ...] = ()
    placeholder: str = DEFAULT_PLACEHOLDER
    queue_size: int = DEFAULT_QUEUE_SIZE
    failure_delay: float = DEFAULT_FAILURE_DELAY
    max_pending: int = DEFAULT_MAX_PENDING
    emojis: LevelEmojis = DEFAULT_LEVEL_EMOJIS
    clock: Clock = dataclasses.field(default_factory=SystemClock)
    owns_transport: bool = False

    def validate(self) -> list[ConfigError]:
        """Return every problem found (empty when the config is usable)."""
        errors: list[ConfigError] = []
        if not self.recipients:
            errors.append(MissingRequiredSettingError("chat_ids"))
        if not self.placeholder:
            errors.append(InvalidSettingValueError("unknown", self.placeholder, "must not be empty"))
        if self.queue_size < 1:
            errors.append(InvalidSettingValueError("queue_size", self.queue_size, "must be positive"))
        if self.max_pending < 1:
            errors.append(InvalidSettingValueError("max_pending", self.max_pending, "must be positive"))
        if self.failure_delay < 0:
            errors.append(InvalidSettingValueError("failure_delay", self.failure_delay, "must not be negative"))
        return errors


def create_sink(
    config: RelayConfig,
    loop: asyncio.AbstractEventLoop | None = None,
) -> Result[EventSink, ConfigError]:
    """Validate *config*, start its delivery worker and return the sink."""
    errors = config.validate()
    if errors:
        return Err(errors[0])
    queue = DeliveryQueue(
        config.transport,
        config.recipients,
        maxsize=config.queue_size,
        failure_delay=config.failure_delay,
        max_pending=config.max_pending,
        close_transport=config.owns_transport,
    )
    formatter = MessageFormatter(config.emojis, config.clock, config.placeholder)
    sink = EventSink(queue, formatter, config.mode, TagFilter(config.tags), config.placeholder)
    queue.start(loop)
    return Ok(sink)


class TelegramRelayBuilder:
    """Fluent builder for a Telegram log relay.

    ::

        sink = (
            TelegramRelayBuilder()
            .bot_token(os.environ["BOT_TOKEN"])
            .chat_id(123456)
            .markdown()
            .build()
        )
        logging.getLogger().addHandler(sink.handler(logging.WARNING))

    Defaults: plain text, no tag filter, placeholder ``"Unknown"``, queue of
    100, 60 s pause after a failed send.
    """

    def __init__(self) -> None:
        self._transport: BotTransport | None = None
        self._owns_transport = False
        self._chat_ids: tuple[ChatId, ...] | None = None
        self._mode: FormatMode | None = None
        self._tags: tuple[str, ...] | None = None
        self._unknown: str | None = None
        self._queue_size = DEFAULT_QUEUE_SIZE
        self._failure_delay = DEFAULT_FAILURE_DELAY
        self._max_pending = DEFAULT_MAX_PENDING
        self._emojis = DEFAULT_LEVEL_EMOJIS
        self._clock: Clock | None = None
        self._loop: asyncio.AbstractEventLoop | None = None

    # transport / recipients

    def transport(self, transport: BotTransport) -> "TelegramRelayBuilder":
        """Use *transport*; the caller stays responsible for closing it."""
        self._transport = transport
        self._owns_transport = False
        return self

    def bot_token(self, token: str, base_url: str = TELEGRAM_API_URL) -> "TelegramRelayBuilder":
        """Use a :class:`TelegramBotTransport` for *token*.

        Sinks built from it close the transport when they shut down.
        *base_url* points at a self-hosted Bot API server.
        """
        self._transport = TelegramBotTransport(token, base_url=base_url)
        self._owns_transport = True
        return self

    def chat_id(self, chat_id: ChatId) -> "TelegramRelayBuilder":
        """Notify a single chat."""
        self._chat_ids = (chat_id,)
        return self

    def chat_ids(self, chat_ids: Iterable[ChatId]) -> "TelegramRelayBuilder":
        """Notify several chats, in order."""
        self._chat_ids = tuple(chat_ids)
        return self

    def with_bot(self, token: str, chat_ids: Iterable[ChatId]) -> "TelegramRelayBuilder":
        return self.bot_token(token).chat_ids(chat_ids)

    # format

    def format(self, mode: FormatMode | str) -> "TelegramRelayBuilder":
        self._mode = parse_format_mode(mode) if isinstance(mode, str) else mode
        return self

    def text(self) -> "TelegramRelayBuilder":
        return self.format(PlainText())

    def markdown(self) -> "TelegramRelayBuilder":
        return self.format(Markdown())

    def json(self) -> "TelegramRelayBuilder":
        return self.format(JsonEnvelope())

    def template(self, fmt: str) -> "TelegramRelayBuilder":
        """Placeholders: ``{emoji} {time} {msg} {level} {module} {file} {line}``."""
        return self.format(Template(fmt))

    # filtering / rendering details

    def tags(self, tags: Iterable[str]) -> "TelegramRelayBuilder":
        """Only relay messages containing at least one of *tags*."""
        self._tags = tuple(tags)
        return self

    def unknown(self, placeholder: str) -> "TelegramRelayBuilder":
        """Text used for missing metadata and unmapped levels."""
        self._unknown = placeholder
        return self

    def emojis(self, emojis: LevelEmojis) -> "TelegramRelayBuilder":
        self._emojis = emojis
        return self

    def clock(self, clock: Clock) -> "TelegramRelayBuilder":
        self._clock = clock
        return self

    # delivery tuning

    def queue_size(self, size: int) -> "TelegramRelayBuilder":
        self._queue_size = size
        return self

    def failure_delay(self, seconds: float) -> "TelegramRelayBuilder":
        self._failure_delay = seconds
        return self

    def max_pending(self, count: int) -> "TelegramRelayBuilder":
        self._max_pending = count
        return self

    def loop(self, loop: asyncio.AbstractEventLoop) -> "TelegramRelayBuilder":
        """Run the delivery worker on *loop* instead of choosing one at build time."""
        self._loop = loop
        return self

    # build

    def config(self) -> Result[RelayConfig, ConfigError]:
        """Resolve defaults into a :class:`RelayConfig` without starting anything."""
        if self._transport is None:
            return Err(MissingRequiredSettingError("bot"))
        if not self._chat_ids:
            return Err(MissingRequiredSettingError("chat_ids"))
        config = RelayConfig(
            transport=self._transport,
            recipients=self._chat_ids,
            mode=self._mode or PlainText(),
            tags=self._tags or (),
            placeholder=DEFAULT_PLACEHOLDER if self._unknown is None else self._unknown,
            queue_size=self._queue_size,
            failure_delay=self._failure_delay,
            max_pending=self._max_pending,
            emojis=self._emojis,
            clock=self._clock or SystemClock(),
            owns_transport=self._owns_transport,
        )
        errors = config.validate()
        if errors:
            return Err(errors[0])
        return Ok(config)

    def try_build(self) -> Result[EventSink, ConfigError]:
        """Build the sink, reporting configuration problems as ``Err``."""
        config = self.config()
        if config.is_err():
            return config
        return create_sink(config.unwrap(), self._loop)

    def build(self) -> EventSink:
        """Build the sink.

        Raises
        ------
        MissingRequiredSettingError
            When no transport or no chat id was configured.
        InvalidSettingValueError
            When a tuning value is out of range.
        """
        return self.try_build().unwrap()

    def build_handler(self, level: int = logging.NOTSET) -> TelegramLogHandler:
        return self.build().handler(level)

    def build_processor(self) -> TelegramProcessor:
        return self.build().processor()


__all__ = ["RelayConfig", "TelegramRelayBuilder", "create_sink"]
