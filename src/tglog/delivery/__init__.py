"""Delivery – request model, bot transport port and the bounded delivery queue."""
from tglog.delivery.request import DeliveryRequest, ParseMode
from tglog.delivery.transport import BotTransport, ChatId, SendResult
from tglog.delivery.queue import (
    DEFAULT_FAILURE_DELAY,
    DEFAULT_MAX_PENDING,
    DEFAULT_QUEUE_SIZE,
    DeliveryQueue,
)
from tglog.delivery.telegram import TELEGRAM_API_URL, TelegramBotTransport

__all__ = [
    "BotTransport",
    "ChatId",
    "DEFAULT_FAILURE_DELAY",
    "DEFAULT_MAX_PENDING",
    "DEFAULT_QUEUE_SIZE",
    "DeliveryQueue",
    "DeliveryRequest",
    "ParseMode",
    "SendResult",
    "TELEGRAM_API_URL",
    "TelegramBotTransport",
]
