"""
tglog – relay log events to Telegram chats without blocking the caller.

Import path convention::

    from tglog import TelegramRelayBuilder
    from tglog.formatting import escape_markdown_v2
    from tglog.observability.logging import TelegramLogHandler
"""

from tglog.builder import RelayConfig, TelegramRelayBuilder, create_sink
from tglog.formatting.escape import escape_markdown_v2
from tglog.sink import EventSink

__version__ = "0.1.0"
__all__ = [
    "EventSink",
    "RelayConfig",
    "TelegramRelayBuilder",
    "__version__",
    "create_sink",
    "escape_markdown_v2",
]
