"""Testing fakes – in-memory doubles for the bot transport port."""
from tglog.testing.fakes.transport import BlockingBotTransport, InMemoryBotTransport, SentMessage

__all__ = ["BlockingBotTransport", "InMemoryBotTransport", "SentMessage"]
