"""Testing helpers – in-memory transports for relay tests."""
from tglog.testing.fakes import BlockingBotTransport, InMemoryBotTransport, SentMessage

__all__ = ["BlockingBotTransport", "InMemoryBotTransport", "SentMessage"]
