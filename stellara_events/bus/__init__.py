"""
Stellara Events -- Transport adapters.

Publishers implement ``EventPublisher.publish(channel, payload)``.

    InMemoryEventLog      -- append-only in-process log (tests, tooling)
    RedisStreamPublisher  -- XADD onto a Redis Stream for indexers
"""

from stellara_events.bus.memory import InMemoryEventLog, PublishedRecord
from stellara_events.bus.redis_streams import RedisStreamPublisher

__all__ = [
    "InMemoryEventLog",
    "PublishedRecord",
    "RedisStreamPublisher",
]
