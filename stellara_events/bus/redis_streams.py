"""
Stellara Events -- Redis Streams publisher.

Hands every published record to a single Redis Stream so indexers can
consume it with consumer groups.  This adapter only *delivers*; ordering
within one unit of work is preserved because XADD is called synchronously
in publish order.  Delivery retries, consumer groups, and trimming policy
beyond MAXLEN belong to the consumers and the Redis deployment.

Stream entry fields:
    ``record``   -- msgpack ``[channel, payload]`` (see serialization.py)
    ``topic``    -- first channel element as text, for cheap filtering
    ``kind``     -- ``legacy`` when the channel starts with a ``Topic``
                    member, ``standard`` when it starts with the root topic
    ``instance`` -- emitting instance id

Usage:
    publisher = RedisStreamPublisher.from_url("redis://localhost:6379")
    emitter = EventEmitter(publisher)
"""

from __future__ import annotations

import logging
from typing import Any, Optional

import redis
from redis.exceptions import ConnectionError as RedisConnectionError
from redis.exceptions import ResponseError, TimeoutError

from stellara_events.events.errors import PublishError
from stellara_events.events.serialization import serialize_record
from stellara_events.events.topics import Topic

logger = logging.getLogger(__name__)


class RedisStreamPublisher:
    """Synchronous ``EventPublisher`` backed by a Redis Stream.

    Args:
        client: A ``redis.Redis`` instance (``decode_responses`` may be
            either; values written are bytes).
        stream: Target stream name.
        maxlen: Approximate stream cap for backpressure.
        instance_id: Identifier written into each entry.
    """

    def __init__(
        self,
        client: redis.Redis,
        stream: str = "stellara:events",
        maxlen: int = 100000,
        instance_id: str = "stellara-1",
    ) -> None:
        self._redis = client
        self._stream = stream
        self._maxlen = maxlen
        self._instance_id = instance_id
        self.last_message_id: Optional[str] = None

    @classmethod
    def from_url(cls, redis_url: str, **kwargs: Any) -> "RedisStreamPublisher":
        """Build a publisher with a fresh client for ``redis_url``."""
        client = redis.Redis.from_url(
            redis_url,
            socket_connect_timeout=5.0,
            socket_keepalive=True,
            health_check_interval=30,
        )
        return cls(client, **kwargs)

    @classmethod
    def from_settings(cls) -> "RedisStreamPublisher":
        """Build a publisher from ``StellaraSettings``."""
        from stellara_events.config.settings import get_settings

        settings = get_settings()
        return cls.from_url(
            settings.redis_url,
            stream=settings.redis_stream,
            maxlen=settings.redis_stream_maxlen,
            instance_id=settings.instance_id,
        )

    @property
    def stream(self) -> str:
        return self._stream

    def publish(self, channel: tuple[Any, ...], payload: Any) -> None:
        """XADD one record.

        Raises:
            PublishError: On any Redis failure.  Nothing is retried.
        """
        first = channel[0] if channel else ""
        topic = str(getattr(first, "value", first))
        fields = {
            "record": serialize_record(channel, payload),
            "topic": topic,
            "kind": "legacy" if isinstance(first, Topic) else "standard",
            "instance": self._instance_id,
        }
        try:
            msg_id = self._redis.xadd(
                name=self._stream,
                fields=fields,
                maxlen=self._maxlen,
                approximate=True,
            )
        except (RedisConnectionError, TimeoutError) as exc:
            logger.error("Publish to %s failed: %s", self._stream, exc)
            raise PublishError(f"Redis unavailable: {exc}") from exc
        except ResponseError as exc:
            logger.error("Redis protocol error publishing to %s: %s", self._stream, exc)
            raise PublishError(f"Redis rejected XADD: {exc}") from exc

        if isinstance(msg_id, bytes):
            msg_id = msg_id.decode("ascii")
        self.last_message_id = msg_id
        logger.debug("Published to %s: msg_id=%s topic=%s", self._stream, msg_id, topic)

    def close(self) -> None:
        """Close the underlying connection pool."""
        try:
            self._redis.close()
        except (RedisConnectionError, OSError) as exc:
            logger.warning("Error during RedisStreamPublisher close: %s", exc)

    def __repr__(self) -> str:
        return (
            f"RedisStreamPublisher(stream={self._stream!r}, "
            f"maxlen={self._maxlen}, instance={self._instance_id!r})"
        )
