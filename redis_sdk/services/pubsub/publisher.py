"""
Message Publisher

Serializes messages to JSON and publishes them on a Redis channel.
"""

from typing import Any, Optional

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from redis.asyncio import Redis

from ...infrastructure.redis.serializer import JsonRedisSerializer, json_serializer

logger = structlog.get_logger()
tracer = trace.get_tracer(__name__)


class Publisher:
    """Publishes messages on Redis pub/sub channels."""

    def __init__(self, redis: Redis, serializer: Optional[JsonRedisSerializer] = None):
        if redis is None:
            raise ValueError("redis client is required")

        self._redis = redis
        self._serializer = serializer or json_serializer

    async def push_message(self, topic: str, message: Any) -> int:
        """
        Publish ``message`` on ``topic``.

        Args:
            topic: Channel name
            message: Pydantic model or JSON-serializable object

        Returns:
            Number of subscribers that received the message

        Raises:
            ValueError: If topic is empty
            RedisSerializationException: If the message cannot be serialized
        """
        if not topic:
            raise ValueError("topic is required (cannot be empty)")

        with tracer.start_as_current_span("redis.pubsub.publish") as span:
            span.set_attribute("messaging.system", "redis")
            span.set_attribute("messaging.destination.name", topic)

            try:
                payload = self._serializer.serialize(message)
                receivers = await self._redis.publish(topic, payload)
            except Exception as e:
                span.record_exception(e)
                span.set_status(Status(StatusCode.ERROR, str(e)))
                logger.error(
                    "Publish failed",
                    topic=topic,
                    error=str(e),
                )
                raise

            span.set_attribute("messaging.redis.receivers", receivers)
            logger.debug(
                "Published message",
                topic=topic,
                msg_id=getattr(message, "msg_id", None),
                receivers=receivers,
            )
            return receivers
