"""
Pub/Sub wiring.

Builds the publisher and the listener container with the user and goods
receivers registered on their pattern topics.
"""

from typing import Optional

from redis.asyncio import Redis

from ...core.config import Settings, get_settings
from ...domain.messages import GoodsMessage, UserMessage
from ...infrastructure.redis.serializer import json_serializer
from .listener import MessageListenerAdapter, PatternTopic, RedisMessageListenerContainer
from .publisher import Publisher
from .receivers import GoodsReceiver, UserReceiver


def create_publisher(redis: Redis) -> Publisher:
    """Publisher writing JSON payloads."""
    return Publisher(redis, serializer=json_serializer)


def user_listener_adapter(receiver: UserReceiver) -> MessageListenerAdapter:
    return MessageListenerAdapter(
        receiver, "receive_message", message_type=UserMessage, serializer=json_serializer
    )


def goods_listener_adapter(receiver: GoodsReceiver) -> MessageListenerAdapter:
    return MessageListenerAdapter(
        receiver, "receive_message", message_type=GoodsMessage, serializer=json_serializer
    )


async def create_listener_container(
    redis: Redis,
    user_receiver: Optional[UserReceiver] = None,
    goods_receiver: Optional[GoodsReceiver] = None,
    settings: Optional[Settings] = None,
) -> RedisMessageListenerContainer:
    """
    Listener container with the user and goods receivers registered.

    Args:
        redis: Redis client used for the subscription connection
        user_receiver: Receiver for the user topic, a new one if omitted
        goods_receiver: Receiver for the goods topic, a new one if omitted
        settings: Settings providing topic names and poll timeout

    Returns:
        Container that has not been started yet
    """
    settings = settings or get_settings()
    container = RedisMessageListenerContainer(
        redis, poll_timeout=settings.PUBSUB_POLL_TIMEOUT
    )

    await container.add_message_listener(
        user_listener_adapter(user_receiver or UserReceiver()),
        PatternTopic(settings.PUBSUB_USER_TOPIC),
    )
    await container.add_message_listener(
        goods_listener_adapter(goods_receiver or GoodsReceiver()),
        PatternTopic(settings.PUBSUB_GOODS_TOPIC),
    )
    return container
