"""
Pub/Sub Services

Publisher, pattern-based listener container and the user/goods receivers.
"""

from .publisher import Publisher
from .listener import (
    ChannelTopic,
    Message,
    MessageListener,
    MessageListenerAdapter,
    PatternTopic,
    RedisMessageListenerContainer,
)
from .receivers import AbstractReceiver, GoodsReceiver, UserReceiver
from .config import (
    create_listener_container,
    create_publisher,
    goods_listener_adapter,
    user_listener_adapter,
)

__all__ = [
    "Publisher",
    "ChannelTopic",
    "Message",
    "MessageListener",
    "MessageListenerAdapter",
    "PatternTopic",
    "RedisMessageListenerContainer",
    "AbstractReceiver",
    "GoodsReceiver",
    "UserReceiver",
    "create_listener_container",
    "create_publisher",
    "goods_listener_adapter",
    "user_listener_adapter",
]
