"""
Redis SDK

Async facade over redis-py exposing key, string, hash, list, set and sorted
set commands, plus a publisher and a pattern-based listener container for
the user and goods topics.
"""

from .commands import RedisCommands
from .core.config import Settings, get_settings
from .core.logging import configure_logging
from .domain.messages import GoodsMessage, RedisMessage, UserMessage
from .infrastructure.redis import (
    RedisConnectionFactory,
    RedisException,
    redis_connection_factory,
)
from .services.pubsub import (
    Publisher,
    RedisMessageListenerContainer,
    create_listener_container,
    create_publisher,
)

__version__ = "0.1.0"

__all__ = [
    "RedisCommands",
    "Settings",
    "get_settings",
    "configure_logging",
    "RedisMessage",
    "UserMessage",
    "GoodsMessage",
    "RedisConnectionFactory",
    "RedisException",
    "redis_connection_factory",
    "Publisher",
    "RedisMessageListenerContainer",
    "create_listener_container",
    "create_publisher",
]
