"""
Redis Command Facade

Thin async wrappers over redis-py, one mixin per data type.
"""

from redis.asyncio import Redis

from .base import CONVERTED_ERRORS, returns_on_error
from .keys import KeyCommandsMixin
from .strings import StringCommandsMixin
from .hashes import HashCommandsMixin
from .lists import ListCommandsMixin
from .sets import SetCommandsMixin
from .sorted_sets import SortedSetCommandsMixin
from ..infrastructure.redis.connection_factory import (
    RedisConnectionFactory,
    redis_connection_factory,
)


class RedisCommands(
    KeyCommandsMixin,
    StringCommandsMixin,
    HashCommandsMixin,
    ListCommandsMixin,
    SetCommandsMixin,
    SortedSetCommandsMixin,
):
    """Facade exposing key, string, hash, list, set and sorted set commands."""

    @classmethod
    async def from_factory(
        cls, factory: RedisConnectionFactory = redis_connection_factory
    ) -> "RedisCommands":
        """Build a facade on a client from ``factory``'s shared pool."""
        redis: Redis = await factory.get_client()
        return cls(redis)


__all__ = [
    "RedisCommands",
    "KeyCommandsMixin",
    "StringCommandsMixin",
    "HashCommandsMixin",
    "ListCommandsMixin",
    "SetCommandsMixin",
    "SortedSetCommandsMixin",
    "CONVERTED_ERRORS",
    "returns_on_error",
]
