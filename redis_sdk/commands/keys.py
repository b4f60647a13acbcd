"""Key space commands: deletion, expiration, renaming and inspection."""

from datetime import datetime
from typing import Any, AsyncIterator, List, Optional, Union

from .base import CommandsBase

ExpiryTime = Union[datetime, int]


class KeyCommandsMixin(CommandsBase):
    """Generic key commands (DEL, EXPIRE, TTL, RENAME, ...)."""

    async def delete(self, *keys: str) -> int:
        """
        Delete one or more keys. Missing keys are ignored.

        Returns:
            Number of keys removed
        """
        if not keys:
            return 0
        return await self._redis.delete(*keys)

    async def dump(self, key: str) -> Optional[bytes]:
        """Serialized value of ``key`` in the store's RDB format, or None."""
        return await self._redis.dump(key)

    async def exists(self, key: str) -> bool:
        return bool(await self._redis.exists(key))

    async def expire(self, key: str, seconds: int) -> bool:
        """
        Set a time to live in seconds.

        Returns:
            False when the key does not exist
        """
        return bool(await self._redis.expire(key, seconds))

    async def expire_at(self, key: str, when: ExpiryTime) -> bool:
        """Expire ``key`` at a datetime or unix timestamp (seconds)."""
        return bool(await self._redis.expireat(key, when))

    async def keys(self, pattern: str = "*") -> List[Any]:
        """All keys matching a glob-style pattern. O(N) on the whole key space."""
        return await self._redis.keys(pattern)

    async def scan_iter(
        self, match: Optional[str] = None, count: Optional[int] = None
    ) -> AsyncIterator[Any]:
        """Incrementally iterate keys matching ``match`` using SCAN."""
        async for key in self._redis.scan_iter(match=match, count=count):
            yield key

    async def move(self, key: str, db_index: int) -> bool:
        return bool(await self._redis.move(key, db_index))

    async def persist(self, key: str) -> bool:
        """Remove the expiry of ``key``."""
        return bool(await self._redis.persist(key))

    async def pexpire(self, key: str, milliseconds: int) -> bool:
        return bool(await self._redis.pexpire(key, milliseconds))

    async def pexpire_at(self, key: str, when: ExpiryTime) -> bool:
        """Expire ``key`` at a datetime or unix timestamp (milliseconds)."""
        return bool(await self._redis.pexpireat(key, when))

    async def pttl(self, key: str) -> int:
        """
        Remaining time to live in milliseconds.

        Returns:
            -2 if the key does not exist, -1 if it has no expiry
        """
        return await self._redis.pttl(key)

    async def ttl(self, key: str) -> int:
        """
        Remaining time to live in seconds.

        Returns:
            -2 if the key does not exist, -1 if it has no expiry
        """
        return await self._redis.ttl(key)

    async def random_key(self) -> Optional[Any]:
        return await self._redis.randomkey()

    async def rename(self, old_key: str, new_key: str) -> None:
        """Rename ``old_key``, overwriting ``new_key`` if it exists."""
        await self._redis.rename(old_key, new_key)

    async def renamenx(self, old_key: str, new_key: str) -> bool:
        """Rename only if ``new_key`` does not exist yet."""
        return bool(await self._redis.renamenx(old_key, new_key))

    async def restore(
        self, key: str, value: bytes, ttl_ms: int = 0, replace: bool = False
    ) -> None:
        """
        Create ``key`` from a payload produced by :meth:`dump`.

        Args:
            key: Destination key
            value: Serialized payload
            ttl_ms: Time to live in milliseconds, 0 for no expiry
            replace: Overwrite an existing key instead of failing
        """
        await self._redis.restore(key, ttl_ms, value, replace=replace)

    async def sort(self, key: str, **options: Any) -> Any:
        """
        SORT ``key``.

        Options are passed to redis-py unchanged (``start``, ``num``, ``by``,
        ``get``, ``desc``, ``alpha``, ``store``, ``groups``). With ``store``
        the number of stored elements is returned instead of the list.
        """
        return await self._redis.sort(key, **options)

    async def type(self, key: str) -> str:
        """Type name of the value: none, string, list, set, zset, hash or stream."""
        value_type = await self._redis.type(key)
        if isinstance(value_type, bytes):
            return value_type.decode("utf-8")
        return value_type
