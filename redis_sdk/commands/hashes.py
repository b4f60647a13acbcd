"""Hash commands."""

from typing import Any, Dict, Iterable, List, Mapping, Optional

from .base import CommandsBase, returns_on_error


class HashCommandsMixin(CommandsBase):
    """Hash field commands (HGET, HSET, HINCRBY, ...)."""

    async def hdel(self, key: str, *fields: str) -> int:
        """Delete ``fields``; returns how many existed."""
        if not fields:
            return 0
        return await self._redis.hdel(key, *fields)

    async def hexists(self, key: str, field: str) -> bool:
        return bool(await self._redis.hexists(key, field))

    async def hget(self, key: str, field: str) -> Optional[Any]:
        return await self._redis.hget(key, field)

    async def hgetall(self, key: str) -> Dict[Any, Any]:
        return await self._redis.hgetall(key)

    async def hincrby(self, key: str, field: str, delta: int = 1) -> int:
        return await self._redis.hincrby(key, field, delta)

    async def hincrbyfloat(self, key: str, field: str, delta: float) -> float:
        return float(await self._redis.hincrbyfloat(key, field, delta))

    async def hkeys(self, key: str) -> List[Any]:
        return await self._redis.hkeys(key)

    async def hlen(self, key: str) -> int:
        return await self._redis.hlen(key)

    async def hmget(self, key: str, fields: Iterable[str]) -> List[Optional[Any]]:
        fields = list(fields)
        if not fields:
            return []
        return await self._redis.hmget(key, fields)

    @returns_on_error(False)
    async def hmset(self, key: str, mapping: Mapping[str, Any]) -> bool:
        """Set several fields at once. Returns False if the store rejected it."""
        await self._redis.hset(key, mapping=dict(mapping))
        return True

    @returns_on_error(False)
    async def hset(self, key: str, field: str, value: Any) -> bool:
        await self._redis.hset(key, field, value)
        return True

    @returns_on_error(False)
    async def hset_with_ttl(self, key: str, field: str, value: Any, time: int) -> bool:
        """
        Set a field and, when ``time`` is positive, expire the whole hash.

        Args:
            key: Hash key
            field: Field name
            value: Field value
            time: Time to live in seconds for the hash, ignored if <= 0

        Returns:
            True on success, False if the store rejected either command
        """
        await self._redis.hset(key, field, value)
        await self._expire_if_positive(key, time)
        return True

    async def hsetnx(self, key: str, field: str, value: Any) -> bool:
        """Set ``field`` only if it does not exist."""
        return bool(await self._redis.hsetnx(key, field, value))

    async def hvals(self, key: str) -> List[Any]:
        return await self._redis.hvals(key)

    async def hstrlen(self, key: str, field: str) -> int:
        return await self._redis.hstrlen(key, field)
