"""List commands, including blocking pops and TTL-aware push helpers."""

from typing import Any, Iterable, List, Optional

from .base import CommandsBase, returns_on_error


class ListCommandsMixin(CommandsBase):
    """List commands (LPUSH, RPOP, LRANGE, BLPOP, ...)."""

    async def blpop(self, key: str, timeout: float = 0) -> Optional[Any]:
        """
        Pop the head of ``key``, blocking up to ``timeout`` seconds.

        Args:
            key: List key
            timeout: Seconds to wait, 0 blocks indefinitely

        Returns:
            The popped value, or None on timeout
        """
        result = await self._redis.blpop([key], timeout=timeout)
        return result[1] if result else None

    async def brpop(self, key: str, timeout: float = 0) -> Optional[Any]:
        """Pop the tail of ``key``, blocking up to ``timeout`` seconds."""
        result = await self._redis.brpop([key], timeout=timeout)
        return result[1] if result else None

    async def brpoplpush(
        self, source_key: str, destination_key: str, timeout: float = 0
    ) -> Optional[Any]:
        """Blocking :meth:`rpoplpush`; returns None on timeout."""
        return await self._redis.brpoplpush(
            source_key, destination_key, timeout=timeout
        )

    async def lindex(self, key: str, index: int) -> Optional[Any]:
        return await self._redis.lindex(key, index)

    async def linsert(self, key: str, pivot: Any, value: Any) -> int:
        """
        Insert ``value`` before the first occurrence of ``pivot``.

        Returns:
            New list length, -1 if ``pivot`` was not found, 0 if ``key``
            does not exist
        """
        return await self._redis.linsert(key, "BEFORE", pivot, value)

    async def llen(self, key: str) -> int:
        return await self._redis.llen(key)

    async def lpop(self, key: str) -> Optional[Any]:
        return await self._redis.lpop(key)

    async def lpush(self, key: str, *values: Any) -> int:
        return await self._redis.lpush(key, *values)

    async def lpushx(self, key: str, value: Any) -> int:
        """Push only if the list already exists; returns its length (0 if not)."""
        return await self._redis.lpushx(key, value)

    async def lrange(self, key: str, start: int, end: int) -> List[Any]:
        """Elements from ``start`` to ``end`` inclusive; ``0, -1`` is the whole list."""
        return await self._redis.lrange(key, start, end)

    async def lrem(self, key: str, count: int, value: Any) -> int:
        """
        Remove occurrences of ``value``.

        ``count > 0`` removes from head to tail, ``count < 0`` from tail to
        head, ``0`` removes all of them.
        """
        return await self._redis.lrem(key, count, value)

    @returns_on_error(False)
    async def lset(self, key: str, index: int, value: Any) -> bool:
        """Replace the element at ``index``. Out-of-range indexes give False."""
        await self._redis.lset(key, index, value)
        return True

    @returns_on_error(False)
    async def ltrim(self, key: str, start: int, end: int) -> bool:
        await self._redis.ltrim(key, start, end)
        return True

    async def rpop(self, key: str) -> Optional[Any]:
        return await self._redis.rpop(key)

    async def rpoplpush(self, source_key: str, destination_key: str) -> Optional[Any]:
        """Move the tail of ``source_key`` to the head of ``destination_key``."""
        return await self._redis.rpoplpush(source_key, destination_key)

    async def rpush(self, key: str, *values: Any) -> int:
        return await self._redis.rpush(key, *values)

    async def rpushx(self, key: str, value: Any) -> int:
        return await self._redis.rpushx(key, value)

    @returns_on_error(False)
    async def rpush_with_ttl(self, key: str, value: Any, time: int = 0) -> bool:
        """Append ``value`` and expire the list after ``time`` seconds if positive."""
        await self._redis.rpush(key, value)
        await self._expire_if_positive(key, time)
        return True

    @returns_on_error(False)
    async def rpush_all(self, key: str, values: Iterable[Any], time: int = 0) -> bool:
        """Append all ``values`` and expire the list after ``time`` seconds if positive."""
        values = list(values)
        if values:
            await self._redis.rpush(key, *values)
        await self._expire_if_positive(key, time)
        return True

    @returns_on_error(None)
    async def lrange_safe(self, key: str, start: int, end: int) -> Optional[List[Any]]:
        """:meth:`lrange` returning None instead of raising."""
        return await self._redis.lrange(key, start, end)

    @returns_on_error(0)
    async def llen_safe(self, key: str) -> int:
        return await self._redis.llen(key)

    @returns_on_error(None)
    async def lindex_safe(self, key: str, index: int) -> Optional[Any]:
        return await self._redis.lindex(key, index)

    @returns_on_error(0)
    async def lrem_safe(self, key: str, count: int, value: Any) -> int:
        return await self._redis.lrem(key, count, value)
