"""String commands, including counters and bit operations."""

from typing import Any, Iterable, List, Mapping, Optional

from .base import CommandsBase, returns_on_error

BIT_OPERATIONS = ("AND", "OR", "XOR", "NOT")


class StringCommandsMixin(CommandsBase):
    """String value commands (GET, SET, INCR, SETEX, ...)."""

    async def append(self, key: str, value: Any) -> int:
        """Append to the string at ``key``; returns the new length."""
        return await self._redis.append(key, value)

    async def bitcount(
        self, key: str, start: Optional[int] = None, end: Optional[int] = None
    ) -> int:
        """Count set bits, optionally within the byte range ``start``..``end``."""
        return await self._redis.bitcount(key, start, end)

    async def bitop(self, operation: str, dest: str, *keys: str) -> int:
        """
        Perform a bitwise operation between ``keys`` and store it in ``dest``.

        Args:
            operation: AND, OR, XOR or NOT (NOT takes exactly one key)
            dest: Destination key
            *keys: Source keys

        Returns:
            Length of the string stored in ``dest``

        Raises:
            ValueError: If the operation is unknown
        """
        operation = operation.upper()
        if operation not in BIT_OPERATIONS:
            raise ValueError(f"operation must be one of: {BIT_OPERATIONS}")
        return await self._redis.bitop(operation, dest, *keys)

    async def decr(self, key: str, delta: int = 1) -> int:
        return await self._redis.decrby(key, delta)

    async def get(self, key: str) -> Optional[Any]:
        return await self._redis.get(key)

    async def getbit(self, key: str, offset: int) -> bool:
        return bool(await self._redis.getbit(key, offset))

    async def getrange(self, key: str, start: int, end: int) -> Any:
        """Substring between ``start`` and ``end`` (both inclusive)."""
        return await self._redis.getrange(key, start, end)

    async def getset(self, key: str, value: Any) -> Optional[Any]:
        """Set ``value`` and return the old value."""
        return await self._redis.getset(key, value)

    async def incr(self, key: str, delta: int = 1) -> int:
        return await self._redis.incrby(key, delta)

    async def incrbyfloat(self, key: str, delta: float) -> float:
        return float(await self._redis.incrbyfloat(key, delta))

    async def mget(self, keys: Iterable[str]) -> List[Optional[Any]]:
        """Values of all ``keys``; missing keys yield None."""
        keys = list(keys)
        if not keys:
            return []
        return await self._redis.mget(keys)

    @returns_on_error(False)
    async def mset(self, mapping: Mapping[str, Any]) -> bool:
        """Set several keys atomically. Returns False if the store rejected it."""
        await self._redis.mset(dict(mapping))
        return True

    async def msetnx(self, mapping: Mapping[str, Any]) -> bool:
        """Set several keys only if none of them exists."""
        return bool(await self._redis.msetnx(dict(mapping)))

    @returns_on_error(False)
    async def psetex(self, key: str, value: Any, time: int) -> bool:
        """
        Set ``key`` with a time to live in milliseconds.

        A ``time`` of zero or less stores the value without expiry.
        """
        if time > 0:
            await self._redis.psetex(key, time, value)
        else:
            await self._redis.set(key, value)
        return True

    @returns_on_error(False)
    async def set(self, key: str, value: Any) -> bool:
        await self._redis.set(key, value)
        return True

    async def setbit(self, key: str, offset: int, value: bool) -> bool:
        """Set or clear the bit at ``offset``; returns the previous bit."""
        return bool(await self._redis.setbit(key, offset, 1 if value else 0))

    @returns_on_error(False)
    async def setex(self, key: str, value: Any, time: int) -> bool:
        """
        Set ``key`` with a time to live in seconds.

        A ``time`` of zero or less stores the value without expiry.
        """
        if time > 0:
            await self._redis.setex(key, time, value)
        else:
            await self._redis.set(key, value)
        return True

    async def setnx(self, key: str, value: Any) -> bool:
        """Set ``key`` only if it does not exist."""
        return bool(await self._redis.setnx(key, value))

    @returns_on_error(False)
    async def setrange(self, key: str, value: Any, offset: int) -> bool:
        """Overwrite part of the string at ``key`` starting at ``offset``."""
        await self._redis.setrange(key, offset, value)
        return True

    async def strlen(self, key: str) -> int:
        return await self._redis.strlen(key)
