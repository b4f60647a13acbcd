"""Set commands."""

from typing import Any, List, Optional, Set

from .base import CommandsBase, KeyOrKeys, as_key_list, returns_on_error


class SetCommandsMixin(CommandsBase):
    """Unordered set commands (SADD, SMEMBERS, SINTER, ...)."""

    async def sadd(self, key: str, *values: Any) -> int:
        """Add ``values``; returns how many were not already members."""
        if not values:
            return 0
        return await self._redis.sadd(key, *values)

    @returns_on_error(0)
    async def sadd_with_ttl(self, key: str, time: int, *values: Any) -> int:
        """
        Add ``values`` and expire the set after ``time`` seconds if positive.

        Returns:
            Number of members added, 0 if the store rejected the command
        """
        if not values:
            return 0
        count = await self._redis.sadd(key, *values)
        await self._expire_if_positive(key, time)
        return count

    async def scard(self, key: str) -> int:
        return await self._redis.scard(key)

    async def sdiff(self, key: str, other_keys: KeyOrKeys) -> Set[Any]:
        """Members of ``key`` not present in any of ``other_keys``."""
        return await self._redis.sdiff(as_key_list(key, other_keys))

    async def sdiffstore(self, key: str, other_keys: KeyOrKeys, dest_key: str) -> int:
        return await self._redis.sdiffstore(dest_key, as_key_list(key, other_keys))

    async def sinter(self, key: str, other_keys: KeyOrKeys) -> Set[Any]:
        return await self._redis.sinter(as_key_list(key, other_keys))

    async def sinterstore(self, key: str, other_keys: KeyOrKeys, dest_key: str) -> int:
        return await self._redis.sinterstore(dest_key, as_key_list(key, other_keys))

    async def sismember(self, key: str, value: Any) -> bool:
        return bool(await self._redis.sismember(key, value))

    async def smembers(self, key: str) -> Set[Any]:
        return await self._redis.smembers(key)

    async def smove(self, key: str, value: Any, dest_key: str) -> bool:
        """Move ``value`` from ``key`` to ``dest_key``."""
        return bool(await self._redis.smove(key, dest_key, value))

    async def spop(self, key: str, count: Optional[int] = None) -> Any:
        """Remove and return one random member, or a list of ``count`` members."""
        return await self._redis.spop(key, count)

    async def random_member(self, key: str) -> Optional[Any]:
        return await self._redis.srandmember(key)

    async def distinct_random_members(self, key: str, count: int) -> Set[Any]:
        """Up to ``count`` distinct random members."""
        if count < 0:
            raise ValueError("count must not be negative")
        return set(await self._redis.srandmember(key, count))

    async def random_members(self, key: str, count: int) -> List[Any]:
        """Exactly ``count`` random members, possibly repeated."""
        if count < 0:
            raise ValueError("count must not be negative")
        if count == 0:
            return []
        return await self._redis.srandmember(key, -count)

    async def srem(self, key: str, *values: Any) -> int:
        if not values:
            return 0
        return await self._redis.srem(key, *values)

    async def sunion(self, key: str, other_keys: KeyOrKeys) -> Set[Any]:
        return await self._redis.sunion(as_key_list(key, other_keys))

    async def sunionstore(self, key: str, other_keys: KeyOrKeys, dest_key: str) -> int:
        return await self._redis.sunionstore(dest_key, as_key_list(key, other_keys))

    @returns_on_error(None)
    async def smembers_safe(self, key: str) -> Optional[Set[Any]]:
        """:meth:`smembers` returning None instead of raising."""
        return await self._redis.smembers(key)

    @returns_on_error(False)
    async def sismember_safe(self, key: str, value: Any) -> bool:
        return bool(await self._redis.sismember(key, value))

    @returns_on_error(0)
    async def scard_safe(self, key: str) -> int:
        return await self._redis.scard(key)

    @returns_on_error(0)
    async def srem_safe(self, key: str, *values: Any) -> int:
        if not values:
            return 0
        return await self._redis.srem(key, *values)
