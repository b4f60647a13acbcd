"""Sorted set commands."""

from typing import Any, List, Mapping, Optional, Sequence, Union

from .base import CommandsBase, KeyOrKeys, as_key_list

AGGREGATES = ("SUM", "MIN", "MAX")

Score = Union[float, str]


class SortedSetCommandsMixin(CommandsBase):
    """Sorted set commands (ZADD, ZRANGE, ZUNIONSTORE, ...)."""

    async def zadd(self, key: str, value: Any, score: float) -> bool:
        """Add ``value`` with ``score``; True if it was not a member before."""
        return bool(await self._redis.zadd(key, {value: score}))

    async def zadd_many(self, key: str, mapping: Mapping[Any, float]) -> int:
        """Add every ``member: score`` pair; returns the number of new members."""
        if not mapping:
            return 0
        return await self._redis.zadd(key, dict(mapping))

    async def zcard(self, key: str) -> int:
        return await self._redis.zcard(key)

    async def zcount(self, key: str, min: Score, max: Score) -> int:
        """Members with a score between ``min`` and ``max`` inclusive."""
        return await self._redis.zcount(key, min, max)

    async def zincrby(self, key: str, value: Any, delta: float) -> float:
        """Increment the score of ``value``; returns the new score."""
        return await self._redis.zincrby(key, delta, value)

    async def zrange(
        self, key: str, start: int, end: int, withscores: bool = False
    ) -> List[Any]:
        """Members by rank, lowest score first."""
        return await self._redis.zrange(key, start, end, withscores=withscores)

    async def zrangebyscore(
        self, key: str, min: Score, max: Score, withscores: bool = False
    ) -> List[Any]:
        return await self._redis.zrangebyscore(key, min, max, withscores=withscores)

    async def zrank(self, key: str, value: Any) -> Optional[int]:
        return await self._redis.zrank(key, value)

    async def zrem(self, key: str, *values: Any) -> int:
        if not values:
            return 0
        return await self._redis.zrem(key, *values)

    async def zremrangebyrank(self, key: str, start: int, end: int) -> int:
        return await self._redis.zremrangebyrank(key, start, end)

    async def zremrangebyscore(self, key: str, min: Score, max: Score) -> int:
        return await self._redis.zremrangebyscore(key, min, max)

    async def zrevrange(
        self, key: str, start: int, end: int, withscores: bool = False
    ) -> List[Any]:
        """Members by rank, highest score first."""
        return await self._redis.zrevrange(key, start, end, withscores=withscores)

    async def zrevrangebyscore(
        self,
        key: str,
        min: Score,
        max: Score,
        offset: Optional[int] = None,
        count: Optional[int] = None,
        withscores: bool = False,
    ) -> List[Any]:
        """
        Members with a score between ``min`` and ``max``, highest first.

        Args:
            key: Sorted set key
            min: Lowest score
            max: Highest score
            offset: Number of matching members to skip
            count: Maximum number of members to return
            withscores: Return ``(member, score)`` pairs

        Raises:
            ValueError: If only one of ``offset`` and ``count`` is given
        """
        if (offset is None) != (count is None):
            raise ValueError("offset and count must be given together")
        return await self._redis.zrevrangebyscore(
            key, max, min, start=offset, num=count, withscores=withscores
        )

    async def zrevrank(self, key: str, value: Any) -> Optional[int]:
        return await self._redis.zrevrank(key, value)

    async def zscore(self, key: str, value: Any) -> Optional[float]:
        return await self._redis.zscore(key, value)

    async def zunionstore(
        self,
        key: str,
        other_keys: KeyOrKeys,
        dest_key: str,
        aggregate: Optional[str] = None,
        weights: Optional[Sequence[float]] = None,
    ) -> int:
        """
        Store the union of ``key`` and ``other_keys`` in ``dest_key``.

        Args:
            key: First source key
            other_keys: One key or an iterable of keys
            dest_key: Destination key
            aggregate: SUM (default), MIN or MAX
            weights: One multiplication factor per source key

        Returns:
            Number of members in ``dest_key``
        """
        keys = self._weighted_keys(key, other_keys, weights)
        return await self._redis.zunionstore(
            dest_key, keys, aggregate=self._aggregate(aggregate)
        )

    async def zinterstore(
        self,
        key: str,
        other_keys: KeyOrKeys,
        dest_key: str,
        aggregate: Optional[str] = None,
        weights: Optional[Sequence[float]] = None,
    ) -> int:
        """Store the intersection of ``key`` and ``other_keys`` in ``dest_key``."""
        keys = self._weighted_keys(key, other_keys, weights)
        return await self._redis.zinterstore(
            dest_key, keys, aggregate=self._aggregate(aggregate)
        )

    @staticmethod
    def _aggregate(aggregate: Optional[str]) -> Optional[str]:
        if aggregate is None:
            return None
        aggregate = aggregate.upper()
        if aggregate not in AGGREGATES:
            raise ValueError(f"aggregate must be one of: {AGGREGATES}")
        return aggregate

    @staticmethod
    def _weighted_keys(
        key: str, other_keys: KeyOrKeys, weights: Optional[Sequence[float]]
    ) -> Union[List[str], dict]:
        keys = as_key_list(key, other_keys)
        if weights is None:
            return keys
        weights = list(weights)
        if len(weights) != len(keys):
            raise ValueError(
                f"expected {len(keys)} weights, one per source key, got {len(weights)}"
            )
        return dict(zip(keys, weights))
