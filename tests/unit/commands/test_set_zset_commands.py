"""
Unit tests for set and sorted set commands.
"""

import pytest
from unittest.mock import AsyncMock

from redis.exceptions import ResponseError

from redis_sdk.commands import RedisCommands
from redis_sdk.commands.base import as_key_list, returns_on_error
from redis_sdk.infrastructure.redis.exceptions import RedisSerializationException


class TestSetCommands:
    """Test SetCommandsMixin."""

    @pytest.mark.asyncio
    async def test_sdiff_accepts_single_key(self, commands, mock_redis):
        mock_redis.sdiff.return_value = {"a"}

        assert await commands.sdiff("s1", "s2") == {"a"}
        mock_redis.sdiff.assert_called_once_with(["s1", "s2"])

    @pytest.mark.asyncio
    async def test_sinter_accepts_key_collection(self, commands, mock_redis):
        await commands.sinter("s1", ["s2", "s3"])

        mock_redis.sinter.assert_called_once_with(["s1", "s2", "s3"])

    @pytest.mark.asyncio
    async def test_store_variants_put_destination_first(self, commands, mock_redis):
        await commands.sdiffstore("s1", "s2", "dest")
        await commands.sunionstore("s1", ("s2",), "dest")

        mock_redis.sdiffstore.assert_called_once_with("dest", ["s1", "s2"])
        mock_redis.sunionstore.assert_called_once_with("dest", ["s1", "s2"])

    @pytest.mark.asyncio
    async def test_smove_argument_order(self, commands, mock_redis):
        mock_redis.smove.return_value = True

        assert await commands.smove("src", "member", "dst") is True
        mock_redis.smove.assert_called_once_with("src", "dst", "member")

    @pytest.mark.asyncio
    async def test_random_members_allow_repeats(self, commands, mock_redis):
        """Test random_members uses a negative count so members may repeat."""
        mock_redis.srandmember.return_value = ["a", "a", "b"]

        assert await commands.random_members("s", 3) == ["a", "a", "b"]
        mock_redis.srandmember.assert_called_once_with("s", -3)

    @pytest.mark.asyncio
    async def test_distinct_random_members(self, commands, mock_redis):
        mock_redis.srandmember.return_value = ["a", "b"]

        assert await commands.distinct_random_members("s", 2) == {"a", "b"}
        mock_redis.srandmember.assert_called_once_with("s", 2)

    @pytest.mark.asyncio
    async def test_random_members_rejects_negative_count(self, commands):
        with pytest.raises(ValueError):
            await commands.random_members("s", -1)

    @pytest.mark.asyncio
    async def test_sadd_with_ttl(self, commands, mock_redis):
        mock_redis.sadd.return_value = 2

        assert await commands.sadd_with_ttl("s", 120, "a", "b") == 2
        mock_redis.sadd.assert_called_once_with("s", "a", "b")
        mock_redis.expire.assert_called_once_with("s", 120)

    @pytest.mark.asyncio
    async def test_sadd_with_ttl_error_returns_zero(self, commands, mock_redis):
        mock_redis.sadd.side_effect = ResponseError("WRONGTYPE")

        assert await commands.sadd_with_ttl("s", 120, "a") == 0

    @pytest.mark.asyncio
    async def test_safe_set_variants(self, commands, mock_redis):
        error = ResponseError("WRONGTYPE")
        mock_redis.smembers.side_effect = error
        mock_redis.sismember.side_effect = error
        mock_redis.scard.side_effect = error
        mock_redis.srem.side_effect = error

        assert await commands.smembers_safe("s") is None
        assert await commands.sismember_safe("s", "a") is False
        assert await commands.scard_safe("s") == 0
        assert await commands.srem_safe("s", "a") == 0

    @pytest.mark.asyncio
    async def test_spop_with_count(self, commands, mock_redis):
        mock_redis.spop.return_value = ["a", "b"]

        assert await commands.spop("s", 2) == ["a", "b"]
        mock_redis.spop.assert_called_once_with("s", 2)


class TestSortedSetCommands:
    """Test SortedSetCommandsMixin."""

    @pytest.mark.asyncio
    async def test_zadd_single_member(self, commands, mock_redis):
        mock_redis.zadd.return_value = 1

        assert await commands.zadd("z", "alice", 3.5) is True
        mock_redis.zadd.assert_called_once_with("z", {"alice": 3.5})

    @pytest.mark.asyncio
    async def test_zadd_existing_member_returns_false(self, commands, mock_redis):
        mock_redis.zadd.return_value = 0

        assert await commands.zadd("z", "alice", 4.0) is False

    @pytest.mark.asyncio
    async def test_zadd_many(self, commands, mock_redis):
        mock_redis.zadd.return_value = 2

        assert await commands.zadd_many("z", {"a": 1, "b": 2}) == 2
        assert await commands.zadd_many("z", {}) == 0
        mock_redis.zadd.assert_called_once_with("z", {"a": 1, "b": 2})

    @pytest.mark.asyncio
    async def test_zincrby_argument_order(self, commands, mock_redis):
        mock_redis.zincrby.return_value = 5.0

        assert await commands.zincrby("z", "alice", 1.5) == 5.0
        mock_redis.zincrby.assert_called_once_with("z", 1.5, "alice")

    @pytest.mark.asyncio
    async def test_zrevrangebyscore_swaps_bounds(self, commands, mock_redis):
        """Test min/max are sent in ZREVRANGEBYSCORE order (max first)."""
        await commands.zrevrangebyscore("z", 1, 10, offset=0, count=5)

        mock_redis.zrevrangebyscore.assert_called_once_with(
            "z", 10, 1, start=0, num=5, withscores=False
        )

    @pytest.mark.asyncio
    async def test_zrevrangebyscore_requires_offset_and_count(self, commands):
        with pytest.raises(ValueError):
            await commands.zrevrangebyscore("z", 1, 10, offset=2)

    @pytest.mark.asyncio
    async def test_zrange_with_scores(self, commands, mock_redis):
        mock_redis.zrange.return_value = [("a", 1.0)]

        assert await commands.zrange("z", 0, -1, withscores=True) == [("a", 1.0)]
        mock_redis.zrange.assert_called_once_with("z", 0, -1, withscores=True)

    @pytest.mark.asyncio
    async def test_zunionstore_with_weights(self, commands, mock_redis):
        mock_redis.zunionstore.return_value = 4

        result = await commands.zunionstore(
            "z1", ["z2"], "dest", aggregate="max", weights=[1, 2]
        )

        assert result == 4
        mock_redis.zunionstore.assert_called_once_with(
            "dest", {"z1": 1, "z2": 2}, aggregate="MAX"
        )

    @pytest.mark.asyncio
    async def test_zinterstore_without_options(self, commands, mock_redis):
        await commands.zinterstore("z1", "z2", "dest")

        mock_redis.zinterstore.assert_called_once_with(
            "dest", ["z1", "z2"], aggregate=None
        )

    @pytest.mark.asyncio
    async def test_weights_must_match_keys(self, commands, mock_redis):
        with pytest.raises(ValueError):
            await commands.zunionstore("z1", ["z2", "z3"], "dest", weights=[1])
        mock_redis.zunionstore.assert_not_called()

    @pytest.mark.asyncio
    async def test_unknown_aggregate(self, commands):
        with pytest.raises(ValueError):
            await commands.zinterstore("z1", "z2", "dest", aggregate="AVG")

    @pytest.mark.asyncio
    async def test_score_and_rank(self, commands, mock_redis):
        mock_redis.zscore.return_value = 2.0
        mock_redis.zrevrank.return_value = None

        assert await commands.zscore("z", "a") == 2.0
        assert await commands.zrevrank("z", "missing") is None


class TestCommandHelpers:
    """Test shared helpers of the command facade."""

    def test_as_key_list(self):
        assert as_key_list("a", "b") == ["a", "b"]
        assert as_key_list("a", ["b", "c"]) == ["a", "b", "c"]
        assert as_key_list("a", iter(("b",))) == ["a", "b"]

    @pytest.mark.asyncio
    async def test_returns_on_error_keeps_metadata(self):
        class Dummy:
            @returns_on_error("fallback")
            async def failing(self):
                """Always fails."""
                raise ResponseError("boom")

        assert Dummy.failing.__name__ == "failing"
        assert Dummy.failing.error_default == "fallback"
        assert await Dummy().failing() == "fallback"

    @pytest.mark.asyncio
    async def test_returns_on_error_only_converts_redis_errors(self):
        class Dummy:
            @returns_on_error(False)
            async def failing(self):
                raise RedisSerializationException("not a store failure")

        with pytest.raises(RedisSerializationException):
            await Dummy().failing()

    def test_client_required(self):
        with pytest.raises(ValueError):
            RedisCommands(None)

    @pytest.mark.asyncio
    async def test_from_factory(self, mock_redis):
        factory = AsyncMock()
        factory.get_client.return_value = mock_redis

        commands = await RedisCommands.from_factory(factory)

        assert commands.client is mock_redis
        factory.get_client.assert_awaited_once()
