"""
Unit tests for hash and list commands.
"""

import pytest

from redis.exceptions import ResponseError, TimeoutError as RedisTimeoutError


class TestHashCommands:
    """Test HashCommandsMixin."""

    @pytest.mark.asyncio
    async def test_hset_returns_true(self, commands, mock_redis):
        mock_redis.hset.return_value = 0

        assert await commands.hset("h", "f", "v") is True
        mock_redis.hset.assert_called_once_with("h", "f", "v")

    @pytest.mark.asyncio
    async def test_hset_error_returns_false(self, commands, mock_redis):
        mock_redis.hset.side_effect = ResponseError("WRONGTYPE")

        assert await commands.hset("h", "f", "v") is False

    @pytest.mark.asyncio
    async def test_hmset_uses_mapping(self, commands, mock_redis):
        assert await commands.hmset("h", {"a": 1, "b": 2}) is True

        mock_redis.hset.assert_called_once_with("h", mapping={"a": 1, "b": 2})

    @pytest.mark.asyncio
    async def test_hset_with_ttl_expires_hash(self, commands, mock_redis):
        assert await commands.hset_with_ttl("h", "f", "v", 30) is True

        mock_redis.hset.assert_called_once_with("h", "f", "v")
        mock_redis.expire.assert_called_once_with("h", 30)

    @pytest.mark.asyncio
    async def test_hset_with_zero_ttl_skips_expire(self, commands, mock_redis):
        assert await commands.hset_with_ttl("h", "f", "v", 0) is True

        mock_redis.expire.assert_not_called()

    @pytest.mark.asyncio
    async def test_hsetnx_and_hexists_return_bool(self, commands, mock_redis):
        mock_redis.hsetnx.return_value = 1
        mock_redis.hexists.return_value = 0

        assert await commands.hsetnx("h", "f", "v") is True
        assert await commands.hexists("h", "f") is False

    @pytest.mark.asyncio
    async def test_hincrby_variants(self, commands, mock_redis):
        mock_redis.hincrby.return_value = 7
        mock_redis.hincrbyfloat.return_value = 1.25

        assert await commands.hincrby("h", "count", 2) == 7
        assert await commands.hincrbyfloat("h", "price", 0.25) == 1.25

        mock_redis.hincrby.assert_called_once_with("h", "count", 2)
        mock_redis.hincrbyfloat.assert_called_once_with("h", "price", 0.25)

    @pytest.mark.asyncio
    async def test_hdel_without_fields(self, commands, mock_redis):
        assert await commands.hdel("h") == 0
        mock_redis.hdel.assert_not_called()

    @pytest.mark.asyncio
    async def test_hmget_forwards_field_list(self, commands, mock_redis):
        mock_redis.hmget.return_value = ["1", None]

        assert await commands.hmget("h", ("a", "b")) == ["1", None]
        mock_redis.hmget.assert_called_once_with("h", ["a", "b"])


class TestListCommands:
    """Test ListCommandsMixin."""

    @pytest.mark.asyncio
    async def test_blpop_returns_value_only(self, commands, mock_redis):
        """Test BLPOP drops the key from the (key, value) reply."""
        mock_redis.blpop.return_value = ["queue", "job-1"]

        assert await commands.blpop("queue", timeout=2) == "job-1"
        mock_redis.blpop.assert_called_once_with(["queue"], timeout=2)

    @pytest.mark.asyncio
    async def test_brpop_timeout_returns_none(self, commands, mock_redis):
        mock_redis.brpop.return_value = None

        assert await commands.brpop("queue", timeout=1) is None

    @pytest.mark.asyncio
    async def test_linsert_before_pivot(self, commands, mock_redis):
        mock_redis.linsert.return_value = 3

        assert await commands.linsert("l", "pivot", "new") == 3
        mock_redis.linsert.assert_called_once_with("l", "BEFORE", "pivot", "new")

    @pytest.mark.asyncio
    async def test_lset_out_of_range_returns_false(self, commands, mock_redis):
        mock_redis.lset.side_effect = ResponseError("index out of range")

        assert await commands.lset("l", 99, "v") is False

    @pytest.mark.asyncio
    async def test_ltrim_returns_true(self, commands, mock_redis):
        assert await commands.ltrim("l", 0, 9) is True
        mock_redis.ltrim.assert_called_once_with("l", 0, 9)

    @pytest.mark.asyncio
    async def test_rpush_with_ttl(self, commands, mock_redis):
        assert await commands.rpush_with_ttl("l", "v", 60) is True

        mock_redis.rpush.assert_called_once_with("l", "v")
        mock_redis.expire.assert_called_once_with("l", 60)

    @pytest.mark.asyncio
    async def test_rpush_all_without_ttl(self, commands, mock_redis):
        assert await commands.rpush_all("l", ["a", "b"]) is True

        mock_redis.rpush.assert_called_once_with("l", "a", "b")
        mock_redis.expire.assert_not_called()

    @pytest.mark.asyncio
    async def test_rpush_all_empty_values(self, commands, mock_redis):
        assert await commands.rpush_all("l", [], time=10) is True

        mock_redis.rpush.assert_not_called()

    @pytest.mark.asyncio
    async def test_rpush_with_ttl_error(self, commands, mock_redis):
        mock_redis.rpush.side_effect = RedisTimeoutError("timed out")

        assert await commands.rpush_with_ttl("l", "v", 60) is False
        mock_redis.expire.assert_not_called()

    @pytest.mark.asyncio
    async def test_safe_variants_return_sentinels(self, commands, mock_redis):
        """Test the *_safe list commands map errors to None/0."""
        error = ResponseError("WRONGTYPE")
        mock_redis.lrange.side_effect = error
        mock_redis.llen.side_effect = error
        mock_redis.lindex.side_effect = error
        mock_redis.lrem.side_effect = error

        assert await commands.lrange_safe("l", 0, -1) is None
        assert await commands.llen_safe("l") == 0
        assert await commands.lindex_safe("l", 0) is None
        assert await commands.lrem_safe("l", 0, "v") == 0

    @pytest.mark.asyncio
    async def test_plain_variants_propagate(self, commands, mock_redis):
        mock_redis.lrange.side_effect = ResponseError("WRONGTYPE")

        with pytest.raises(ResponseError):
            await commands.lrange("l", 0, -1)

    @pytest.mark.asyncio
    async def test_push_and_pop_forwarding(self, commands, mock_redis):
        mock_redis.lpush.return_value = 2
        mock_redis.rpoplpush.return_value = "x"

        assert await commands.lpush("l", "a", "b") == 2
        assert await commands.rpoplpush("src", "dst") == "x"

        mock_redis.lpush.assert_called_once_with("l", "a", "b")
        mock_redis.rpoplpush.assert_called_once_with("src", "dst")
