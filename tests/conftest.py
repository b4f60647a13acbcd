"""
Main pytest configuration for redis_sdk tests.

Test settings are forced through the environment before any package module
is imported. The Redis client is always a mock; no server is needed.
"""

import os
import asyncio
import pytest
from unittest.mock import AsyncMock, MagicMock

# Set test environment variables before importing package modules
os.environ["ENVIRONMENT"] = "test"
os.environ["REDIS_URL"] = "redis://localhost:6379/15"
os.environ["REDIS_TRACING_ENABLED"] = "false"
os.environ["LOG_LEVEL"] = "DEBUG"

from redis_sdk.commands import RedisCommands


@pytest.fixture
def mock_redis():
    """Mock redis.asyncio.Redis client."""
    redis = AsyncMock()
    pubsub = AsyncMock()

    async def get_message(**kwargs):
        await asyncio.sleep(0.01)
        return None

    pubsub.get_message.side_effect = get_message
    redis.pubsub = MagicMock(return_value=pubsub)
    return redis


@pytest.fixture
def mock_pubsub(mock_redis):
    """Pub/sub object returned by ``mock_redis.pubsub()``."""
    return mock_redis.pubsub.return_value


@pytest.fixture
def commands(mock_redis):
    """Command facade wrapping the mock client."""
    return RedisCommands(mock_redis)


def pytest_collection_modifyitems(config, items):
    """Add markers based on test file location."""
    for item in items:
        if "commands" in item.nodeid or "infrastructure" in item.nodeid:
            item.add_marker(pytest.mark.redis)
        if "pubsub" in item.nodeid:
            item.add_marker(pytest.mark.pubsub)
