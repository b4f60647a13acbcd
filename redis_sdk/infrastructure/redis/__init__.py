"""
Redis Infrastructure Module

Connection management, serialization and exception types shared by the
command facade and the pub/sub services.

This module provides:
- RedisConnectionFactory: Pooled client creation with health checks
- JsonRedisSerializer: JSON encoding for published messages
- Exception hierarchy rooted at RedisException
"""

from .connection_factory import RedisConnectionFactory, redis_connection_factory
from .serializer import JsonRedisSerializer, json_serializer
from .exceptions import (
    RedisException,
    RedisConnectionException,
    RedisAuthenticationException,
    RedisOperationTimeoutException,
    RedisConfigurationException,
    RedisSerializationException,
    RedisListenerException,
)

__all__ = [
    # Connection management
    "RedisConnectionFactory",
    "redis_connection_factory",
    # Serialization
    "JsonRedisSerializer",
    "json_serializer",
    # Exceptions
    "RedisException",
    "RedisConnectionException",
    "RedisAuthenticationException",
    "RedisOperationTimeoutException",
    "RedisConfigurationException",
    "RedisSerializationException",
    "RedisListenerException",
]
