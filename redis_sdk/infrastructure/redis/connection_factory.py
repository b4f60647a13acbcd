"""
Redis Connection Factory

Connection management for Redis.
Provides a shared connection pool, health checks and instrumentation.
"""

import asyncio
import logging
import time
from typing import Dict, Any, Optional
from contextlib import asynccontextmanager
from urllib.parse import urlparse

from redis.asyncio import ConnectionPool, Redis
from redis.exceptions import (
    ConnectionError as RedisConnectionError,
    AuthenticationError as RedisAuthError,
    TimeoutError as RedisTimeoutError,
)

from opentelemetry.instrumentation.redis import RedisInstrumentor

from ...core.config import Settings, get_settings
from .exceptions import (
    RedisConnectionException,
    RedisAuthenticationException,
    RedisConfigurationException,
    RedisOperationTimeoutException,
)

logger = logging.getLogger(__name__)


class RedisConnectionFactory:
    """
    Factory for creating and managing Redis connections.

    One connection pool is built from settings on first use and shared by
    every client handed out by the factory.
    """

    def __init__(self, settings: Optional[Settings] = None):
        self._settings = settings
        self._pool: Optional[ConnectionPool] = None
        self._initialized = False
        self._lock = asyncio.Lock()

    @property
    def settings(self) -> Settings:
        if self._settings is None:
            self._settings = get_settings()
        return self._settings

    @property
    def is_initialized(self) -> bool:
        return self._initialized

    def _connection_kwargs(self) -> Dict[str, Any]:
        s = self.settings
        # redis-py's retry_on_timeout provides basic retry for timeout errors
        return {
            "encoding": "utf-8",
            "decode_responses": s.REDIS_DECODE_RESPONSES,
            "socket_connect_timeout": s.REDIS_CONNECTION_TIMEOUT,
            "socket_timeout": s.REDIS_OPERATION_TIMEOUT,
            "retry_on_timeout": True,
            "health_check_interval": s.REDIS_HEALTH_CHECK_INTERVAL,
            "max_connections": s.REDIS_MAX_CONNECTIONS,
        }

    def _enable_instrumentation(self) -> None:
        if not self.settings.REDIS_TRACING_ENABLED:
            return
        instrumentor = RedisInstrumentor()
        if instrumentor.is_instrumented_by_opentelemetry:
            return
        try:
            instrumentor.instrument()
            logger.info("Redis OpenTelemetry instrumentation enabled")
        except Exception as e:
            logger.warning(f"Failed to enable Redis OpenTelemetry instrumentation: {e}")

    async def initialize(self) -> None:
        """Create the connection pool and verify it with PING."""
        if self._initialized:
            return

        async with self._lock:
            if self._initialized:
                return

            redis_url = self.settings.REDIS_URL
            connection_kwargs = self._connection_kwargs()

            try:
                pool = ConnectionPool.from_url(redis_url, **connection_kwargs)
            except ValueError as e:
                raise RedisConfigurationException(
                    message=f"Invalid Redis URL: {e}",
                    config_key="REDIS_URL",
                    config_value=redis_url,
                    original_error=e,
                )

            self._enable_instrumentation()
            await self._test_connection(pool)

            self._pool = pool
            self._initialized = True

            parsed_url = urlparse(redis_url)
            logger.info(
                "Redis connection factory initialized",
                extra={
                    "host": parsed_url.hostname,
                    "port": parsed_url.port,
                    "max_connections": connection_kwargs["max_connections"],
                },
            )

    async def _test_connection(self, pool: ConnectionPool) -> None:
        """Test connection pool with PING."""
        parsed_url = urlparse(self.settings.REDIS_URL)
        try:
            redis_client = Redis(connection_pool=pool)
            await redis_client.ping()
            logger.debug("Redis connection test successful")
        except RedisAuthError as e:
            await pool.disconnect()
            raise RedisAuthenticationException(
                message="Redis authentication failed during initialization",
                username=parsed_url.username,
                original_error=e,
            )
        except RedisTimeoutError as e:
            await pool.disconnect()
            raise RedisOperationTimeoutException(
                operation="PING",
                timeout_seconds=self.settings.REDIS_CONNECTION_TIMEOUT,
            ) from e
        except (RedisConnectionError, OSError) as e:
            await pool.disconnect()
            raise RedisConnectionException(
                message="Redis connection test failed",
                host=parsed_url.hostname,
                port=parsed_url.port,
                original_error=e,
            )

    async def get_client(self) -> Redis:
        """
        Get a Redis client bound to the shared pool.

        Returns:
            Redis client instance

        Raises:
            RedisConnectionException: If the pool cannot connect
            RedisAuthenticationException: If credentials are rejected
            RedisConfigurationException: If REDIS_URL is invalid
        """
        await self.initialize()
        return Redis(connection_pool=self._pool)

    @asynccontextmanager
    async def connection(self):
        """Yield a pooled Redis client and release it on exit."""
        redis_client = await self.get_client()
        try:
            yield redis_client
        except (RedisConnectionError, RedisAuthError) as e:
            logger.error(f"Redis connection error: {e}")
            raise RedisConnectionException(
                message=f"Redis connection failed: {str(e)}", original_error=e
            )
        finally:
            await redis_client.aclose()

    def _pool_info(self) -> Dict[str, Any]:
        pool = self._pool
        if pool is None:
            return {}
        return {
            "max_connections": pool.max_connections,
            "created_connections": getattr(pool, "_created_connections", 0),
            "available_connections": len(getattr(pool, "_available_connections", [])),
            "in_use_connections": len(getattr(pool, "_in_use_connections", [])),
        }

    async def health_check(self) -> Dict[str, Any]:
        """
        Perform health check on the Redis pool.

        Returns:
            Health check results with ping latency and pool numbers
        """
        health_status = {
            "status": "unhealthy",
            "timestamp": time.time(),
            "pool": {},
            "default_connection": None,
        }

        if not self._initialized:
            health_status["error"] = "Redis connection factory not initialized"
            return health_status

        try:
            redis_client = Redis(connection_pool=self._pool)
            start_time = time.time()
            await redis_client.ping()
            response_time = time.time() - start_time

            health_status["default_connection"] = {
                "status": "healthy",
                "response_time_ms": round(response_time * 1000, 2),
            }
            health_status["status"] = "healthy"
            health_status["pool"] = self._pool_info()

        except (RedisConnectionError, RedisTimeoutError, OSError) as e:
            health_status["error"] = str(e)
            logger.error(f"Redis health check failed: {e}")

        return health_status

    async def close(self) -> None:
        """Close the connection pool."""
        async with self._lock:
            if self._pool is not None:
                try:
                    await self._pool.disconnect()
                except (RedisConnectionError, OSError) as e:
                    logger.warning(f"Error closing Redis pool: {e}")
            self._pool = None
            self._initialized = False

            logger.info("Redis connection factory closed")

    def get_metrics(self) -> Dict[str, Any]:
        """Get connection factory metrics."""
        return {
            "initialized": self._initialized,
            "pool": self._pool_info(),
        }


# Global connection factory instance
redis_connection_factory = RedisConnectionFactory()
