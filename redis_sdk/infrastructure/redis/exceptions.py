"""
Redis Infrastructure Exceptions

Domain-specific exceptions for Redis operations.
Original errors are preserved through exception chaining.
"""

from typing import Optional, Any, Dict


class RedisException(Exception):
    """Base exception for Redis-related errors.

    All errors raised by this package are this class or its subclasses.
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        original_error: Optional[Exception] = None,
    ):
        self.message = message
        self.error_code = error_code or "REDIS_ERROR"
        self.details = details or {}
        if original_error:
            self.details.setdefault("original_error", str(original_error))
            self.details.setdefault(
                "original_error_type", type(original_error).__name__
            )
        super().__init__(self.message)
        if original_error:
            self.__cause__ = original_error


class RedisConnectionException(RedisException):
    """Raised when Redis connection fails or is lost."""

    def __init__(
        self,
        message: str = "Redis connection failed",
        host: Optional[str] = None,
        port: Optional[int] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if host:
            details["host"] = host
        if port:
            details["port"] = port

        super().__init__(
            message=message,
            error_code="REDIS_CONNECTION_ERROR",
            details=details,
            original_error=original_error,
        )


class RedisAuthenticationException(RedisException):
    """Raised when Redis authentication fails."""

    def __init__(
        self,
        message: str = "Redis authentication failed",
        username: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if username:
            details["username"] = username

        super().__init__(
            message=message,
            error_code="REDIS_AUTH_ERROR",
            details=details,
            original_error=original_error,
        )


class RedisOperationTimeoutException(RedisException):
    """Raised when Redis operation times out."""

    def __init__(
        self, operation: str, timeout_seconds: float, key: Optional[str] = None
    ):
        details = {"operation": operation, "timeout_seconds": timeout_seconds}
        if key:
            details["key"] = key

        super().__init__(
            message=f"Redis operation '{operation}' timed out after {timeout_seconds}s",
            error_code="REDIS_TIMEOUT_ERROR",
            details=details,
        )


class RedisConfigurationException(RedisException):
    """Raised when Redis configuration is invalid."""

    def __init__(
        self,
        message: str,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if config_key:
            details["config_key"] = config_key
        if config_value is not None:
            details["config_value"] = str(config_value)

        super().__init__(
            message=message,
            error_code="REDIS_CONFIGURATION_ERROR",
            details=details,
            original_error=original_error,
        )


class RedisSerializationException(RedisException):
    """Raised when a value cannot be converted to or from its wire form."""

    def __init__(
        self,
        message: str,
        target_type: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if target_type:
            details["target_type"] = target_type

        super().__init__(
            message=message,
            error_code="REDIS_SERIALIZATION_ERROR",
            details=details,
            original_error=original_error,
        )


class RedisListenerException(RedisException):
    """Raised when the pub/sub listener container is misused or fails."""

    def __init__(
        self,
        message: str,
        topic: Optional[str] = None,
        original_error: Optional[Exception] = None,
    ):
        details = {}
        if topic:
            details["topic"] = topic

        super().__init__(
            message=message,
            error_code="REDIS_LISTENER_ERROR",
            details=details,
            original_error=original_error,
        )
