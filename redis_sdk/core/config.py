"""
Redis SDK Configuration

Settings read from the environment and an optional .env file. Nothing is
loaded at import time; call get_settings() when settings are needed.
Implements secure defaults and validation for all settings.
"""

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator
from functools import lru_cache
from urllib.parse import urlparse


class Settings(BaseSettings):
    """SDK settings with validation and secure defaults."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=True, extra="ignore"
    )

    # Environment settings
    ENVIRONMENT: str = Field(
        default="development", description="Application environment"
    )

    # Redis configuration
    REDIS_URL: str = Field(
        default="redis://localhost:6379/0", description="Redis connection URL"
    )
    REDIS_MAX_CONNECTIONS: int = Field(
        default=10, ge=1, le=50, description="Redis connection pool size"
    )
    REDIS_CONNECTION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Socket connect timeout in seconds"
    )
    REDIS_OPERATION_TIMEOUT: float = Field(
        default=5.0, gt=0, le=60, description="Socket read/write timeout in seconds"
    )
    REDIS_HEALTH_CHECK_INTERVAL: int = Field(
        default=30, ge=0, le=600, description="Idle connection health check interval"
    )
    REDIS_DECODE_RESPONSES: bool = Field(
        default=True, description="Decode replies to str instead of bytes"
    )
    REDIS_TRACING_ENABLED: bool = Field(
        default=True, description="Enable OpenTelemetry Redis instrumentation"
    )

    # Pub/sub configuration
    PUBSUB_USER_TOPIC: str = Field(
        default="user", min_length=1, description="Pattern topic for user messages"
    )
    PUBSUB_GOODS_TOPIC: str = Field(
        default="goods", min_length=1, description="Pattern topic for goods messages"
    )
    PUBSUB_POLL_TIMEOUT: float = Field(
        default=1.0, gt=0, le=30, description="Listener poll timeout in seconds"
    )

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")
    LOG_JSON: bool = Field(default=False, description="Render logs as JSON")

    @field_validator("REDIS_URL")
    @classmethod
    def validate_redis_url(cls, v):
        """Validate Redis URL scheme."""
        scheme = urlparse(v).scheme
        if scheme not in ("redis", "rediss", "unix"):
            raise ValueError("REDIS_URL must use redis://, rediss:// or unix://")
        return v

    @field_validator("ENVIRONMENT")
    @classmethod
    def validate_environment(cls, v):
        """Validate environment value."""
        allowed = ["development", "test", "staging", "production"]
        if v not in allowed:
            raise ValueError(f"ENVIRONMENT must be one of: {allowed}")
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v):
        """Validate log level."""
        allowed = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        if v.upper() not in allowed:
            raise ValueError(f"LOG_LEVEL must be one of: {allowed}")
        return v.upper()


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()

