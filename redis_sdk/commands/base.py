"""
Shared plumbing for the command facade.

Holds the wrapped client and the decorator that turns Redis errors into a
fixed return value for the commands that report failure as a value.
"""

import logging
from functools import wraps
from typing import Any, Callable, Iterable, List, Optional, TypeVar, Union

from redis.asyncio import Redis
from redis.exceptions import RedisError

logger = logging.getLogger(__name__)

T = TypeVar("T")

KeyOrKeys = Union[str, Iterable[str]]

# Only store-side failures are converted; programming errors propagate.
CONVERTED_ERRORS = (RedisError,)


def returns_on_error(default: Any):
    """
    Decorator converting Redis errors into ``default``.

    Args:
        default: Value returned when the wrapped command fails

    Returns:
        Decorated coroutine function
    """

    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        @wraps(func)
        async def wrapper(self, *args, **kwargs) -> T:
            try:
                return await func(self, *args, **kwargs)
            except CONVERTED_ERRORS as e:
                logger.warning(
                    f"Redis command '{func.__name__}' failed: {e}",
                    extra={
                        "command": func.__name__,
                        "error_type": type(e).__name__,
                    },
                    exc_info=True,
                )
                return default

        wrapper.error_default = default  # type: ignore
        return wrapper

    return decorator


def as_key_list(key: str, other_keys: KeyOrKeys) -> List[str]:
    """Combine ``key`` with one or more other keys into a flat list."""
    if isinstance(other_keys, (str, bytes)):
        return [key, other_keys]
    return [key, *other_keys]


class CommandsBase:
    """Base class holding the wrapped redis-py client."""

    def __init__(self, redis: Redis):
        if redis is None:
            raise ValueError("redis client is required")
        self._redis = redis

    @property
    def client(self) -> Redis:
        """The underlying redis-py client."""
        return self._redis

    async def _expire_if_positive(self, key: str, time: Optional[int]) -> None:
        if time is not None and time > 0:
            await self._redis.expire(key, time)
