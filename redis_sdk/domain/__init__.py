"""Domain models."""

from .messages import RedisMessage, UserMessage, GoodsMessage

__all__ = ["RedisMessage", "UserMessage", "GoodsMessage"]
