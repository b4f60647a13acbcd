"""
Pub/Sub Message Models

Payloads exchanged on the pub/sub channels. JSON uses camelCase field names
(``msgId``, ``createStamp``, ...); snake_case names are accepted on input.
"""

import time
from typing import Optional
from uuid import uuid4

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def _now_millis() -> int:
    return int(time.time() * 1000)


class RedisMessage(BaseModel):
    """Base message carrying an id and a creation timestamp."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    msg_id: str = Field(default_factory=lambda: uuid4().hex)
    create_stamp: int = Field(
        default_factory=_now_millis, description="Creation time, epoch millis"
    )


class UserMessage(RedisMessage):
    """Message published on the user topic."""

    user_id: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = Field(default=None, repr=False)


class GoodsMessage(RedisMessage):
    """Message published on the goods topic."""

    goods_type: Optional[str] = None
    number: Optional[str] = None
