"""
JSON serializer for values published through Redis.

Pydantic models are written with their JSON aliases so payloads keep the
camelCase field names used by other producers on the same channels.
"""

import json
import logging
from typing import Any, Optional, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from .exceptions import RedisSerializationException

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


class JsonRedisSerializer:
    """Serialize objects to JSON strings and back."""

    encoding = "utf-8"

    def serialize(self, obj: Any) -> str:
        if isinstance(obj, BaseModel):
            return obj.model_dump_json(by_alias=True)
        try:
            return json.dumps(obj, ensure_ascii=False)
        except (TypeError, ValueError) as e:
            raise RedisSerializationException(
                message=f"Cannot serialize {type(obj).__name__} to JSON",
                target_type=type(obj).__name__,
                original_error=e,
            )

    def deserialize(
        self,
        data: Optional[Union[str, bytes]],
        model: Optional[Type[M]] = None,
    ) -> Any:
        """
        Decode a JSON payload.

        Args:
            data: Raw payload as received from Redis
            model: Optional pydantic model to validate the payload into

        Returns:
            Model instance when ``model`` is given, plain JSON data otherwise,
            ``None`` for an empty payload

        Raises:
            RedisSerializationException: If the payload is not valid JSON or
                does not match ``model``
        """
        if data is None or data == b"" or data == "":
            return None

        if isinstance(data, bytes):
            try:
                data = data.decode(self.encoding)
            except UnicodeDecodeError as e:
                raise RedisSerializationException(
                    message="Payload is not valid UTF-8", original_error=e
                )

        try:
            if model is not None:
                return model.model_validate_json(data)
            return json.loads(data)
        except (ValidationError, ValueError) as e:
            target = model.__name__ if model is not None else "json"
            logger.debug(f"Failed to deserialize payload into {target}: {e}")
            raise RedisSerializationException(
                message=f"Cannot deserialize payload into {target}",
                target_type=target,
                original_error=e,
            )


# Default serializer instance
json_serializer = JsonRedisSerializer()
