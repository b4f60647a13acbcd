"""
Message Receivers

Handler objects invoked by :class:`MessageListenerAdapter` for the user and
goods topics.
"""

from abc import ABC, abstractmethod
from typing import Any, Optional

import structlog
from pydantic import BaseModel

logger = structlog.get_logger()

# Never written to logs
SENSITIVE_FIELDS = {"password"}


def _loggable(message: Any) -> Any:
    if isinstance(message, BaseModel):
        return message.model_dump(mode="json", by_alias=True, exclude=SENSITIVE_FIELDS)
    if isinstance(message, dict):
        return {k: v for k, v in message.items() if k not in SENSITIVE_FIELDS}
    return message


class AbstractReceiver(ABC):
    """Base class for topic receivers."""

    def __init__(self) -> None:
        self.last_message: Optional[Any] = None
        self.received_count = 0

    @abstractmethod
    def receive_message(self, message: Any) -> None:
        """Handle one decoded message."""

    def _remember(self, message: Any) -> None:
        self.last_message = message
        self.received_count += 1


class UserReceiver(AbstractReceiver):
    """Receiver for user messages."""

    def receive_message(self, message: Any) -> None:
        self._remember(message)
        logger.info("Received user message", message=_loggable(message))


class GoodsReceiver(AbstractReceiver):
    """Receiver for goods messages."""

    def receive_message(self, message: Any) -> None:
        self._remember(message)
        logger.info("Received goods message", message=_loggable(message))
