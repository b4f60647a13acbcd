"""
Pub/Sub Listener Container

Subscribes to channel and pattern topics on one Redis pub/sub connection and
dispatches incoming messages to the listeners registered for each topic.
"""

import asyncio
import inspect
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, Union

import structlog
from opentelemetry import trace
from opentelemetry.trace import Status, StatusCode
from pydantic import BaseModel
from redis.asyncio import Redis
from redis.exceptions import RedisError

from ...infrastructure.redis.exceptions import RedisListenerException
from ...infrastructure.redis.serializer import JsonRedisSerializer, json_serializer

logger = structlog.get_logger()
tracer = trace.get_tracer(__name__)


def _decode(value: Union[str, bytes, None]) -> Optional[str]:
    if isinstance(value, bytes):
        return value.decode("utf-8")
    return value


@dataclass(frozen=True)
class PatternTopic:
    """Glob-style topic subscribed with PSUBSCRIBE."""

    pattern: str

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("pattern cannot be empty")

    @property
    def topic(self) -> str:
        return self.pattern


@dataclass(frozen=True)
class ChannelTopic:
    """Exact channel name subscribed with SUBSCRIBE."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise ValueError("channel name cannot be empty")

    @property
    def topic(self) -> str:
        return self.name


Topic = Union[PatternTopic, ChannelTopic]


@dataclass(frozen=True)
class Message:
    """A message received from Redis."""

    channel: str
    data: Any
    pattern: Optional[str] = None


class MessageListener(ABC):
    """Receives messages dispatched by the container."""

    @abstractmethod
    async def on_message(self, message: Message) -> None:
        """Handle one message."""


class MessageListenerAdapter(MessageListener):
    """
    Adapts a plain handler object to :class:`MessageListener`.

    The payload is decoded with the serializer (into ``message_type`` when
    given) and passed to ``delegate.<method_name>``. The handler may be a
    regular function or a coroutine function.
    """

    def __init__(
        self,
        delegate: Any,
        method_name: str = "receive_message",
        message_type: Optional[Type[BaseModel]] = None,
        serializer: Optional[JsonRedisSerializer] = None,
    ):
        handler = getattr(delegate, method_name, None)
        if not callable(handler):
            raise RedisListenerException(
                message=f"{type(delegate).__name__} has no callable '{method_name}'"
            )

        self.delegate = delegate
        self.method_name = method_name
        self.message_type = message_type
        self._handler = handler
        self._serializer = serializer or json_serializer

    async def on_message(self, message: Message) -> None:
        payload = self._serializer.deserialize(message.data, self.message_type)
        result = self._handler(payload)
        if inspect.isawaitable(result):
            await result

    def __repr__(self) -> str:
        return (
            f"MessageListenerAdapter({type(self.delegate).__name__}.{self.method_name})"
        )


class RedisMessageListenerContainer:
    """
    Container running a Redis pub/sub subscription in a background task.

    Listeners are registered per topic. A pattern message is routed by the
    pattern it matched, a channel message by its channel. A failing listener
    is logged and does not affect other listeners or the receive loop.
    """

    def __init__(self, redis: Redis, poll_timeout: float = 1.0):
        if redis is None:
            raise ValueError("redis client is required")
        if poll_timeout <= 0:
            raise ValueError("poll_timeout must be positive")

        self._redis = redis
        self.poll_timeout = poll_timeout
        self._listeners: Dict[Topic, List[MessageListener]] = {}
        self._pubsub = None
        self._task: Optional[asyncio.Task] = None
        self._lock = asyncio.Lock()

    @property
    def is_running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def topics(self) -> List[Topic]:
        return list(self._listeners)

    def listeners_for(self, topic: Topic) -> List[MessageListener]:
        return list(self._listeners.get(topic, ()))

    async def add_message_listener(
        self, listener: MessageListener, topic: Topic
    ) -> None:
        """
        Register ``listener`` for ``topic``.

        Subscribes immediately when the container is running and the topic is
        new.
        """
        if not isinstance(listener, MessageListener):
            raise TypeError(
                f"listener must be MessageListener, got {type(listener).__name__}"
            )

        async with self._lock:
            is_new_topic = topic not in self._listeners
            self._listeners.setdefault(topic, []).append(listener)

            if is_new_topic and self.is_running:
                await self._subscribe([topic])

        logger.debug(
            "Registered message listener",
            topic=topic.topic,
            listener=repr(listener),
        )

    async def start(self) -> None:
        """Subscribe to every registered topic and start the receive loop."""
        async with self._lock:
            if self.is_running:
                return
            if not self._listeners:
                raise RedisListenerException(
                    message="Cannot start listener container without listeners"
                )

            self._pubsub = self._redis.pubsub()
            try:
                await self._subscribe(self.topics)
            except RedisError as e:
                await self._pubsub.aclose()
                self._pubsub = None
                raise RedisListenerException(
                    message=f"Failed to subscribe: {e}", original_error=e
                )

            self._task = asyncio.create_task(
                self._run(), name="redis-message-listener-container"
            )
            logger.info(
                "Listener container started",
                topics=[t.topic for t in self.topics],
            )

    async def _subscribe(self, topics: List[Topic]) -> None:
        patterns = [t.pattern for t in topics if isinstance(t, PatternTopic)]
        channels = [t.name for t in topics if isinstance(t, ChannelTopic)]
        if patterns:
            await self._pubsub.psubscribe(*patterns)
        if channels:
            await self._pubsub.subscribe(*channels)

    async def _run(self) -> None:
        """Receive loop."""
        while True:
            try:
                raw = await self._pubsub.get_message(
                    ignore_subscribe_messages=True, timeout=self.poll_timeout
                )
            except asyncio.CancelledError:
                raise
            except RedisError as e:
                logger.error("Listener container receive error", error=str(e))
                await asyncio.sleep(self.poll_timeout)
                continue

            if raw is None:
                continue

            try:
                await self.dispatch(raw)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                logger.error(
                    "Failed to dispatch message",
                    channel=repr(raw.get("channel")),
                    error=str(e),
                    exc_info=True,
                )

    async def dispatch(self, raw: Dict[str, Any]) -> int:
        """
        Route one raw pub/sub message to its listeners.

        Args:
            raw: Message dict as returned by redis-py

        Returns:
            Number of listeners the message was delivered to
        """
        message_type = _decode(raw.get("type"))
        channel = _decode(raw.get("channel"))

        if message_type == "pmessage":
            pattern = _decode(raw.get("pattern"))
            topic: Topic = PatternTopic(pattern)
        elif message_type == "message":
            pattern = None
            topic = ChannelTopic(channel)
        else:
            return 0

        message = Message(channel=channel, data=raw.get("data"), pattern=pattern)
        listeners = self.listeners_for(topic)

        for listener in listeners:
            with tracer.start_as_current_span("redis.pubsub.dispatch") as span:
                span.set_attribute("messaging.system", "redis")
                span.set_attribute("messaging.destination.name", channel)
                try:
                    await listener.on_message(message)
                except asyncio.CancelledError:
                    raise
                except Exception as e:
                    span.record_exception(e)
                    span.set_status(Status(StatusCode.ERROR, str(e)))
                    logger.error(
                        "Message listener failed",
                        channel=channel,
                        pattern=pattern,
                        listener=repr(listener),
                        error=str(e),
                        exc_info=True,
                    )

        return len(listeners)

    async def stop(self) -> None:
        """Stop the receive loop and release the pub/sub connection."""
        async with self._lock:
            if self._task is not None:
                self._task.cancel()
                try:
                    await self._task
                except asyncio.CancelledError:
                    pass
                except Exception as e:
                    logger.error("Receive loop ended with an error", error=str(e))
                self._task = None

            if self._pubsub is not None:
                try:
                    await self._pubsub.punsubscribe()
                    await self._pubsub.unsubscribe()
                except RedisError as e:
                    logger.warning("Error during unsubscribe", error=str(e))
                finally:
                    await self._pubsub.aclose()
                    self._pubsub = None

            logger.info("Listener container stopped")

    async def __aenter__(self):
        await self.start()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.stop()
