# src/roomgate/services/actuation.py
"""Door command dispatch over the Redis publish/subscribe channel.

Controllers subscribe to ``door`` (every door) and ``door/<room id>`` (one
door). Payloads are the literal command strings. Delivery is at-most-once:
there is no acknowledgement topic, so the only feedback is the subscriber count
Redis reports for the publish call.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Protocol

import redis
from redis.exceptions import RedisError

from roomgate.core.settings import settings
from roomgate.services.errors import PublishError

logger = logging.getLogger(__name__)

GLOBAL_DOOR_TOPIC = "door"


class DoorCommand(str, Enum):
    """Commands understood by the door controllers."""

    LOCK = "lock"
    UNLOCK = "unlock"
    SOUND = "sound"


class PublishClient(Protocol):
    """Subset of the Redis client used for dispatch."""

    def publish(self, channel: str, message: str) -> int: ...


def room_topic(room_id: int | str) -> str:
    """Return the topic addressing a single room's controller."""
    return f"{GLOBAL_DOOR_TOPIC}/{room_id}"


@dataclass(frozen=True)
class PublishResult:
    """Outcome of handing one command to the channel."""

    topic: str
    command: DoorCommand
    delivered: bool
    receivers: int = 0
    error: str | None = None

    def raise_for_failure(self) -> None:
        """Raise ``PublishError`` if the command never reached the channel."""
        if not self.delivered:
            raise PublishError("Door controller channel is unavailable.")


class ActuationDispatcher:
    """Publishes door commands. Never retries and never blocks past the client timeout."""

    def __init__(self, client: PublishClient) -> None:
        self.client = client

    def publish(self, topic: str, command: DoorCommand) -> PublishResult:
        """Publish ``command`` on ``topic`` and report what happened."""
        try:
            receivers = int(self.client.publish(topic, command.value))
        except RedisError as err:
            logger.warning("Failed to publish %s on %s: %s", command.value, topic, err)
            return PublishResult(topic=topic, command=command, delivered=False, error=str(err))

        if receivers == 0:
            logger.warning("Published %s on %s but no controller is subscribed", command.value, topic)
        else:
            logger.info("Published %s on %s to %d controller(s)", command.value, topic, receivers)
        return PublishResult(topic=topic, command=command, delivered=True, receivers=receivers)

    def broadcast(self, command: DoorCommand) -> PublishResult:
        """Send a command to every door controller."""
        return self.publish(GLOBAL_DOOR_TOPIC, command)

    def send_to_room(self, room_id: int | str, command: DoorCommand) -> PublishResult:
        """Send a command to one room's controller."""
        return self.publish(room_topic(room_id), command)


_client: redis.Redis | None = None


def get_actuation_client() -> redis.Redis:
    """Return the process-wide Redis client used for door commands."""
    global _client
    if _client is None:
        _client = redis.Redis.from_url(
            settings.redis_url,
            socket_timeout=settings.actuation_timeout_seconds,
            socket_connect_timeout=settings.actuation_timeout_seconds,
        )
    return _client


def get_actuation_dispatcher() -> ActuationDispatcher:
    """Return a dispatcher bound to the shared Redis client."""
    return ActuationDispatcher(get_actuation_client())
