from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

logger = logging.getLogger(__name__)

EventHandler = Callable[[dict[str, Any]], Awaitable[None]]


class EventType(str, Enum):
    MESSAGE_RECEIVED = "MESSAGE_RECEIVED"
    VOICE_MESSAGE_RECEIVED = "VOICE_MESSAGE_RECEIVED"
    WORLD_CONNECTED = "WORLD_CONNECTED"
    WORLD_JOINED = "WORLD_JOINED"


def build_key_logger(event_type: EventType) -> EventHandler:
    """Handler that logs the event and the names of its params."""

    async def _log_keys(params: dict[str, Any]) -> None:
        logger.info("%s event received", event_type.value)
        logger.info(
            "%s param keys", event_type.value, extra={"keys": sorted(params.keys())}
        )

    _log_keys.__name__ = f"log_{event_type.value.lower()}"
    return _log_keys


def build_event_handlers() -> dict[EventType, list[EventHandler]]:
    return {event_type: [build_key_logger(event_type)] for event_type in EventType}
