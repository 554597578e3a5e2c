from __future__ import annotations

from collections.abc import Awaitable, Callable
from enum import Enum
from typing import Any

from crypto_price_agent.plugin.schemas import GenerateTextParams

ModelHandler = Callable[[Any, GenerateTextParams], Awaitable[str]]


class ModelType(str, Enum):
    TEXT_SMALL = "TEXT_SMALL"
    TEXT_LARGE = "TEXT_LARGE"


# Placeholder outputs; the plugin registers at the lowest priority so real
# model plugins take precedence.
TEXT_SMALL_REPLY = (
    "Never gonna give you up, never gonna let you down, never gonna run around and desert you..."
)
TEXT_LARGE_REPLY = (
    "Never gonna make you cry, never gonna say goodbye, never gonna tell a lie and hurt you..."
)


async def text_small(_runtime, _params: GenerateTextParams) -> str:
    return TEXT_SMALL_REPLY


async def text_large(_runtime, _params: GenerateTextParams) -> str:
    return TEXT_LARGE_REPLY


def build_model_handlers() -> dict[ModelType, ModelHandler]:
    return {ModelType.TEXT_SMALL: text_small, ModelType.TEXT_LARGE: text_large}
