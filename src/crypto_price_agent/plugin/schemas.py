from __future__ import annotations

import time
import uuid
from typing import Any

from pydantic import BaseModel, Field


class Content(BaseModel):
    text: str = ""
    actions: list[str] = Field(default_factory=list)
    source: str | None = None
    error: bool = False


class Message(BaseModel):
    id: str = Field(default_factory=lambda: str(uuid.uuid4()))
    content: Content = Field(default_factory=Content)

    @classmethod
    def from_text(cls, text: str, source: str | None = None) -> "Message":
        return cls(content=Content(text=text, source=source))


class ExampleTurn(BaseModel):
    """One line of an illustrative transcript used for action selection."""

    name: str
    content: Content


class ProviderResult(BaseModel):
    text: str = ""
    values: dict[str, Any] = Field(default_factory=dict)
    data: dict[str, Any] = Field(default_factory=dict)


class ActionResult(BaseModel):
    text: str
    success: bool
    values: dict[str, Any] = Field(default_factory=dict)
    data: dict[str, Any] = Field(default_factory=dict)
    error: str | None = None


class GenerateTextParams(BaseModel):
    prompt: str = ""
    temperature: float | None = None
    max_tokens: int | None = None
    stop_sequences: list[str] = Field(default_factory=list)


def now_millis() -> int:
    return int(time.time() * 1000)
