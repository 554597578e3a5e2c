from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, ClassVar

from crypto_price_agent.plugin.schemas import ActionResult, ExampleTurn, Message, ProviderResult
from crypto_price_agent.plugin.sink import ResponseSink

if TYPE_CHECKING:
    from crypto_price_agent.runtime.agent_runtime import AgentRuntime

logger = logging.getLogger(__name__)

State = dict[str, Any]
Validator = Callable[["AgentRuntime", Message, State], Awaitable[bool]]
Handler = Callable[["AgentRuntime", Message, State, ResponseSink], Awaitable[ActionResult]]
ProviderGetter = Callable[["AgentRuntime", Message, State], Awaitable[ProviderResult]]


@dataclass(frozen=True)
class ActionSpec:
    """Static definition of an action the runtime may select for a message.

    Attributes:
        name: Unique action id, also echoed in response content.
        description: Summary used when choosing between actions.
        validator: Gate deciding whether the handler should run at all.
        handler: Produces exactly one response through the sink and returns a result.
        similes: Alternative names for the action.
        examples: Illustrative transcripts, data only.
        priority: Tie-breaker when several actions validate; higher wins.
    """

    name: str
    description: str
    validator: Validator
    handler: Handler
    similes: list[str] = field(default_factory=list)
    examples: list[list[ExampleTurn]] = field(default_factory=list)
    priority: int = 0

    async def validate(self, runtime: "AgentRuntime", message: Message, state: State) -> bool:
        return await self.validator(runtime, message, state)

    async def handle(
        self, runtime: "AgentRuntime", message: Message, state: State, sink: ResponseSink
    ) -> ActionResult:
        return await self.handler(runtime, message, state, sink)

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "similes": list(self.similes),
            "priority": self.priority,
            "examples": [[turn.model_dump() for turn in example] for example in self.examples],
        }


@dataclass(frozen=True)
class ProviderSpec:
    name: str
    description: str
    getter: ProviderGetter

    async def get(self, runtime: "AgentRuntime", message: Message, state: State) -> ProviderResult:
        return await self.getter(runtime, message, state)

    def describe(self) -> dict[str, Any]:
        return {"name": self.name, "description": self.description}


class Service:
    """Long-lived capability attached to the runtime for the plugin's lifetime."""

    service_type: ClassVar[str] = ""
    capability_description: str = ""

    def __init__(self, runtime: "AgentRuntime") -> None:
        self.runtime = runtime

    @classmethod
    async def start(cls, runtime: "AgentRuntime") -> "Service":
        return cls(runtime)

    async def stop(self) -> None:
        logger.debug("Stopping service %s", self.service_type)

    @classmethod
    def describe(cls) -> dict[str, Any]:
        return {
            "service_type": cls.service_type,
            "capability_description": cls.capability_description,
        }
