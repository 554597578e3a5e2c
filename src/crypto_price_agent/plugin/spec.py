from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass, field
from typing import Any

from crypto_price_agent.errors import DuplicateRegistrationError
from crypto_price_agent.plugin.capabilities import ActionSpec, ProviderSpec, Service
from crypto_price_agent.plugin.events import EventHandler, EventType
from crypto_price_agent.plugin.routes import RouteSpec
from crypto_price_agent.plugin.text_models import ModelHandler, ModelType

PluginInit = Callable[[dict[str, Any]], Awaitable[None]]


def _ensure_unique(kind: str, names: list[str]) -> None:
    seen: set[str] = set()
    for name in names:
        if name in seen:
            raise DuplicateRegistrationError(f"Duplicate {kind} name detected: {name}")
        seen.add(name)


@dataclass(frozen=True)
class PluginSpec:
    """Everything a plugin contributes to the runtime, in registration order.

    Attributes:
        name: Unique plugin id.
        description: Human readable summary.
        priority: Model precedence; lower loses to other plugins.
        config: Raw configuration handed to ``init``.
        init: Coroutine validating ``config`` before registration.
        actions: Ordered actions offered for message handling.
        providers: Ordered context providers.
        services: Service classes started with the plugin.
        models: Model type -> generation handler.
        routes: HTTP routes mounted by the hosting app.
        events: Event type -> ordered handlers.
    """

    name: str
    description: str
    init: PluginInit | None = None
    priority: int = 0
    config: dict[str, Any] = field(default_factory=dict)
    actions: list[ActionSpec] = field(default_factory=list)
    providers: list[ProviderSpec] = field(default_factory=list)
    services: list[type[Service]] = field(default_factory=list)
    models: dict[ModelType, ModelHandler] = field(default_factory=dict)
    routes: list[RouteSpec] = field(default_factory=list)
    events: dict[EventType, list[EventHandler]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        _ensure_unique("action", [a.name for a in self.actions])
        _ensure_unique("provider", [p.name for p in self.providers])
        _ensure_unique("service", [s.service_type for s in self.services])
        _ensure_unique("route", [f"{r.method.upper()} {r.path}" for r in self.routes])

    async def initialize(self, config: dict[str, Any] | None = None) -> None:
        if self.init is not None:
            await self.init(dict(self.config if config is None else config))

    def describe(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "priority": self.priority,
            "actions": [a.describe() for a in self.actions],
            "providers": [p.describe() for p in self.providers],
            "services": [s.describe() for s in self.services],
            "models": [m.value for m in self.models],
            "routes": [{"name": r.name, "method": r.method, "path": r.path} for r in self.routes],
            "events": {e.value: len(handlers) for e, handlers in self.events.items()},
        }
