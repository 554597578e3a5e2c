from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from crypto_price_agent.character.spec import CharacterSpec
from crypto_price_agent.errors import DuplicateRegistrationError, UnknownActionError, UnknownModelError
from crypto_price_agent.plugin.capabilities import ActionSpec, ProviderSpec, Service, State
from crypto_price_agent.plugin.events import EventHandler, EventType
from crypto_price_agent.plugin.schemas import ActionResult, Content, GenerateTextParams, Message
from crypto_price_agent.plugin.sink import ResponseCallback, ResponseSink
from crypto_price_agent.plugin.spec import PluginSpec
from crypto_price_agent.plugin.text_models import ModelHandler, ModelType

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MessageOutcome:
    action: str | None
    response: Content | None
    result: ActionResult | None

    def to_dict(self) -> dict[str, Any]:
        return {
            "action": self.action,
            "response": self.response.model_dump() if self.response else None,
            "result": self.result.model_dump() if self.result else None,
        }


class AgentRuntime:
    """In-process host for plugins.

    Registration order is preserved: actions, providers and event handlers
    run in the order their plugins (and the plugins' own lists) declare them.
    """

    def __init__(self, character: CharacterSpec | None = None) -> None:
        self.character = character
        self.plugins: list[PluginSpec] = []
        self.actions: list[ActionSpec] = []
        self.providers: list[ProviderSpec] = []
        self._services: dict[str, Service] = {}
        self._models: dict[ModelType, tuple[int, ModelHandler]] = {}
        self._events: dict[EventType, list[EventHandler]] = {}

    def _check_collisions(self, plugin: PluginSpec) -> None:
        """Reject ``plugin`` before anything is mutated if a name is already taken."""
        if any(p.name == plugin.name for p in self.plugins):
            raise DuplicateRegistrationError(f"Plugin already registered: {plugin.name}")

        taken_actions = {a.name for a in self.actions}
        for action in plugin.actions:
            if action.name in taken_actions:
                raise DuplicateRegistrationError(f"Duplicate action name detected: {action.name}")

        taken_providers = {p.name for p in self.providers}
        for provider in plugin.providers:
            if provider.name in taken_providers:
                raise DuplicateRegistrationError(f"Duplicate provider name detected: {provider.name}")

        for service_cls in plugin.services:
            if service_cls.service_type in self._services:
                raise DuplicateRegistrationError(
                    f"Service already running: {service_cls.service_type}"
                )

    async def _start_services(self, plugin: PluginSpec) -> dict[str, Service]:
        started: dict[str, Service] = {}
        try:
            for service_cls in plugin.services:
                started[service_cls.service_type] = await service_cls.start(self)
        except Exception:
            for service in started.values():
                await service.stop()
            raise
        return started

    async def register_plugin(self, plugin: PluginSpec) -> None:
        """Initialize ``plugin`` and register its capabilities.

        Either every capability is registered or none is: name collisions,
        a failing ``init`` or a failing service start leave the runtime as it was.
        """
        self._check_collisions(plugin)
        await plugin.initialize()
        started = await self._start_services(plugin)

        self.actions.extend(plugin.actions)
        self.providers.extend(plugin.providers)

        for model_type, handler in plugin.models.items():
            current = self._models.get(model_type)
            if current is None or plugin.priority > current[0]:
                self._models[model_type] = (plugin.priority, handler)

        for event_type, handlers in plugin.events.items():
            self._events.setdefault(event_type, []).extend(handlers)

        self._services.update(started)
        self.plugins.append(plugin)
        logger.info("Registered plugin %s", plugin.name)

    def get_service(self, service_type: str) -> Service | None:
        return self._services.get(service_type)

    def get_action(self, name: str) -> ActionSpec:
        for action in self.actions:
            if action.name == name or name in action.similes:
                return action
        raise UnknownActionError(f"Unknown action: {name}")

    async def compose_state(self, message: Message) -> State:
        state: State = {"providers": {}}
        for provider in self.providers:
            result = await provider.get(self, message, state)
            state["providers"][provider.name] = result.model_dump()
        return state

    async def select_action(self, message: Message, state: State) -> ActionSpec | None:
        candidates = [a for a in self.actions if await a.validate(self, message, state)]
        if not candidates:
            return None
        # max() keeps the first of equal priorities, i.e. registration order.
        return max(candidates, key=lambda a: a.priority)

    async def process_message(
        self,
        message: Message,
        callback: ResponseCallback | None = None,
        action_name: str | None = None,
    ) -> MessageOutcome:
        await self.emit_event(
            EventType.MESSAGE_RECEIVED, {"message": message, "runtime": self}
        )
        state = await self.compose_state(message)

        if action_name:
            # A named action still has to pass its own gate.
            action: ActionSpec | None = self.get_action(action_name)
            if not await action.validate(self, message, state):
                logger.info("Action %s rejected message %s", action.name, message.id)
                action = None
        else:
            action = await self.select_action(message, state)
        if action is None:
            logger.info("No action validated for message %s", message.id)
            return MessageOutcome(action=None, response=None, result=None)

        sink = ResponseSink(callback)
        result = await action.handle(self, message, state, sink)
        return MessageOutcome(action=action.name, response=sink.content, result=result)

    async def use_model(self, model_type: ModelType, params: GenerateTextParams | None = None) -> str:
        entry = self._models.get(model_type)
        if entry is None:
            raise UnknownModelError(f"No handler registered for model {model_type.value}")
        return await entry[1](self, params or GenerateTextParams())

    async def emit_event(self, event_type: EventType, params: dict[str, Any]) -> None:
        for handler in self._events.get(event_type, []):
            await handler(params)

    async def stop(self) -> None:
        for service_type in list(self._services):
            await self._services.pop(service_type).stop()
        logger.info("Runtime stopped")
