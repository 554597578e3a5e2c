from __future__ import annotations

import pytest

from crypto_price_agent.errors import (
    DuplicateRegistrationError,
    ServiceNotFoundError,
    UnknownActionError,
)
from crypto_price_agent.plugin.actions import crypto_price as crypto_module
from crypto_price_agent.plugin.actions import hello_world
from crypto_price_agent.plugin.capabilities import Service
from crypto_price_agent.plugin.providers import hello_world as hello_provider
from crypto_price_agent.plugin.schemas import Message
from crypto_price_agent.plugin.services.starter import StarterService
from crypto_price_agent.plugin.spec import PluginSpec
from crypto_price_agent.plugin.text_models import TEXT_SMALL_REPLY, ModelType
from crypto_price_agent.runtime import AgentRuntime


@pytest.fixture()
def fake_prices(monkeypatch):
    async def fake_fetch(asset_ids, **kwargs):
        return {asset_id: {"usd": 10, "usd_24h_change": -0.5} for asset_id in asset_ids}

    monkeypatch.setattr(crypto_module, "fetch_simple_prices", fake_fetch)


@pytest.mark.asyncio
async def test_register_starts_services(runtime):
    service = runtime.get_service("starter")
    assert isinstance(service, StarterService)
    assert service.runtime is runtime


@pytest.mark.asyncio
async def test_plugin_cannot_register_twice(runtime, plugin):
    with pytest.raises(DuplicateRegistrationError):
        await runtime.register_plugin(plugin)


@pytest.mark.asyncio
async def test_greeting_selected_for_plain_text(runtime):
    outcome = await runtime.process_message(Message.from_text("hi there"))
    assert outcome.action == "HELLO_WORLD"
    assert outcome.response.text == "hello world!"


@pytest.mark.asyncio
async def test_price_action_outranks_greeting(runtime, fake_prices):
    delivered = []

    async def callback(content):
        delivered.append(content)

    outcome = await runtime.process_message(Message.from_text("price of btc"), callback)

    assert outcome.action == "GET_CRYPTO_PRICE"
    assert outcome.result.success is True
    assert delivered == [outcome.response]
    assert outcome.response.text.endswith("BITCOIN: $10 USD (-0.5% 24h)")


@pytest.mark.asyncio
async def test_explicit_action_by_simile(runtime):
    outcome = await runtime.process_message(
        Message.from_text("what is the btc price"), action_name="SAY_HELLO"
    )
    assert outcome.action == "HELLO_WORLD"


@pytest.mark.asyncio
async def test_unknown_action_name(runtime):
    with pytest.raises(UnknownActionError):
        await runtime.process_message(Message.from_text("hi"), action_name="NOPE")


@pytest.mark.asyncio
async def test_providers_compose_state(runtime):
    state = await runtime.compose_state(Message.from_text("hi"))
    assert state["providers"]["HELLO_WORLD_PROVIDER"]["text"] == "I am a provider"


@pytest.mark.asyncio
async def test_use_model_returns_stub(runtime):
    assert await runtime.use_model(ModelType.TEXT_SMALL) == TEXT_SMALL_REPLY


@pytest.mark.asyncio
async def test_starter_stop_requires_registered_service():
    with pytest.raises(ServiceNotFoundError):
        await StarterService.stop_for(AgentRuntime())


@pytest.mark.asyncio
async def test_starter_stop_for_runtime(runtime, caplog):
    caplog.set_level("INFO")
    await StarterService.stop_for(runtime)
    assert "*** Stopping starter service instance ***" in caplog.text


@pytest.mark.asyncio
async def test_stop_releases_services(plugin):
    rt = AgentRuntime()
    await rt.register_plugin(plugin)
    await rt.stop()
    assert rt.get_service("starter") is None


@pytest.mark.asyncio
async def test_forced_action_still_runs_its_gate(runtime, fake_prices):
    delivered = []

    async def callback(content):
        delivered.append(content)

    outcome = await runtime.process_message(
        Message.from_text("good morning"), callback, action_name="GET_CRYPTO_PRICE"
    )

    assert outcome.action is None
    assert outcome.response is None
    assert outcome.result is None
    assert delivered == []


@pytest.mark.asyncio
async def test_rejected_plugin_leaves_actions_untouched():
    rt = AgentRuntime()
    await rt.register_plugin(PluginSpec(name="a", description="", actions=[hello_world.action]))

    clashing = PluginSpec(
        name="b", description="", actions=[crypto_module.action, hello_world.action]
    )
    with pytest.raises(DuplicateRegistrationError):
        await rt.register_plugin(clashing)

    assert [a.name for a in rt.actions] == ["HELLO_WORLD"]
    assert [p.name for p in rt.plugins] == ["a"]


@pytest.mark.asyncio
async def test_duplicate_service_type_is_rejected():
    rt = AgentRuntime()
    await rt.register_plugin(PluginSpec(name="a", description="", services=[StarterService]))
    first = rt.get_service("starter")

    with pytest.raises(DuplicateRegistrationError):
        await rt.register_plugin(PluginSpec(name="b", description="", services=[StarterService]))

    assert rt.get_service("starter") is first
    assert [p.name for p in rt.plugins] == ["a"]
    await rt.stop()


@pytest.mark.asyncio
async def test_duplicate_provider_name_is_rejected():
    rt = AgentRuntime()
    await rt.register_plugin(
        PluginSpec(name="a", description="", providers=[hello_provider.provider])
    )

    with pytest.raises(DuplicateRegistrationError):
        await rt.register_plugin(
            PluginSpec(name="b", description="", providers=[hello_provider.provider])
        )

    assert [p.name for p in rt.providers] == ["HELLO_WORLD_PROVIDER"]


class BrokenService(Service):
    service_type = "broken"

    @classmethod
    async def start(cls, runtime):
        raise RuntimeError("cannot start")


@pytest.mark.asyncio
async def test_failed_service_start_rolls_back(caplog):
    caplog.set_level("INFO")
    rt = AgentRuntime()
    plugin = PluginSpec(
        name="a",
        description="",
        actions=[hello_world.action],
        services=[StarterService, BrokenService],
    )

    with pytest.raises(RuntimeError, match="cannot start"):
        await rt.register_plugin(plugin)

    assert "*** Stopping starter service instance ***" in caplog.text
    assert rt.get_service("starter") is None
    assert rt.actions == []
    assert rt.plugins == []
