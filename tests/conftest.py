from __future__ import annotations

import pytest
import pytest_asyncio

from crypto_price_agent.config.settings import Settings
from crypto_price_agent.plugin.starter import build_plugin
from crypto_price_agent.runtime import AgentRuntime


def _make_settings(**overrides) -> Settings:
    # model_construct skips the environment so host variables cannot leak in.
    return Settings.model_construct(**overrides)


@pytest.fixture()
def make_settings():
    return _make_settings


@pytest.fixture()
def settings() -> Settings:
    return _make_settings(coingecko_base_url="https://coingecko.test/api/v3")


@pytest.fixture()
def plugin(settings):
    return build_plugin(settings)


@pytest_asyncio.fixture
async def runtime(plugin):
    rt = AgentRuntime()
    await rt.register_plugin(plugin)
    try:
        yield rt
    finally:
        await rt.stop()
