"""The starter plugin: greeting, crypto price lookup and their supporting pieces."""

from __future__ import annotations

import logging
from typing import Any

from crypto_price_agent.config.settings import Settings, get_settings
from crypto_price_agent.plugin.actions import crypto_price, hello_world
from crypto_price_agent.plugin.config import export_to_environment, validate_plugin_config
from crypto_price_agent.plugin.events import build_event_handlers
from crypto_price_agent.plugin.providers import hello_world as hello_world_provider
from crypto_price_agent.plugin.routes import build_routes
from crypto_price_agent.plugin.services.starter import StarterService
from crypto_price_agent.plugin.spec import PluginSpec
from crypto_price_agent.plugin.text_models import build_model_handlers

logger = logging.getLogger(__name__)

PLUGIN_NAME = "starter"


async def init_starter(config: dict[str, Any]) -> None:
    logger.info("*** Initializing starter plugin ***")
    validated = validate_plugin_config(config)
    export_to_environment(validated)


def build_plugin(settings: Settings | None = None) -> PluginSpec:
    settings = settings or get_settings()
    return PluginSpec(
        name=PLUGIN_NAME,
        description="A starter plugin for Eliza",
        init=init_starter,
        # Lowest priority so real models take precedence.
        priority=-1000,
        config={"EXAMPLE_PLUGIN_VARIABLE": settings.example_plugin_variable},
        actions=[hello_world.action, crypto_price.action],
        providers=[hello_world_provider.provider],
        services=[StarterService],
        models=build_model_handlers(),
        routes=build_routes(),
        events=build_event_handlers(),
    )
