from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from crypto_price_agent.errors import PluginConfigError

logger = logging.getLogger(__name__)


class PluginConfig(BaseModel):
    example_plugin_variable: str | None = Field(
        default=None, alias="EXAMPLE_PLUGIN_VARIABLE"
    )

    @field_validator("example_plugin_variable")
    @classmethod
    def _require_non_empty(cls, value: str | None) -> str | None:
        if value is not None and len(value) < 1:
            raise ValueError("Example plugin variable is not provided")
        return value


def _issue_message(error: dict[str, Any]) -> str:
    # pydantic prefixes custom messages with "Value error, ".
    message = str(error.get("msg", ""))
    return message.removeprefix("Value error, ")


def validate_plugin_config(raw: Mapping[str, Any]) -> PluginConfig:
    """Validate raw plugin config, aggregating every failed field."""
    try:
        config = PluginConfig.model_validate(dict(raw))
    except ValidationError as exc:
        messages = ", ".join(_issue_message(err) for err in exc.errors()) or "Unknown validation error"
        raise PluginConfigError(f"Invalid plugin configuration: {messages}") from exc

    if config.example_plugin_variable is None:
        logger.warning("Warning: Example plugin variable is not provided")
    return config


def export_to_environment(config: PluginConfig) -> None:
    for key, value in config.model_dump(by_alias=True).items():
        if value:
            os.environ[key] = value
