from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

from crypto_price_agent.config.settings import Settings


@dataclass(frozen=True)
class PluginOption:
    """One entry of the character's plugin table.

    Attributes:
        package: Plugin package id handed to the host.
        requires: Settings attributes that must all be non-blank to enable it.
            Empty means always enabled.
        effect: What loading the plugin gives the agent.
        unless_flag: Boolean setting that disables the plugin when true.
        kind: Grouping used when listing plugins.
    """

    package: str
    effect: str
    requires: tuple[str, ...] = ()
    unless_flag: str | None = None
    kind: Literal["core", "model", "embedding", "platform"] = "core"

    def enabled(self, settings: Settings) -> bool:
        if self.unless_flag and getattr(settings, self.unless_flag):
            return False
        return all(str(getattr(settings, attr) or "").strip() for attr in self.requires)


# Order matters: the host loads plugins in this order.
PLUGIN_OPTIONS: tuple[PluginOption, ...] = (
    PluginOption("@elizaos/plugin-sql", effect="Message and memory storage."),
    # Text-only providers (no embedding support)
    PluginOption(
        "@elizaos/plugin-anthropic",
        effect="Anthropic text generation.",
        requires=("anthropic_api_key",),
        kind="model",
    ),
    PluginOption(
        "@elizaos/plugin-openrouter",
        effect="OpenRouter text generation.",
        requires=("openrouter_api_key",),
        kind="model",
    ),
    # Embedding-capable providers
    PluginOption(
        "@elizaos/plugin-openai",
        effect="OpenAI text generation and embeddings.",
        requires=("openai_api_key",),
        kind="embedding",
    ),
    PluginOption(
        "@elizaos/plugin-google-genai",
        effect="Google Generative AI text generation and embeddings.",
        requires=("google_generative_ai_api_key",),
        kind="embedding",
    ),
    PluginOption(
        "@elizaos/plugin-ollama",
        effect="Local Ollama models as a fallback provider.",
        requires=("ollama_api_endpoint",),
        kind="embedding",
    ),
    # Platforms
    PluginOption(
        "@elizaos/plugin-discord",
        effect="Discord connector.",
        requires=("discord_api_token",),
        kind="platform",
    ),
    PluginOption(
        "@elizaos/plugin-twitter",
        effect="Twitter/X connector.",
        requires=(
            "twitter_api_key",
            "twitter_api_secret_key",
            "twitter_access_token",
            "twitter_access_token_secret",
        ),
        kind="platform",
    ),
    PluginOption(
        "@elizaos/plugin-telegram",
        effect="Telegram connector.",
        requires=("telegram_bot_token",),
        kind="platform",
    ),
    PluginOption(
        "@elizaos/plugin-bootstrap",
        effect="Default message handling actions, providers and evaluators.",
        unless_flag="ignore_bootstrap",
    ),
)


def resolve_plugins(settings: Settings) -> list[str]:
    return [option.package for option in PLUGIN_OPTIONS if option.enabled(settings)]
