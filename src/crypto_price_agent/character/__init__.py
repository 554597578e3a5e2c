from crypto_price_agent.character.crypto_price import build_character
from crypto_price_agent.character.plugins import PLUGIN_OPTIONS, PluginOption, resolve_plugins
from crypto_price_agent.character.spec import CharacterSpec

__all__ = ["CharacterSpec", "PLUGIN_OPTIONS", "PluginOption", "build_character", "resolve_plugins"]
