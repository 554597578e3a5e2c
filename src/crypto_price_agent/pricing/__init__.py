"""Keyword resolution, CoinGecko access and report formatting for price lookups."""

from crypto_price_agent.pricing.coingecko import fetch_simple_prices
from crypto_price_agent.pricing.formatter import PriceRecord, format_price_report, parse_price_payload
from crypto_price_agent.pricing.resolver import (
    DEFAULT_ASSET_IDS,
    GATE_KEYWORDS,
    SYNONYM_TABLE,
    mentions_crypto,
    resolve_asset_ids,
)

__all__ = [
    "DEFAULT_ASSET_IDS",
    "GATE_KEYWORDS",
    "SYNONYM_TABLE",
    "PriceRecord",
    "fetch_simple_prices",
    "format_price_report",
    "mentions_crypto",
    "parse_price_payload",
    "resolve_asset_ids",
]
