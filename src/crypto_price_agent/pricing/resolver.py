from __future__ import annotations

from types import MappingProxyType

# Surface keyword (symbol or name) -> canonical CoinGecko id. Iteration order
# decides the order of resolved ids.
SYNONYM_TABLE: MappingProxyType[str, str] = MappingProxyType(
    {
        "bitcoin": "bitcoin",
        "btc": "bitcoin",
        "ethereum": "ethereum",
        "eth": "ethereum",
        "solana": "solana",
        "sol": "solana",
        "cardano": "cardano",
        "ada": "cardano",
        "ripple": "ripple",
        "xrp": "ripple",
        "dogecoin": "dogecoin",
        "doge": "dogecoin",
    }
)

DEFAULT_ASSET_IDS: tuple[str, ...] = ("bitcoin", "ethereum")

# Coarser trigger for the price action. Generic terms ("crypto", "price") open
# the gate without naming an asset, which resolves to the default pair.
GATE_KEYWORDS: tuple[str, ...] = (
    "bitcoin",
    "ethereum",
    "crypto",
    "price",
    "btc",
    "eth",
    "solana",
    "cardano",
    "ripple",
    "dogecoin",
)


def mentions_crypto(text: str | None) -> bool:
    lowered = (text or "").lower()
    return any(keyword in lowered for keyword in GATE_KEYWORDS)


def resolve_asset_ids(text: str | None) -> list[str]:
    """Map free text to canonical asset ids.

    Matching is plain substring containment on the lowercased text, so a
    keyword embedded in another word still matches ("console" -> solana).
    Returns the default pair when nothing matches.
    """
    lowered = (text or "").lower()
    matched = [asset_id for keyword, asset_id in SYNONYM_TABLE.items() if keyword in lowered]
    if not matched:
        return list(DEFAULT_ASSET_IDS)
    # Keep deterministic order while de-duplicating.
    return list(dict.fromkeys(matched))
