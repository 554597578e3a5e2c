from __future__ import annotations

import pytest

from crypto_price_agent.pricing.resolver import (
    DEFAULT_ASSET_IDS,
    SYNONYM_TABLE,
    mentions_crypto,
    resolve_asset_ids,
)


def test_synonyms_collapse_to_one_id():
    assert resolve_asset_ids("BTC or bitcoin? btc!") == ["bitcoin"]


def test_multiple_assets_follow_table_order():
    assert resolve_asset_ids("doge and eth") == ["ethereum", "dogecoin"]


@pytest.mark.parametrize("text", ["", None, "how are you today?"])
def test_no_keyword_falls_back_to_default_pair(text):
    assert resolve_asset_ids(text) == ["bitcoin", "ethereum"]
    assert tuple(resolve_asset_ids(text)) == DEFAULT_ASSET_IDS


def test_every_table_keyword_resolves_to_its_id():
    for keyword, asset_id in SYNONYM_TABLE.items():
        assert asset_id in resolve_asset_ids(f"tell me about {keyword}")


def test_substring_match_is_not_word_bounded():
    # "console" contains "sol"
    assert resolve_asset_ids("open the console") == ["solana"]


def test_resolved_ids_are_table_values_only():
    allowed = set(SYNONYM_TABLE.values()) | set(DEFAULT_ASSET_IDS)
    for text in ["xrp vs ada", "nothing here", "SOLANA, Cardano, Ripple"]:
        assert set(resolve_asset_ids(text)) <= allowed


@pytest.mark.parametrize(
    "text",
    ["Any crypto news?", "What is the PRICE today", "eth gas", "Dogecoin to the moon"],
)
def test_gate_opens_on_any_keyword(text):
    assert mentions_crypto(text) is True


def test_gate_is_independent_of_resolver():
    # The gate opens for generic terms that resolve to the default pair.
    assert mentions_crypto("crypto market") is True
    assert resolve_asset_ids("crypto market") == ["bitcoin", "ethereum"]


@pytest.mark.parametrize("text", ["", None, "hello there", "doge"])
def test_gate_stays_closed_without_keywords(text):
    # "doge" alone is a resolver synonym but not a gate keyword.
    assert mentions_crypto(text) is False
