"""Helpers for interacting with the public CoinGecko simple price API."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

import httpx

from crypto_price_agent.config.settings import Settings, get_settings
from crypto_price_agent.errors import PriceDataError, PriceFetchError

logger = logging.getLogger(__name__)

SIMPLE_PRICE_PATH = "/simple/price"


def build_simple_price_params(asset_ids: Sequence[str]) -> dict[str, str]:
    return {
        "ids": ",".join(asset_ids),
        "vs_currencies": "usd",
        "include_market_cap": "true",
        "include_24hr_vol": "true",
        "include_24hr_change": "true",
    }


def build_client(settings: Settings) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.default_api_timeout_seconds, follow_redirects=True
    )


async def fetch_simple_prices(
    asset_ids: Sequence[str],
    *,
    client: httpx.AsyncClient | None = None,
    settings: Settings | None = None,
) -> dict[str, Any]:
    """Issue one GET for all ``asset_ids`` and return the decoded JSON object.

    There is no retry: a transport error or non-2xx status fails the whole
    batch with ``PriceFetchError``. A body that is not a JSON object raises
    ``PriceDataError``.
    """
    settings = settings or get_settings()
    url = settings.coingecko_base_url.rstrip("/") + SIMPLE_PRICE_PATH
    params = build_simple_price_params(asset_ids)

    try:
        if client is None:
            async with build_client(settings) as owned:
                response = await owned.get(url, params=params)
        else:
            response = await client.get(url, params=params)
    except httpx.HTTPError as exc:
        logger.error("Error fetching crypto prices: %s", exc)
        raise PriceFetchError(f"Price source unreachable: {exc}") from exc

    if not response.is_success:
        logger.error("Error fetching crypto prices: status %s", response.status_code)
        raise PriceFetchError(f"API error: {response.status_code}", status_code=response.status_code)

    try:
        payload = response.json()
    except ValueError as exc:
        raise PriceDataError(f"Price source returned invalid JSON: {exc}") from exc

    if not isinstance(payload, dict):
        raise PriceDataError(f"Expected a JSON object, got {type(payload).__name__}")
    return payload
