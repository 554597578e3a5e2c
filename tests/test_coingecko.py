from __future__ import annotations

import httpx
import pytest

from crypto_price_agent.errors import PriceDataError, PriceFetchError
from crypto_price_agent.pricing.coingecko import build_client, fetch_simple_prices


def _client(handler) -> httpx.AsyncClient:
    return httpx.AsyncClient(transport=httpx.MockTransport(handler))


@pytest.mark.asyncio
async def test_single_get_with_joined_ids(settings):
    seen: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        seen.append(request)
        return httpx.Response(200, json={"bitcoin": {"usd": 1}, "solana": {"usd": 2}})

    async with _client(handler) as client:
        payload = await fetch_simple_prices(["bitcoin", "solana"], client=client, settings=settings)

    assert payload == {"bitcoin": {"usd": 1}, "solana": {"usd": 2}}
    assert len(seen) == 1
    request = seen[0]
    assert request.method == "GET"
    assert str(request.url).startswith("https://coingecko.test/api/v3/simple/price")
    assert dict(request.url.params) == {
        "ids": "bitcoin,solana",
        "vs_currencies": "usd",
        "include_market_cap": "true",
        "include_24hr_vol": "true",
        "include_24hr_change": "true",
    }


@pytest.mark.asyncio
async def test_non_ok_status_fails_whole_batch(settings):
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(429, json={"bitcoin": {"usd": 1}})

    async with _client(handler) as client:
        with pytest.raises(PriceFetchError) as excinfo:
            await fetch_simple_prices(["bitcoin"], client=client, settings=settings)

    assert excinfo.value.status_code == 429
    assert str(excinfo.value) == "API error: 429"
    assert len(calls) == 1


@pytest.mark.asyncio
async def test_transport_error_is_wrapped(settings):
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    async with _client(handler) as client:
        with pytest.raises(PriceFetchError, match="connection refused"):
            await fetch_simple_prices(["bitcoin"], client=client, settings=settings)


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "response",
    [
        httpx.Response(200, json=[{"usd": 1}]),
        httpx.Response(200, text="<html>maintenance</html>"),
    ],
)
async def test_unreadable_body_raises_data_error(settings, response):
    async with _client(lambda request: response) as client:
        with pytest.raises(PriceDataError):
            await fetch_simple_prices(["bitcoin"], client=client, settings=settings)


@pytest.mark.asyncio
async def test_owned_client_follows_redirects(settings):
    client = build_client(settings)
    try:
        assert client.follow_redirects is True
        assert client.timeout == httpx.Timeout(20)
    finally:
        await client.aclose()
