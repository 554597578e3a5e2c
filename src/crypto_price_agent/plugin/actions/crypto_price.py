"""GET_CRYPTO_PRICE: keyword resolution, one CoinGecko query, formatted reply."""

from __future__ import annotations

import logging

from crypto_price_agent.plugin.capabilities import ActionSpec, State
from crypto_price_agent.plugin.schemas import ActionResult, Content, ExampleTurn, Message, now_millis
from crypto_price_agent.plugin.sink import ResponseSink
from crypto_price_agent.pricing.coingecko import fetch_simple_prices
from crypto_price_agent.pricing.formatter import format_price_report
from crypto_price_agent.pricing.resolver import mentions_crypto, resolve_asset_ids

logger = logging.getLogger(__name__)

ACTION_NAME = "GET_CRYPTO_PRICE"
FAILURE_TEXT = (
    "Sorry, I could not fetch the cryptocurrency prices at this moment. "
    "Please try again later."
)


async def validate_crypto_price(_runtime, message: Message, _state: State) -> bool:
    return mentions_crypto(message.content.text)


async def handle_crypto_price(_runtime, message: Message, _state: State, sink: ResponseSink) -> ActionResult:
    asset_ids = resolve_asset_ids(message.content.text)
    try:
        logger.info("Handling %s action", ACTION_NAME)
        logger.info("Fetching prices for: %s", ", ".join(asset_ids))

        prices = await fetch_simple_prices(asset_ids)
        report = format_price_report(prices)
        logger.debug("Prices received: %s", prices)

        await sink.emit(Content(text=report, actions=[ACTION_NAME]))
        return ActionResult(
            text="Fetched cryptocurrency prices successfully",
            values={"success": True, "cryptos": asset_ids, "priceData": prices},
            data={"actionName": ACTION_NAME, "timestamp": now_millis()},
            success=True,
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("Error in %s action: %s", ACTION_NAME, exc)
        if not sink.sent:
            await sink.emit(Content(text=FAILURE_TEXT, actions=[ACTION_NAME], error=True))
        return ActionResult(
            text="Failed to fetch cryptocurrency prices",
            values={"success": False, "cryptos": asset_ids, "error": "PRICE_FETCH_FAILED"},
            data={"actionName": ACTION_NAME, "error": str(exc)},
            success=False,
            error=str(exc) or type(exc).__name__,
        )


action = ActionSpec(
    name=ACTION_NAME,
    description="Fetches current cryptocurrency prices from CoinGecko API",
    validator=validate_crypto_price,
    handler=handle_crypto_price,
    similes=["FETCH_PRICE", "CHECK_CRYPTO", "CRYPTO_PRICE"],
    examples=[
        [
            ExampleTurn(name="{{name1}}", content=Content(text="What is the price of Bitcoin?")),
            ExampleTurn(
                name="CryptoPrice",
                content=Content(
                    text="Current cryptocurrency prices:\n\nBITCOIN: $45,230 USD (+5.2% 24h)",
                    actions=[ACTION_NAME],
                ),
            ),
        ]
    ],
    priority=10,
)
