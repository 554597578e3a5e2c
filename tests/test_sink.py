from __future__ import annotations

import pytest

from crypto_price_agent.errors import ResponseAlreadySentError
from crypto_price_agent.plugin.schemas import Content
from crypto_price_agent.plugin.sink import ResponseSink


@pytest.mark.asyncio
async def test_sink_delivers_at_most_once():
    delivered = []

    async def callback(content):
        delivered.append(content)

    sink = ResponseSink(callback)
    assert sink.sent is False

    await sink.emit(Content(text="first"))
    with pytest.raises(ResponseAlreadySentError):
        await sink.emit(Content(text="second"))

    assert [c.text for c in delivered] == ["first"]
    assert sink.content.text == "first"


@pytest.mark.asyncio
async def test_sink_without_callback_keeps_content():
    sink = ResponseSink()
    await sink.emit(Content(text="kept"))
    assert sink.sent is True
    assert sink.content.text == "kept"
