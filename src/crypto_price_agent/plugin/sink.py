from __future__ import annotations

from collections.abc import Awaitable, Callable

from crypto_price_agent.errors import ResponseAlreadySentError
from crypto_price_agent.plugin.schemas import Content

ResponseCallback = Callable[[Content], Awaitable[None]]


class ResponseSink:
    """Single-use output channel for one request.

    ``emit`` forwards to the optional callback and keeps the content; a second
    call raises ``ResponseAlreadySentError``.
    """

    def __init__(self, callback: ResponseCallback | None = None) -> None:
        self._callback = callback
        self._content: Content | None = None

    @property
    def sent(self) -> bool:
        return self._content is not None

    @property
    def content(self) -> Content | None:
        return self._content

    async def emit(self, content: Content) -> None:
        if self._content is not None:
            raise ResponseAlreadySentError("Response already sent for this request")
        self._content = content
        if self._callback is not None:
            await self._callback(content)
