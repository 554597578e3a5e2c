from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import APIRouter, FastAPI, HTTPException, Request
from pydantic import BaseModel

from crypto_price_agent.character import build_character
from crypto_price_agent.config.settings import get_settings
from crypto_price_agent.errors import CryptoAgentError, UnknownActionError
from crypto_price_agent.plugin.routes import build_router
from crypto_price_agent.plugin.schemas import Message
from crypto_price_agent.plugin.spec import PluginSpec
from crypto_price_agent.plugin.starter import build_plugin
from crypto_price_agent.runtime import AgentRuntime

logger = logging.getLogger(__name__)


class MessageRequest(BaseModel):
    text: str
    source: str | None = None
    action: str | None = None


def create_app(plugin: PluginSpec | None = None) -> FastAPI:
    settings = get_settings()
    plugin = plugin or build_plugin(settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        runtime = AgentRuntime(character=build_character(settings))
        await runtime.register_plugin(plugin)
        app.state.runtime = runtime
        try:
            yield
        finally:
            await runtime.stop()
            app.state.runtime = None

    app = FastAPI(title="CryptoPrice Agent API", lifespan=lifespan)
    router = APIRouter(prefix="/api")

    @router.get("/health")
    def health_check():
        return {"status": "ok"}

    @router.get("/plugin")
    def describe_plugin():
        return plugin.describe()

    @router.get("/character")
    def describe_character(request: Request):
        return request.app.state.runtime.character.to_dict()

    @router.post("/messages")
    async def post_message(body: MessageRequest, request: Request):
        runtime: AgentRuntime = request.app.state.runtime
        message = Message.from_text(body.text, source=body.source)
        try:
            outcome = await runtime.process_message(message, action_name=body.action)
        except UnknownActionError as e:
            raise HTTPException(status_code=404, detail=str(e))
        except CryptoAgentError as e:
            logger.error("Message %s failed: %s", message.id, e)
            raise HTTPException(status_code=500, detail=str(e))
        return {"message_id": message.id, **outcome.to_dict()}

    app.include_router(router)
    app.include_router(build_router(plugin.routes))
    return app


app = create_app()
