from __future__ import annotations

import logging

from crypto_price_agent.plugin.capabilities import ActionSpec, State
from crypto_price_agent.plugin.schemas import ActionResult, Content, ExampleTurn, Message, now_millis
from crypto_price_agent.plugin.sink import ResponseSink

logger = logging.getLogger(__name__)

ACTION_NAME = "HELLO_WORLD"
GREETING = "hello world!"


async def validate_hello_world(_runtime, _message: Message, _state: State) -> bool:
    return True


async def handle_hello_world(_runtime, message: Message, _state: State, sink: ResponseSink) -> ActionResult:
    try:
        logger.info("Handling %s action", ACTION_NAME)
        await sink.emit(
            Content(text=GREETING, actions=[ACTION_NAME], source=message.content.source)
        )
        return ActionResult(
            text="Sent hello world greeting",
            values={"success": True, "greeted": True},
            data={"actionName": ACTION_NAME, "messageId": message.id, "timestamp": now_millis()},
            success=True,
        )
    except Exception as exc:  # noqa: BLE001
        logger.error("Error in %s action: %s", ACTION_NAME, exc)
        return ActionResult(
            text="Failed to send hello world greeting",
            values={"success": False, "error": "GREETING_FAILED"},
            data={"actionName": ACTION_NAME, "error": str(exc)},
            success=False,
            error=str(exc),
        )


action = ActionSpec(
    name=ACTION_NAME,
    description="Responds with a simple hello world message",
    validator=validate_hello_world,
    handler=handle_hello_world,
    similes=["GREET", "SAY_HELLO"],
    examples=[
        [
            ExampleTurn(name="{{name1}}", content=Content(text="Can you say hello?")),
            ExampleTurn(name="{{name2}}", content=Content(text=GREETING, actions=[ACTION_NAME])),
        ]
    ],
)
