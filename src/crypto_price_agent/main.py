from __future__ import annotations

import argparse
import asyncio
import json

from crypto_price_agent.config.settings import get_settings
from crypto_price_agent.logging_config import configure_logging


async def _run_prompt(prompt: str, action: str | None) -> None:
    from crypto_price_agent.character import build_character
    from crypto_price_agent.plugin.schemas import Message
    from crypto_price_agent.plugin.starter import build_plugin
    from crypto_price_agent.runtime import AgentRuntime

    settings = get_settings()
    runtime = AgentRuntime(character=build_character(settings))
    await runtime.register_plugin(build_plugin(settings))
    try:
        outcome = await runtime.process_message(
            Message.from_text(prompt, source="cli"), action_name=action
        )
    finally:
        await runtime.stop()

    if outcome.response is None:
        print("No action matched this message.")
        return
    print(outcome.response.text)
    print(f"\n[action] {outcome.action} (success={outcome.result.success})")


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the CryptoPrice agent")
    parser.add_argument("prompt", nargs="?", help="Message to send to the agent")
    parser.add_argument(
        "--action", help="Run this action (name or simile) if its gate accepts the message"
    )
    parser.add_argument(
        "--list-actions", action="store_true", help="List the plugin's actions"
    )
    parser.add_argument(
        "--show-character", action="store_true", help="Print the character definition as JSON"
    )
    parser.add_argument("--server", action="store_true", help="Start the API server")
    parser.add_argument("--host", default="0.0.0.0", help="Host to bind the server to")
    parser.add_argument(
        "--port", type=int, default=8000, help="Port to run the server on"
    )
    parser.add_argument("--reload", action="store_true", help="Enable hot reloading")
    args = parser.parse_args()

    settings = get_settings()
    configure_logging(settings)

    if args.list_actions:
        from crypto_price_agent.plugin.starter import build_plugin

        for action in build_plugin(settings).actions:
            print(f"- {action.name}: {action.description}")
        return

    if args.show_character:
        from crypto_price_agent.character import build_character

        print(json.dumps(build_character(settings).to_dict(), indent=2))
        return

    if args.server:
        import uvicorn

        print(
            f"Starting server on {args.host}:{args.port} (reload={'on' if args.reload else 'off'})"
        )
        if args.reload:
            # When reloading, pass the import string instead of the app object
            uvicorn.run(
                "crypto_price_agent.api:app", host=args.host, port=args.port, reload=True
            )
        else:
            from crypto_price_agent.api import app

            uvicorn.run(app, host=args.host, port=args.port)
        return

    if not args.prompt:
        raise SystemExit(
            "Provide a prompt or use --list-actions / --show-character / --server"
        )

    asyncio.run(_run_prompt(args.prompt, args.action))


if __name__ == "__main__":
    main()
