from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from crypto_price_agent.errors import ServiceNotFoundError
from crypto_price_agent.plugin.capabilities import Service

if TYPE_CHECKING:
    from crypto_price_agent.runtime.agent_runtime import AgentRuntime

logger = logging.getLogger(__name__)


class StarterService(Service):
    service_type = "starter"
    capability_description = (
        "This is a starter service which is attached to the agent through the starter plugin."
    )

    @classmethod
    async def start(cls, runtime: "AgentRuntime") -> "StarterService":
        logger.info("*** Starting starter service ***")
        return cls(runtime)

    @classmethod
    async def stop_for(cls, runtime: "AgentRuntime") -> None:
        """Stop the instance registered on ``runtime``."""
        logger.info("*** Stopping starter service ***")
        service = runtime.get_service(cls.service_type)
        if service is None:
            raise ServiceNotFoundError("Starter service not found")
        await service.stop()

    async def stop(self) -> None:
        logger.info("*** Stopping starter service instance ***")
