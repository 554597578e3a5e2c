from crypto_price_agent.plugin.capabilities import ProviderSpec
from crypto_price_agent.plugin.schemas import ProviderResult


async def get_hello_world(_runtime, _message, _state) -> ProviderResult:
    return ProviderResult(text="I am a provider", values={}, data={})


provider = ProviderSpec(
    name="HELLO_WORLD_PROVIDER",
    description="A simple example provider",
    getter=get_hello_world,
)
