from crypto_price_agent.runtime.agent_runtime import AgentRuntime, MessageOutcome

__all__ = ["AgentRuntime", "MessageOutcome"]
