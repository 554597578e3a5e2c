from __future__ import annotations


class CryptoAgentError(Exception):
    """Base class for errors raised by the agent and its plugin."""


class PluginConfigError(CryptoAgentError):
    """Plugin configuration failed validation during initialization."""


class PriceFetchError(CryptoAgentError):
    """The price source could not be reached or answered with a non-OK status."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class PriceDataError(CryptoAgentError):
    """The price source answered with a payload that cannot be read."""


class ResponseAlreadySentError(CryptoAgentError):
    """A response sink was asked to emit more than once."""


class ServiceNotFoundError(CryptoAgentError):
    """A service type is not registered on the runtime."""


class DuplicateRegistrationError(CryptoAgentError):
    """Two capabilities of the same kind share a name."""


class UnknownActionError(CryptoAgentError):
    """An action was requested by a name the runtime does not know."""


class UnknownModelError(CryptoAgentError):
    """No plugin registered a handler for the requested model type."""
