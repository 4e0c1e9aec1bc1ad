"""Failure taxonomy for chat-completion requests."""

from __future__ import annotations

__all__ = ["ConfigurationError", "LLMError", "ProtocolError", "TransportError"]


class LLMError(RuntimeError):
    """Base class for every failure surfaced by the fetch worker."""


class ConfigurationError(LLMError):
    """Raised before any network call when required settings are missing."""


class TransportError(LLMError):
    """Raised for connection failures and non-success HTTP statuses."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class ProtocolError(LLMError):
    """Raised when the response body does not have the expected shape."""
