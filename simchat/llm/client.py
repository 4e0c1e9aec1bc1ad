"""Client for an OpenAI-compatible chat-completion endpoint."""

from __future__ import annotations

import time
from collections.abc import Sequence
from typing import Any

from ..settings import LLMSettings
from .errors import ConfigurationError, ProtocolError, TransportError
from .logging import log_request, log_response
from .request_builder import build_chat_request
from .response_parser import parse_chat_completion

__all__ = ["ChatCompletionClient"]


class ChatCompletionClient:
    """Blocking client performing one ``POST {base_url}/chat/completions`` per call."""

    def __init__(self, settings: LLMSettings) -> None:
        """Initialize client with connection ``settings``."""
        import openai

        if not settings.api_key:
            raise ConfigurationError("LLM API key is not configured")
        self.settings = settings
        self._openai = openai
        self._client = openai.OpenAI(
            base_url=settings.base_url,
            api_key=settings.api_key,
            timeout=settings.timeout_minutes * 60,
            max_retries=settings.max_retries,
        )

    def complete(self, messages: Sequence[dict[str, str]]) -> str:
        """Send *messages* and return the reply text.

        Raises :class:`TransportError` for connection and HTTP failures and
        :class:`ProtocolError` when the body cannot be interpreted.
        """
        prepared = build_chat_request(messages, self.settings)
        start = time.monotonic()
        log_request(prepared.request_args)
        try:
            completion = self._chat_completion(**prepared.request_args)
            content = parse_chat_completion(completion)
        except (TransportError, ProtocolError) as exc:
            log_response(
                {"error": {"type": type(exc).__name__, "message": str(exc)}},
                start_time=start,
            )
            raise
        log_response({"message": content}, start_time=start)
        return content

    def _chat_completion(self, **request_args: Any) -> Any:
        """Call the endpoint translating SDK exceptions into the local taxonomy."""
        openai = self._openai
        try:
            return self._client.chat.completions.create(**request_args)
        except openai.APIResponseValidationError as exc:
            raise ProtocolError(f"Malformed response: {exc.message}") from exc
        except openai.APIStatusError as exc:
            raise TransportError(
                f"HTTP {exc.status_code}: {exc.message}",
                status_code=exc.status_code,
            ) from exc
        except openai.APIConnectionError as exc:
            raise TransportError(f"Connection failed: {exc.message}") from exc
        except openai.APIError as exc:
            raise TransportError(exc.message) from exc
        except ValueError as exc:
            # JSON decoding of a non-JSON success body
            raise ProtocolError(f"Malformed response: {exc}") from exc
