"""Background worker turning one chat turn into one completion request."""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol

from ..chat.history import Message
from ..settings import LLMSettings
from .client import ChatCompletionClient
from .errors import LLMError
from .request_builder import build_request_messages

logger = logging.getLogger(__name__)

__all__ = ["CompletionClient", "FetchResult", "fetch_reply"]


class CompletionClient(Protocol):
    def complete(self, messages: Sequence[dict[str, str]]) -> str:  # pragma: no cover - protocol
        ...


@dataclass(frozen=True, slots=True)
class FetchResult:
    """Outcome of a fetch: reply text on success, a description otherwise."""

    content: str | None = None
    error: str | None = None

    @classmethod
    def success(cls, content: str) -> FetchResult:
        return cls(content=content)

    @classmethod
    def failure(cls, error: str) -> FetchResult:
        return cls(error=error)

    @property
    def ok(self) -> bool:
        return self.error is None


def fetch_reply(
    history: Sequence[Message],
    new_message: Message,
    *,
    environ: Mapping[str, str] | None = None,
    defaults: LLMSettings | None = None,
    client_factory: Callable[[LLMSettings], CompletionClient] = ChatCompletionClient,
) -> FetchResult:
    """Request a reply for *new_message* given the prior *history*.

    Runs on a worker thread and never raises: configuration, transport and
    protocol problems are all converted into :meth:`FetchResult.failure`.
    """
    messages = build_request_messages(history, new_message)
    try:
        settings = LLMSettings.from_env(environ, defaults=defaults)
        client = client_factory(settings)
        content = client.complete(messages)
    except LLMError as exc:
        logger.warning("Chat request failed: %s: %s", type(exc).__name__, exc)
        return FetchResult.failure(str(exc))
    except Exception as exc:
        logger.exception("Unexpected failure while fetching chat reply")
        return FetchResult.failure(f"{type(exc).__name__}: {exc}")
    return FetchResult.success(content)
