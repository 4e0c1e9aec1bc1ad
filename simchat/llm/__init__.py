"""Chat-completion integration for the simulation chat panel."""

from typing import TYPE_CHECKING, Any

__all__ = ["ChatCompletionClient", "FetchResult", "fetch_reply"]

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from .client import ChatCompletionClient
    from .worker import FetchResult, fetch_reply


def __getattr__(name: str) -> Any:
    """Lazily expose the client and worker to keep ``import simchat.llm`` cheap."""
    if name == "ChatCompletionClient":
        from .client import ChatCompletionClient

        return ChatCompletionClient
    if name in {"FetchResult", "fetch_reply"}:
        from . import worker

        return getattr(worker, name)
    raise AttributeError(f"module 'simchat.llm' has no attribute {name!r}")
