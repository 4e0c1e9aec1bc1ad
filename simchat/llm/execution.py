"""Executors running fetch workers off the UI thread."""

from __future__ import annotations

from collections.abc import Callable
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Protocol

__all__ = ["FetchExecutor", "ThreadedFetchExecutor"]


class FetchExecutor(Protocol):
    """Simple protocol for running fetch calls asynchronously."""

    def submit(self, func: Callable[[], Any]) -> Future[Any]:  # pragma: no cover - protocol
        """Schedule ``func`` for execution and return a future with its result."""


class ThreadedFetchExecutor:
    """Fetch executor backed by a single-thread :class:`ThreadPoolExecutor`."""

    def __init__(self, pool: ThreadPoolExecutor | None = None) -> None:
        if pool is None:
            pool = ThreadPoolExecutor(
                max_workers=1,
                thread_name_prefix="SimChatFetch",
            )
        self._pool = pool

    @property
    def pool(self) -> ThreadPoolExecutor:
        return self._pool

    def submit(self, func: Callable[[], Any]) -> Future[Any]:
        return self._pool.submit(func)

    def shutdown(self) -> None:
        """Stop accepting work; a request already in flight still runs to completion."""
        self._pool.shutdown(wait=False)
