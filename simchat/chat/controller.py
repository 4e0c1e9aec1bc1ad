"""Chat session controller decoupling request orchestration from the UI toolkit."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import Future
from enum import Enum
from functools import partial

from ..llm.execution import FetchExecutor
from ..llm.worker import FetchResult, fetch_reply
from ..settings import LLMSettings
from ..ui.text_buffer import TextEditBuffer
from .commands import ChatCommand, parse_command
from .history import DISPLAY_WINDOW, ChatHistory, Message
from .layout import PanelGeometry, ResizeDirection

logger = logging.getLogger(__name__)

__all__ = ["ChatSessionController", "SessionState", "READY_MESSAGE"]

READY_MESSAGE = "Chatbox ready."

Fetcher = Callable[[Sequence[Message], Message], FetchResult]


class SessionState(Enum):
    IDLE = "idle"
    AWAITING_REPLY = "awaiting_reply"


class ChatSessionController:
    """Own the transcript, the pending request and the command mailbox.

    Every method runs on the UI thread. The only object shared with the
    worker thread is the immutable history snapshot handed over at submit
    time, and the worker's result comes back through a single future that
    :meth:`poll_completion` inspects without blocking.
    """

    def __init__(
        self,
        *,
        executor: FetchExecutor,
        fetcher: Fetcher | None = None,
        llm_defaults: LLMSettings | None = None,
        history: ChatHistory | None = None,
        geometry: PanelGeometry | None = None,
        prefill: str = "",
    ) -> None:
        if fetcher is None:
            fetcher = partial(fetch_reply, defaults=llm_defaults)
        self._executor = executor
        self._fetcher = fetcher
        self._history = (
            history if history is not None else ChatHistory([Message.system(READY_MESSAGE)])
        )
        self._geometry = geometry or PanelGeometry()
        self._input = TextEditBuffer(prefill)
        self._pending: Future[FetchResult] | None = None
        self._command: ChatCommand | None = None

    # ------------------------------------------------------------------
    @property
    def history(self) -> ChatHistory:
        return self._history

    @property
    def geometry(self) -> PanelGeometry:
        return self._geometry

    @property
    def state(self) -> SessionState:
        if self._pending is not None:
            return SessionState.AWAITING_REPLY
        return SessionState.IDLE

    @property
    def is_awaiting_reply(self) -> bool:
        return self._pending is not None

    @property
    def input_buffer(self) -> TextEditBuffer:
        return self._input

    @property
    def input_text(self) -> str:
        return self._input.text

    @input_text.setter
    def input_text(self, value: str) -> None:
        self._input.set_text(value)

    def rebuild_input_buffer(self) -> TextEditBuffer:
        """Replace the input buffer with a fresh one holding the same text."""
        self._input = TextEditBuffer(self._input.text)
        return self._input

    # ------------------------------------------------------------------
    def submit(self, text: str | None = None) -> bool:
        """Send *text* (defaults to the input buffer) to the backend.

        Returns ``False`` without touching any state when the trimmed text is
        empty or a request is already in flight.
        """
        if self._pending is not None:
            logger.debug("Submit ignored: a reply is still pending")
            return False
        raw = self._input.text if text is None else text
        trimmed = raw.strip()
        if not trimmed:
            return False

        snapshot = self._history.snapshot()
        message = Message.user(trimmed)
        # Nothing is committed unless the executor accepts the job.
        self._pending = self._executor.submit(partial(self._fetcher, snapshot, message))
        self._history.append(message)
        self._input.clear()
        logger.debug(
            "Chat request submitted (context=%d messages)", len(snapshot)
        )
        return True

    # ------------------------------------------------------------------
    def poll_completion(self) -> bool:
        """Consume the worker's result if it has arrived; never blocks.

        Returns ``True`` when a result was consumed during this call.
        """
        future = self._pending
        if future is None or not future.done():
            return False
        self._pending = None
        try:
            result = future.result()
        except Exception as exc:
            result = FetchResult.failure(f"{type(exc).__name__}: {exc}")

        if result.ok:
            content = result.content or ""
            self._history.append(Message.assistant(content))
            self._command = parse_command(content)
            logger.debug("Chat reply received; command=%s", self._command)
        else:
            self._history.append(Message.system(f"LLM error: {result.error}"))
            logger.info("Chat request failed: %s", result.error)
        return True

    # ------------------------------------------------------------------
    def take_command(self) -> ChatCommand | None:
        """Return the pending directive once and clear the mailbox."""
        command, self._command = self._command, None
        return command

    # ------------------------------------------------------------------
    def resize(self, direction: ResizeDirection) -> bool:
        """Adjust the panel geometry one step; return ``True`` if it changed."""
        resized = self._geometry.resized(direction)
        if resized == self._geometry:
            return False
        self._geometry = resized
        return True

    # ------------------------------------------------------------------
    def visible_messages(self) -> tuple[Message, ...]:
        return self._history.tail(DISPLAY_WINDOW)
