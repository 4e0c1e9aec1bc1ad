"""Assemble chat-completion request payloads."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any

from ..chat.history import Message
from ..settings import LLMSettings
from .constants import CONTEXT_WINDOW, SYSTEM_PROMPT

__all__ = ["PreparedChatRequest", "build_chat_request", "build_request_messages"]


@dataclass(frozen=True, slots=True)
class PreparedChatRequest:
    """Keyword arguments for ``chat.completions.create`` plus the message list."""

    request_args: dict[str, Any]
    messages: tuple[dict[str, str], ...]


def build_request_messages(
    history: Sequence[Message],
    new_message: Message,
    *,
    context_window: int = CONTEXT_WINDOW,
    system_prompt: str = SYSTEM_PROMPT,
) -> list[dict[str, str]]:
    """Return the system instruction, the trailing context and *new_message*.

    Only the last *context_window* entries of *history* are included, in their
    original order; *new_message* is always last.
    """
    messages = [{"role": "system", "content": system_prompt}]
    if context_window > 0:
        messages.extend(message.to_request() for message in history[-context_window:])
    messages.append(new_message.to_request())
    return messages


def build_chat_request(
    messages: Sequence[dict[str, str]],
    settings: LLMSettings,
) -> PreparedChatRequest:
    snapshot = tuple(dict(message) for message in messages)
    request_args: dict[str, Any] = {
        "model": settings.model,
        "messages": [dict(message) for message in snapshot],
        "temperature": settings.temperature,
    }
    return PreparedChatRequest(request_args=request_args, messages=snapshot)
