"""Extract reply text from chat-completion responses."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .constants import EMPTY_REPLY
from .errors import ProtocolError

__all__ = ["parse_chat_completion"]

_MISSING = object()


def _field(obj: Any, name: str) -> Any:
    """Read *name* from a mapping or an SDK model object."""
    if isinstance(obj, Mapping):
        return obj.get(name, _MISSING)
    return getattr(obj, name, _MISSING)


def parse_chat_completion(completion: Any) -> str:
    """Return the first choice's message content.

    Accepts the ``openai`` SDK objects as well as plain decoded JSON. An empty
    ``choices`` list yields :data:`EMPTY_REPLY`; any other deviation from the
    ``{"choices": [{"message": {"content": str}}]}`` shape raises
    :class:`ProtocolError`.
    """
    choices = _field(completion, "choices")
    if choices is _MISSING or choices is None:
        raise ProtocolError("response has no 'choices' field")
    if isinstance(choices, (str, bytes)) or not isinstance(choices, Sequence):
        raise ProtocolError("response 'choices' is not a list")
    if not choices:
        return EMPTY_REPLY
    message = _field(choices[0], "message")
    if message is _MISSING or message is None:
        raise ProtocolError("first choice has no 'message'")
    content = _field(message, "content")
    if not isinstance(content, str):
        raise ProtocolError("first choice message has no text content")
    return content
