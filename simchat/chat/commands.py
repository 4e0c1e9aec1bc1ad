"""Classify free-text replies into simulation control directives."""

from __future__ import annotations

from enum import Enum

__all__ = ["ChatCommand", "parse_command"]


class ChatCommand(Enum):
    PAUSE = "pause"
    RESUME = "resume"


_PAUSE_MARKERS = ("action: pause", "/pause")
_RESUME_MARKERS = ("action: resume", "/resume", "/play")


def parse_command(reply: str) -> ChatCommand | None:
    """Return the directive embedded in *reply*, if any.

    Matching is case-insensitive. A reply that carries both pause and resume
    markers is classified as :attr:`ChatCommand.PAUSE`.
    """
    lower = reply.lower()
    bare = lower.strip()
    if bare == "pause" or any(marker in lower for marker in _PAUSE_MARKERS):
        return ChatCommand.PAUSE
    if bare == "resume" or any(marker in lower for marker in _RESUME_MARKERS):
        return ChatCommand.RESUME
    return None
