"""Logging helpers for chat-completion traffic."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from ..telemetry import log_debug_payload, log_event

__all__ = ["log_request", "log_response"]


def _summarize_request(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Replace the message bodies with a count; full text goes to debug logs."""
    summary = {key: value for key, value in payload.items() if key != "messages"}
    messages = payload.get("messages")
    if isinstance(messages, list):
        summary["message_count"] = len(messages)
    return summary


def log_request(payload: Mapping[str, Any]) -> None:
    """Record telemetry for an outbound request."""
    log_debug_payload("LLM_REQUEST", payload)
    log_event("LLM_REQUEST", _summarize_request(payload))


def log_response(payload: Mapping[str, Any], *, start_time: float | None = None) -> None:
    """Record telemetry for an inbound response or failure."""
    log_event("LLM_RESPONSE", payload, start_time=start_time)
    log_debug_payload("LLM_RESPONSE", payload)
