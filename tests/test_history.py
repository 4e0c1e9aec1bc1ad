"""Tests for chat messages and history."""

import dataclasses

import pytest

from simchat.chat.history import ChatHistory, Message, Role

pytestmark = pytest.mark.core


def test_message_is_immutable() -> None:
    message = Message.user("hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        message.content = "changed"  # type: ignore[misc]


def test_message_request_and_display_forms() -> None:
    assert Message.assistant("ok").to_request() == {"role": "assistant", "content": "ok"}
    assert Message.user("go").display_text() == "You: go"
    assert Message.assistant("ok").display_text() == "LLM: ok"
    assert Message.system("ready").display_text() == "ready"
    assert Role("system") is Role.SYSTEM


def test_tail_returns_latest_in_order() -> None:
    history = ChatHistory(Message.user(str(i)) for i in range(10))
    assert [m.content for m in history.tail(3)] == ["7", "8", "9"]
    assert history.tail(0) == ()
    assert len(history.tail(50)) == 10


def test_snapshot_is_detached_from_later_appends() -> None:
    history = ChatHistory([Message.system("a")])
    snapshot = history.snapshot()
    history.append(Message.user("b"))
    assert snapshot == (Message.system("a"),)
    assert len(history) == 2
    assert history.last == Message.user("b")
