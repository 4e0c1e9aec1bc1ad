"""Tests for request payload assembly."""

import pytest

from simchat.chat.history import Message
from simchat.llm.constants import SYSTEM_PROMPT
from simchat.llm.request_builder import build_chat_request, build_request_messages
from simchat.settings import LLMSettings

pytestmark = pytest.mark.core


def test_messages_start_with_system_prompt_and_end_with_new_message() -> None:
    messages = build_request_messages([], Message.user("hi"))
    assert messages == [
        {"role": "system", "content": SYSTEM_PROMPT},
        {"role": "user", "content": "hi"},
    ]


def test_only_last_eight_history_entries_are_sent() -> None:
    history = [Message.assistant(f"a{i}") for i in range(12)]
    messages = build_request_messages(history, Message.user("now"))
    assert len(messages) == 10
    assert [m["content"] for m in messages[1:-1]] == [f"a{i}" for i in range(4, 12)]


def test_short_history_is_sent_whole_with_roles() -> None:
    history = [Message.system("Chatbox ready."), Message.user("x"), Message.assistant("y")]
    messages = build_request_messages(history, Message.user("z"))
    assert [m["role"] for m in messages] == ["system", "system", "user", "assistant", "user"]


def test_chat_request_arguments() -> None:
    settings = LLMSettings(api_key="k")
    prepared = build_chat_request([{"role": "user", "content": "q"}], settings)
    assert prepared.request_args == {
        "model": "deepseek-chat",
        "messages": [{"role": "user", "content": "q"}],
        "temperature": 0.2,
    }
    assert prepared.messages == ({"role": "user", "content": "q"},)
