"""Tests for the background fetch worker."""

import pytest

from simchat.chat.history import Message
from simchat.llm.constants import EMPTY_REPLY
from simchat.llm.errors import ProtocolError
from simchat.llm.worker import FetchResult, fetch_reply
from simchat.settings import LLMSettings
from tests.llm_utils import connection_error, llm_env, status_error

pytestmark = pytest.mark.core


def test_success_returns_reply_text(fake_openai) -> None:
    fake_openai("ACTION: resume")
    result = fetch_reply([], Message.user("go"), environ=llm_env())
    assert result == FetchResult.success("ACTION: resume")
    assert result.ok


def test_empty_choice_list_returns_placeholder(fake_openai) -> None:
    fake_openai({"choices": []})
    result = fetch_reply([], Message.user("go"), environ=llm_env())
    assert result.content == EMPTY_REPLY


def test_missing_key_fails_before_any_request(fake_openai) -> None:
    fake = fake_openai("never")
    result = fetch_reply([], Message.user("go"), environ=llm_env(api_key=None))
    assert result == FetchResult.failure("Missing DEEPSEEK_API_KEY env var")
    assert not result.ok
    assert fake.instances == []


def test_blank_key_counts_as_missing(fake_openai) -> None:
    fake_openai("never")
    result = fetch_reply([], Message.user("go"), environ=llm_env(api_key="   "))
    assert result.error == "Missing DEEPSEEK_API_KEY env var"


@pytest.mark.parametrize(
    ("error", "fragment"),
    [
        (status_error(503, "overloaded"), "HTTP 503"),
        (connection_error(), "Connection failed"),
    ],
)
def test_transport_problems_become_failures(fake_openai, error, fragment) -> None:
    fake_openai(error)
    result = fetch_reply([], Message.user("go"), environ=llm_env())
    assert not result.ok
    assert fragment in result.error


def test_shape_problems_become_failures(fake_openai) -> None:
    fake_openai({"choices": "broken"})
    result = fetch_reply([], Message.user("go"), environ=llm_env())
    assert result.error == "response 'choices' is not a list"


def test_unexpected_exceptions_are_captured() -> None:
    def exploding_factory(settings):
        raise KeyError("boom")

    result = fetch_reply(
        [], Message.user("go"), environ=llm_env(), client_factory=exploding_factory
    )
    assert result.error == "KeyError: 'boom'"


def test_environment_overrides_base_url_and_defaults_fill_the_rest(fake_openai) -> None:
    fake = fake_openai("ok")
    defaults = LLMSettings(model="deepseek-reasoner", timeout_minutes=5)
    fetch_reply(
        [Message.system("Chatbox ready.")],
        Message.user("go"),
        environ=llm_env(base_url="https://proxy.local/v1/"),
        defaults=defaults,
    )
    assert fake.instances[0]["base_url"] == "https://proxy.local/v1"
    assert fake.instances[0]["timeout"] == 300
    assert fake.requests[0]["model"] == "deepseek-reasoner"
    assert len(fake.requests[0]["messages"]) == 3


def test_client_factory_receives_resolved_settings() -> None:
    seen = []

    class StubClient:
        def __init__(self, settings):
            seen.append(settings)

        def complete(self, messages):
            raise ProtocolError("bad shape")

    result = fetch_reply(
        [], Message.user("go"), environ=llm_env(api_key="sk-9"), client_factory=StubClient
    )
    assert seen[0].api_key == "sk-9"
    assert seen[0].base_url == "https://api.deepseek.com/v1"
    assert result == FetchResult.failure("bad shape")
