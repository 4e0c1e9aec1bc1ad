"""Pytest configuration for the SimChat test suite."""

from __future__ import annotations

import pytest

from simchat.llm.constants import API_KEY_ENV, BASE_URL_ENV, MODEL_ENV


@pytest.fixture(autouse=True)
def _isolate_llm_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep developer credentials out of the tests."""

    for name in (API_KEY_ENV, BASE_URL_ENV, MODEL_ENV):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def fake_openai(monkeypatch: pytest.MonkeyPatch):
    """Patch ``openai.OpenAI`` with a recording fake; call it with the replies."""

    from tests.llm_utils import make_openai_mock

    def _install(*replies: object):
        fake = make_openai_mock(list(replies))
        monkeypatch.setattr("openai.OpenAI", fake)
        return fake

    return _install
