"""Tests for the reply command parser."""

import pytest

from simchat.chat.commands import ChatCommand, parse_command

pytestmark = pytest.mark.core


@pytest.mark.parametrize(
    ("reply", "expected"),
    [
        ("Sure, ACTION: pause now", ChatCommand.PAUSE),
        ("ok. /resume", ChatCommand.RESUME),
        ("  Resume \n", ChatCommand.RESUME),
        ("PAUSE", ChatCommand.PAUSE),
        ("use /pause to stop", ChatCommand.PAUSE),
        ("hit /play when ready", ChatCommand.RESUME),
        ("action: resume", ChatCommand.RESUME),
        ("Traffic looks congested downtown.", None),
        ("please resume later", None),
        ("", None),
    ],
)
def test_parse_command(reply: str, expected: ChatCommand | None) -> None:
    assert parse_command(reply) is expected


def test_pause_wins_when_both_markers_present() -> None:
    assert parse_command("ACTION: resume ... actually ACTION: pause") is ChatCommand.PAUSE
    assert parse_command("/play then /pause") is ChatCommand.PAUSE
