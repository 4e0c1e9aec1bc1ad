"""Tests for the text edit buffer."""

import random

import pytest

from simchat.ui.text_buffer import TextEditBuffer

pytestmark = pytest.mark.core


def test_prefilled_buffer_places_cursor_at_end() -> None:
    buffer = TextEditBuffer("hello")
    assert buffer.text == "hello"
    assert buffer.cursor == 5


def test_insert_then_delete_twice_leaves_first_char() -> None:
    buffer = TextEditBuffer()
    for char in "abc":
        assert buffer.insert_char(char) is True
    assert buffer.delete_backward() is True
    assert buffer.delete_backward() is True
    assert buffer.text == "a"
    assert buffer.cursor == 1


def test_delete_backward_at_start_is_noop() -> None:
    buffer = TextEditBuffer("xy")
    buffer.move_left()
    buffer.move_left()
    assert buffer.delete_backward() is False
    assert buffer.text == "xy"
    assert buffer.cursor == 0


def test_insert_in_the_middle() -> None:
    buffer = TextEditBuffer("ac")
    buffer.move_left()
    buffer.insert_char("b")
    assert buffer.text == "abc"
    assert buffer.cursor == 2
    buffer.insert_newline()
    assert buffer.text == "ab\nc"
    assert buffer.cursor == 3


def test_moves_clamp_and_do_not_report_changes() -> None:
    buffer = TextEditBuffer("ab")
    assert buffer.move_right() is False
    assert buffer.cursor == 2
    for _ in range(5):
        buffer.move_left()
    assert buffer.cursor == 0
    assert buffer.move_left() is False
    assert buffer.cursor == 0


def test_cursor_counts_characters_not_bytes() -> None:
    buffer = TextEditBuffer("héllo")
    buffer.move_left()
    buffer.move_left()
    buffer.move_left()
    buffer.delete_backward()
    assert buffer.text == "hllo"
    assert buffer.cursor == 1


def test_insert_char_rejects_multiple_characters() -> None:
    with pytest.raises(ValueError):
        TextEditBuffer().insert_char("ab")


def test_clear_resets_cursor() -> None:
    buffer = TextEditBuffer("abc")
    assert buffer.clear() is True
    assert (buffer.text, buffer.cursor) == ("", 0)
    assert buffer.clear() is False


def test_display_text_marks_cursor() -> None:
    buffer = TextEditBuffer("ab")
    buffer.move_left()
    assert buffer.display_text() == "a|b"


def test_cursor_invariant_holds_for_random_operations() -> None:
    rng = random.Random(1234)
    buffer = TextEditBuffer()
    operations = [
        lambda: buffer.insert_char(rng.choice("xyzé ")),
        buffer.insert_newline,
        buffer.delete_backward,
        buffer.move_left,
        buffer.move_right,
    ]
    for _ in range(500):
        rng.choice(operations)()
        assert 0 <= buffer.cursor <= len(buffer.text)


def test_set_text_moves_cursor_to_end() -> None:
    buffer = TextEditBuffer("abc")
    buffer.move_left()
    assert buffer.set_text("hello") is True
    assert buffer.cursor == 5
    assert buffer.set_text("hello") is False
