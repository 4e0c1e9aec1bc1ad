"""Editable text with a character-indexed cursor."""

from __future__ import annotations

__all__ = ["TextEditBuffer"]


class TextEditBuffer:
    """Text content plus a cursor kept within ``0..len(text)``.

    Mutators return ``True`` when the content changed. Cursor moves never
    report a change.
    """

    __slots__ = ("_text", "_cursor")

    def __init__(self, text: str = "") -> None:
        self._text = text
        self._cursor = len(text)

    @property
    def text(self) -> str:
        return self._text

    @property
    def cursor(self) -> int:
        return self._cursor

    def __len__(self) -> int:
        return len(self._text)

    def __repr__(self) -> str:
        return f"TextEditBuffer(text={self._text!r}, cursor={self._cursor})"

    def insert_char(self, char: str) -> bool:
        if len(char) != 1:
            raise ValueError(f"expected a single character, got {char!r}")
        self._text = self._text[: self._cursor] + char + self._text[self._cursor :]
        self._cursor += 1
        return True

    def insert_newline(self) -> bool:
        return self.insert_char("\n")

    def delete_backward(self) -> bool:
        if self._cursor == 0:
            return False
        self._text = self._text[: self._cursor - 1] + self._text[self._cursor :]
        self._cursor -= 1
        return True

    def move_left(self) -> bool:
        self._cursor = max(self._cursor - 1, 0)
        return False

    def move_right(self) -> bool:
        self._cursor = min(self._cursor + 1, len(self._text))
        return False

    def clear(self) -> bool:
        changed = bool(self._text)
        self._text = ""
        self._cursor = 0
        return changed

    def display_text(self, cursor_glyph: str = "|") -> str:
        """Return the content with *cursor_glyph* inserted at the cursor."""
        return self._text[: self._cursor] + cursor_glyph + self._text[self._cursor :]

    def set_text(self, text: str) -> bool:
        """Replace the content and put the cursor at its end."""
        changed = text != self._text
        self._text = text
        self._cursor = len(text)
        return changed
