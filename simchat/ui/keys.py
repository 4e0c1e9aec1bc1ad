"""Keyboard keys known to the host and their printable translations."""

from __future__ import annotations

import string
from enum import Enum

__all__ = ["Key"]


class Key(Enum):
    """Physical keys reported by the host input system."""

    A = "a"
    B = "b"
    C = "c"
    D = "d"
    E = "e"
    F = "f"
    G = "g"
    H = "h"
    I = "i"  # noqa: E741
    J = "j"
    K = "k"
    L = "l"
    M = "m"
    N = "n"
    O = "o"  # noqa: E741
    P = "p"
    Q = "q"
    R = "r"
    S = "s"
    T = "t"
    U = "u"
    V = "v"
    W = "w"
    X = "x"
    Y = "y"
    Z = "z"
    NUM0 = "0"
    NUM1 = "1"
    NUM2 = "2"
    NUM3 = "3"
    NUM4 = "4"
    NUM5 = "5"
    NUM6 = "6"
    NUM7 = "7"
    NUM8 = "8"
    NUM9 = "9"
    SPACE = " "
    DOT = "."
    COMMA = ","
    SEMICOLON = ";"
    SLASH = "/"
    BACKSLASH = "\\"
    MINUS = "-"
    EQUALS = "="
    LEFT_BRACKET = "["
    RIGHT_BRACKET = "]"
    QUOTE = "'"
    BACKQUOTE = "`"
    LEFT_ARROW = "left_arrow"
    RIGHT_ARROW = "right_arrow"
    UP_ARROW = "up_arrow"
    DOWN_ARROW = "down_arrow"
    BACKSPACE = "backspace"
    ENTER = "enter"
    ESCAPE = "escape"
    TAB = "tab"
    LEFT_SHIFT = "left_shift"
    RIGHT_SHIFT = "right_shift"
    LEFT_CONTROL = "left_control"

    def to_char(self, shift: bool) -> str | None:
        """Return the character this key types, or ``None`` if it types nothing."""
        value = self.value
        if len(value) != 1:
            return None
        if value in string.ascii_lowercase:
            return value.upper() if shift else value
        if shift:
            return _SHIFTED.get(value, value)
        return value

    @classmethod
    def from_char(cls, char: str) -> Key | None:
        """Look up the unshifted key producing *char*."""
        try:
            return cls(char.lower())
        except ValueError:
            return None


# US layout
_SHIFTED = dict(
    zip(
        "1234567890-=[];'`,./\\",
        "!@#$%^&*()_+{}:\"~<>?|",
        strict=True,
    )
)
