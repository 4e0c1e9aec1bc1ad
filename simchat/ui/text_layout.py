"""Greedy word wrapping against a pixel width."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable

__all__ = ["wrap_line", "wrap_lines"]

Measure = Callable[[str], float]

_TOKEN_RE = re.compile(r" +|[^ ]+")


def _split_long_word(word: str, limit: float, measure: Measure) -> list[str]:
    pieces: list[str] = []
    current = ""
    for char in word:
        candidate = current + char
        if current and measure(candidate) > limit:
            pieces.append(current)
            current = char
        else:
            current = candidate
    pieces.append(current)
    return pieces


def wrap_line(line: str, limit: float, measure: Measure) -> list[str]:
    """Wrap a single line (no newlines) so each word fits within *limit*.

    Spaces are never dropped: a run of spaces at a break stays at the end of
    the line it follows, like a text area does. Words wider than *limit* are
    broken between characters. An empty line stays one empty line.
    """
    if not line or measure(line) <= limit:
        return [line]
    wrapped: list[str] = []
    current = ""
    for token in _TOKEN_RE.findall(line):
        if token.startswith(" "):
            current += token
            continue
        candidate = current + token
        if measure(candidate) <= limit:
            current = candidate
            continue
        if current:
            wrapped.append(current)
        if measure(token) <= limit:
            current = token
            continue
        *full, current = _split_long_word(token, limit, measure)
        wrapped.extend(full)
    wrapped.append(current)
    return wrapped


def wrap_lines(lines: Iterable[str], limit: float, measure: Measure) -> list[str]:
    result: list[str] = []
    for line in lines:
        result.extend(wrap_line(line, limit, measure))
    return result
