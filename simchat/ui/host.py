"""Narrow interface between widgets and the host UI toolkit.

Widgets implement :class:`WidgetImpl` and talk to the host only through an
:class:`EventContext` while handling input and a :class:`Canvas` while
drawing. The wx implementations live in :mod:`simchat.ui.wx_host`.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol, runtime_checkable

from .keys import Key

__all__ = [
    "Canvas",
    "Colour",
    "EdgeInsets",
    "EventContext",
    "Outcome",
    "OutcomeKind",
    "ScreenDims",
    "ScreenPt",
    "ScreenRectangle",
    "Style",
    "WidgetImpl",
    "WidgetOutput",
]


@dataclass(frozen=True, slots=True)
class ScreenPt:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ScreenDims:
    width: float
    height: float


@dataclass(frozen=True, slots=True)
class ScreenRectangle:
    x1: float
    y1: float
    x2: float
    y2: float

    @classmethod
    def top_left(cls, pt: ScreenPt, dims: ScreenDims) -> ScreenRectangle:
        return cls(pt.x, pt.y, pt.x + dims.width, pt.y + dims.height)

    def contains(self, pt: ScreenPt) -> bool:
        return self.x1 <= pt.x <= self.x2 and self.y1 <= pt.y <= self.y2


@dataclass(frozen=True, slots=True)
class EdgeInsets:
    top: float
    left: float
    bottom: float
    right: float


@dataclass(frozen=True, slots=True)
class Colour:
    """RGBA colour with channels in ``0..255``."""

    r: int
    g: int
    b: int
    a: int = 255

    def dull(self, factor: float) -> Colour:
        """Return the colour blended towards transparency by *factor*."""
        return Colour(self.r, self.g, self.b, round(self.a * (1.0 - factor)))


@dataclass(frozen=True, slots=True)
class Style:
    field_bg: Colour = Colour(40, 44, 52)
    text_primary: Colour = Colour(235, 235, 235)
    outline: Colour = Colour(120, 130, 150)
    outline_thickness: float = 2.0
    panel_bg: Colour = Colour(20, 22, 28, 220)


class OutcomeKind(Enum):
    CHANGED = "changed"


@dataclass(frozen=True, slots=True)
class Outcome:
    kind: OutcomeKind
    name: str

    @classmethod
    def changed(cls, name: str) -> Outcome:
        return cls(OutcomeKind.CHANGED, name)


@dataclass(slots=True)
class WidgetOutput:
    """Filled in by a widget while it handles one frame's events."""

    outcome: Outcome | None = None
    redraw: bool = field(default=False)


class EventContext(Protocol):
    """Per-frame input state exposed by the host."""

    def redo_mouseover(self) -> bool:
        """Return ``True`` when hover state must be recomputed this frame."""

    def cursor_position(self) -> ScreenPt | None:
        """Pointer position in screen space, ``None`` when outside the window."""

    def pressed_key(self) -> Key | None:
        """Consume and return the key pressed this frame, if any."""

    def unconsume_event(self) -> None:
        """Hand the key consumed by :meth:`pressed_key` back to the host."""

    def is_key_down(self, key: Key) -> bool:
        ...


@runtime_checkable
class Canvas(Protocol):
    """Drawing surface handed to widgets during the host's paint pass."""

    style: Style

    def text_width(self, text: str) -> float:
        ...

    def fill_rounded_rect(
        self, top_left: ScreenPt, dims: ScreenDims, radius: float, colour: Colour
    ) -> None:
        ...

    def outline_rounded_rect(
        self,
        top_left: ScreenPt,
        dims: ScreenDims,
        radius: float,
        thickness: float,
        colour: Colour,
    ) -> None:
        ...

    def draw_lines(self, top_left: ScreenPt, lines: Sequence[str], colour: Colour) -> None:
        ...


@runtime_checkable
class WidgetImpl(Protocol):
    """The four lifecycle hooks the host calls on a widget."""

    def measure(self) -> ScreenDims:
        ...

    def layout(self, top_left: ScreenPt) -> None:
        ...

    def handle_event(self, ctx: EventContext, output: WidgetOutput) -> None:
        ...

    def draw(self, canvas: Canvas) -> None:
        ...
