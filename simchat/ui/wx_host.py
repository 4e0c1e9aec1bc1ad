"""wxPython implementations of the widget host interface."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

import wx

from .host import Colour, ScreenDims, ScreenPt, Style
from .keys import Key

__all__ = ["WxCanvas", "WxFrameInput", "key_from_wx", "wx_colour"]

_SPECIAL_KEYS = {
    wx.WXK_LEFT: Key.LEFT_ARROW,
    wx.WXK_RIGHT: Key.RIGHT_ARROW,
    wx.WXK_UP: Key.UP_ARROW,
    wx.WXK_DOWN: Key.DOWN_ARROW,
    wx.WXK_BACK: Key.BACKSPACE,
    wx.WXK_RETURN: Key.ENTER,
    wx.WXK_NUMPAD_ENTER: Key.ENTER,
    wx.WXK_ESCAPE: Key.ESCAPE,
    wx.WXK_TAB: Key.TAB,
    wx.WXK_SPACE: Key.SPACE,
    wx.WXK_SHIFT: Key.LEFT_SHIFT,
    wx.WXK_CONTROL: Key.LEFT_CONTROL,
}

_MODIFIER_CODES = {
    Key.LEFT_SHIFT: wx.WXK_SHIFT,
    Key.RIGHT_SHIFT: wx.WXK_SHIFT,
    Key.LEFT_CONTROL: wx.WXK_CONTROL,
}


def key_from_wx(key_code: int) -> Key | None:
    """Map a ``wx.KeyEvent.GetKeyCode()`` value to a :class:`Key`."""
    special = _SPECIAL_KEYS.get(key_code)
    if special is not None:
        return special
    if 0 < key_code < 128:
        return Key.from_char(chr(key_code))
    return None


def wx_colour(colour: Colour) -> wx.Colour:
    return wx.Colour(colour.r, colour.g, colour.b, colour.a)


class WxFrameInput:
    """Collect key and pointer events for one window between frame ticks.

    Keys are queued as they arrive and released one per frame by
    :meth:`begin_frame`. A key that no widget consumed (or that a widget
    explicitly unconsumed) is returned by :meth:`end_frame` so the host can
    apply its own shortcuts.
    """

    def __init__(self, window: wx.Window) -> None:
        self._window = window
        self._queue: deque[Key] = deque()
        self._current: Key | None = None
        self._consumed = False
        self._mouse_dirty = True

        window.Bind(wx.EVT_MOTION, self._on_mouse)
        window.Bind(wx.EVT_ENTER_WINDOW, self._on_mouse)
        window.Bind(wx.EVT_LEAVE_WINDOW, self._on_mouse)

    # ------------------------------------------------------------------
    def queue_key_event(self, event: wx.KeyEvent) -> bool:
        """Queue the key of *event*; return ``False`` when it is not ours to handle."""
        key = key_from_wx(event.GetKeyCode())
        if key is None or key in _MODIFIER_CODES:
            return False
        self._queue.append(key)
        return True

    def mark_mouse_dirty(self) -> None:
        self._mouse_dirty = True

    def begin_frame(self) -> None:
        self._current = self._queue.popleft() if self._queue else None
        self._consumed = False

    def end_frame(self) -> Key | None:
        leftover = None if self._consumed else self._current
        self._current = None
        self._mouse_dirty = False
        return leftover

    # EventContext -----------------------------------------------------
    def redo_mouseover(self) -> bool:
        return self._mouse_dirty

    def cursor_position(self) -> ScreenPt | None:
        window = self._window
        pos = window.ScreenToClient(wx.GetMousePosition())
        width, height = window.GetClientSize()
        if not (0 <= pos.x < width and 0 <= pos.y < height):
            return None
        return ScreenPt(float(pos.x), float(pos.y))

    def pressed_key(self) -> Key | None:
        if self._consumed or self._current is None:
            return None
        self._consumed = True
        return self._current

    def unconsume_event(self) -> None:
        self._consumed = False

    def is_key_down(self, key: Key) -> bool:
        code = _MODIFIER_CODES.get(key)
        if code is None:
            return False
        return wx.GetKeyState(code)

    # ------------------------------------------------------------------
    def _on_mouse(self, event: wx.MouseEvent) -> None:
        event.Skip()
        self._mouse_dirty = True


class WxCanvas:
    """:class:`~simchat.ui.host.Canvas` drawing through a ``wx.GraphicsContext``."""

    def __init__(self, gc: wx.GraphicsContext, font: wx.Font, style: Style | None = None) -> None:
        self._gc = gc
        self._font = font
        self.style = style or Style()
        gc.SetFont(font, wx_colour(self.style.text_primary))
        self._line_height = float(gc.GetTextExtent("Ag")[1])

    def text_width(self, text: str) -> float:
        return float(self._gc.GetTextExtent(text)[0])

    def fill_rounded_rect(
        self, top_left: ScreenPt, dims: ScreenDims, radius: float, colour: Colour
    ) -> None:
        gc = self._gc
        gc.SetPen(wx.TRANSPARENT_PEN)
        gc.SetBrush(wx.Brush(wx_colour(colour)))
        gc.DrawRoundedRectangle(top_left.x, top_left.y, dims.width, dims.height, radius)

    def outline_rounded_rect(
        self,
        top_left: ScreenPt,
        dims: ScreenDims,
        radius: float,
        thickness: float,
        colour: Colour,
    ) -> None:
        gc = self._gc
        gc.SetPen(wx.Pen(wx_colour(colour), max(int(thickness), 1)))
        gc.SetBrush(wx.TRANSPARENT_BRUSH)
        inset = thickness / 2.0
        gc.DrawRoundedRectangle(
            top_left.x + inset,
            top_left.y + inset,
            dims.width - thickness,
            dims.height - thickness,
            radius,
        )

    def draw_lines(self, top_left: ScreenPt, lines: Sequence[str], colour: Colour) -> None:
        self._gc.SetFont(self._font, wx_colour(colour))
        for index, line in enumerate(lines):
            self._gc.DrawText(line, top_left.x, top_left.y + index * self._line_height)
