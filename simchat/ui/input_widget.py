"""Multi-line text entry widget. Enter inserts a newline."""

from __future__ import annotations

from enum import Enum

from .host import (
    Canvas,
    EdgeInsets,
    EventContext,
    Outcome,
    ScreenDims,
    ScreenPt,
    ScreenRectangle,
    WidgetOutput,
)
from .keys import Key
from .text_buffer import TextEditBuffer
from .text_layout import wrap_lines

__all__ = ["FocusState", "MultilineTextBox", "CURSOR_GLYPH"]

CURSOR_GLYPH = "|"
_CORNER_RADIUS = 2.0
_UNFOCUSED_DULL = 0.5
_PADDING = EdgeInsets(top=6.0, left=8.0, bottom=8.0, right=8.0)


class FocusState(Enum):
    UNFOCUSED = "unfocused"
    FOCUSED = "focused"


class MultilineTextBox:
    """Fixed-size text box driving a :class:`TextEditBuffer`.

    The box never grows with its content; long lines are wrapped to the
    interior width instead of scrolling.
    """

    def __init__(
        self,
        name: str,
        buffer: TextEditBuffer,
        dims: ScreenDims,
        *,
        autofocus: bool = False,
        padding: EdgeInsets = _PADDING,
    ) -> None:
        self.name = name
        self.buffer = buffer
        self.autofocus = autofocus
        self.padding = padding
        self._dims = dims
        self._top_left = ScreenPt(0.0, 0.0)
        self._focus = FocusState.FOCUSED if autofocus else FocusState.UNFOCUSED

    @property
    def focus(self) -> FocusState:
        return self._focus

    @property
    def has_focus(self) -> bool:
        return self._focus is FocusState.FOCUSED

    @property
    def text(self) -> str:
        return self.buffer.text

    @property
    def top_left(self) -> ScreenPt:
        return self._top_left

    @property
    def interior_width(self) -> float:
        return max(self._dims.width - (self.padding.left + self.padding.right), 1.0)

    # ------------------------------------------------------------------
    def measure(self) -> ScreenDims:
        return self._dims

    def layout(self, top_left: ScreenPt) -> None:
        self._top_left = top_left

    def handle_event(self, ctx: EventContext, output: WidgetOutput) -> None:
        if not self.autofocus and ctx.redo_mouseover():
            pt = ctx.cursor_position()
            inside = pt is not None and ScreenRectangle.top_left(
                self._top_left, self._dims
            ).contains(pt)
            self._focus = FocusState.FOCUSED if inside else FocusState.UNFOCUSED

        if not self.has_focus:
            return

        key = ctx.pressed_key()
        if key is None:
            return
        if key is Key.LEFT_ARROW:
            self.buffer.move_left()
        elif key is Key.RIGHT_ARROW:
            self.buffer.move_right()
        elif key is Key.BACKSPACE:
            self._record(output, self.buffer.delete_backward())
        elif key is Key.ENTER:
            self._record(output, self.buffer.insert_newline())
        else:
            shift = ctx.is_key_down(Key.LEFT_SHIFT) or ctx.is_key_down(Key.RIGHT_SHIFT)
            char = key.to_char(shift)
            if char is None:
                ctx.unconsume_event()
                return
            self._record(output, self.buffer.insert_char(char))
        output.redraw = True

    def _record(self, output: WidgetOutput, changed: bool) -> None:
        if changed:
            output.outcome = Outcome.changed(self.name)

    # ------------------------------------------------------------------
    def display_lines(self, measure) -> list[str]:
        """Return the wrapped lines, cursor glyph included, as they are drawn."""
        text = self.buffer.display_text(CURSOR_GLYPH)
        return wrap_lines(text.split("\n"), self.interior_width, measure)

    def draw(self, canvas: Canvas) -> None:
        style = canvas.style
        background = style.field_bg if self.has_focus else style.field_bg.dull(_UNFOCUSED_DULL)
        canvas.fill_rounded_rect(self._top_left, self._dims, _CORNER_RADIUS, background)
        canvas.outline_rounded_rect(
            self._top_left,
            self._dims,
            _CORNER_RADIUS,
            style.outline_thickness,
            style.outline,
        )
        origin = ScreenPt(
            self._top_left.x + self.padding.left,
            self._top_left.y + self.padding.top,
        )
        canvas.draw_lines(origin, self.display_lines(canvas.text_width), style.text_primary)
