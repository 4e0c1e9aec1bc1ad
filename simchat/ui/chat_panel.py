"""wx panel hosting the chat transcript, the input box and the frame loop."""

from __future__ import annotations

import logging
from collections.abc import Callable

import wx

from ..chat.commands import ChatCommand
from ..chat.controller import ChatSessionController
from ..chat.layout import ResizeDirection
from .host import ScreenDims, ScreenPt, Style, WidgetImpl, WidgetOutput
from .input_widget import MultilineTextBox
from .keys import Key
from .wx_host import WxCanvas, WxFrameInput, wx_colour

logger = logging.getLogger(__name__)

__all__ = ["ChatPanel", "TextBoxHost"]

INPUT_NAME = "chat_input"
_TITLE = "LLM Chat"
_SEND_LABEL = "Send"
_PENDING_LABEL = "..."
_H_ALIGN_PCT = 0.02
_V_ALIGN_PCT = 0.65
_PADDING = 8


class TextBoxHost(wx.Panel):
    """Native child window that lays out, feeds and paints one :class:`WidgetImpl`."""

    def __init__(self, parent: wx.Window, widget: WidgetImpl, style: Style) -> None:
        super().__init__(parent, style=wx.WANTS_CHARS)
        self.SetBackgroundStyle(wx.BG_STYLE_PAINT)
        self._style = style
        self.input = WxFrameInput(self)
        self.widget = widget
        self.Bind(wx.EVT_PAINT, self._on_paint)

    @property
    def widget(self) -> WidgetImpl:
        return self._widget

    @widget.setter
    def widget(self, widget: WidgetImpl) -> None:
        self._widget = widget
        dims = widget.measure()
        size = wx.Size(int(round(dims.width)), int(round(dims.height)))
        self.SetMinSize(size)
        self.SetSize(size)
        widget.layout(ScreenPt(0.0, 0.0))
        self.input.mark_mouse_dirty()
        self.Refresh()

    def run_frame(self) -> tuple[WidgetOutput, Key | None]:
        """Deliver this frame's input to the widget; return its output and any leftover key."""
        output = WidgetOutput()
        self.input.begin_frame()
        self._widget.handle_event(self.input, output)
        leftover = self.input.end_frame()
        if output.redraw or output.outcome is not None:
            self.Refresh()
        return output, leftover

    def _on_paint(self, _event: wx.PaintEvent) -> None:
        dc = wx.AutoBufferedPaintDC(self)
        dc.SetBackground(wx.Brush(wx_colour(self._style.panel_bg)))
        dc.Clear()
        gc = wx.GraphicsContext.Create(dc)
        if gc is None:  # pragma: no cover - backend without graphics context
            return
        self._widget.draw(WxCanvas(gc, self.GetFont(), self._style))


class ChatPanel(wx.Panel):
    """Chat overlay driven by a :class:`ChatSessionController`.

    A ``wx.Timer`` provides the frame tick: each tick polls the pending
    request, runs the input widget, and hands any parsed directive to
    ``on_command``. Keys the input box leaves unconsumed go to ``on_shortcut``.
    """

    def __init__(
        self,
        parent: wx.Window,
        controller: ChatSessionController,
        *,
        on_command: Callable[[ChatCommand], None] | None = None,
        on_shortcut: Callable[[Key], None] | None = None,
        frame_interval_ms: int = 33,
        style: Style | None = None,
    ) -> None:
        super().__init__(parent)
        self._controller = controller
        self._on_command = on_command
        self._on_shortcut = on_shortcut
        self._style = style or Style()
        self.SetBackgroundColour(wx_colour(self._style.panel_bg))
        self.SetForegroundColour(wx_colour(self._style.text_primary))

        self._build_ui()
        self._apply_geometry()

        parent.Bind(wx.EVT_SIZE, self._on_parent_size)
        self.GetTopLevelParent().Bind(wx.EVT_CHAR_HOOK, self._on_char_hook)
        self._timer = wx.Timer(self)
        self.Bind(wx.EVT_TIMER, self._on_frame, self._timer)
        self._timer.Start(frame_interval_ms)

    # ------------------------------------------------------------------
    @property
    def controller(self) -> ChatSessionController:
        return self._controller

    def Destroy(self) -> bool:  # pragma: no cover - exercised via GUI runs
        self._timer.Stop()
        return super().Destroy()

    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        outer = wx.BoxSizer(wx.VERTICAL)

        header = wx.BoxSizer(wx.HORIZONTAL)
        title = wx.StaticText(self, label=_TITLE)
        title.SetFont(title.GetFont().Bold())
        header.Add(title, 0, wx.ALIGN_CENTER_VERTICAL | wx.RIGHT, 10)
        smaller = wx.Button(self, label="-", style=wx.BU_EXACTFIT)
        larger = wx.Button(self, label="+", style=wx.BU_EXACTFIT)
        smaller.Bind(wx.EVT_BUTTON, lambda _evt: self._resize(ResizeDirection.SHRINK))
        larger.Bind(wx.EVT_BUTTON, lambda _evt: self._resize(ResizeDirection.GROW))
        header.Add(smaller, 0, wx.ALIGN_CENTER_VERTICAL)
        header.Add(larger, 0, wx.ALIGN_CENTER_VERTICAL | wx.LEFT, 4)
        outer.Add(header, 0, wx.ALL, _PADDING)

        self._transcript = wx.BoxSizer(wx.VERTICAL)
        outer.Add(self._transcript, 1, wx.LEFT | wx.RIGHT | wx.EXPAND, _PADDING)

        bottom = wx.BoxSizer(wx.HORIZONTAL)
        self._text_host = TextBoxHost(self, self._make_input_widget(), self._style)
        bottom.Add(self._text_host, 0, wx.RIGHT, 6)
        self._send_btn = wx.Button(self, label=_SEND_LABEL)
        self._send_btn.Bind(wx.EVT_BUTTON, self._on_send)
        bottom.Add(self._send_btn, 0, wx.ALIGN_CENTER_VERTICAL)
        outer.Add(bottom, 0, wx.ALL, _PADDING)

        self.SetSizer(outer)

    def _make_input_widget(self) -> MultilineTextBox:
        width, height = self._window_size()
        input_w, input_h = self._controller.geometry.input_size(width, height)
        return MultilineTextBox(
            INPUT_NAME,
            self._controller.rebuild_input_buffer(),
            ScreenDims(input_w, input_h),
        )

    def _window_size(self) -> tuple[float, float]:
        width, height = self.GetParent().GetClientSize()
        return float(max(width, 1)), float(max(height, 1))

    # ------------------------------------------------------------------
    def _apply_geometry(self) -> None:
        """Size and place the panel from the controller's percentages."""
        width, height = self._window_size()
        geometry = self._controller.geometry
        panel_w, panel_h = geometry.panel_size(width, height)
        x = _H_ALIGN_PCT * (width - panel_w)
        y = _V_ALIGN_PCT * (height - panel_h)
        self.SetSize(int(x), int(y), int(panel_w), int(panel_h))
        self._render_transcript()
        self._refresh_send_label()
        self.Layout()

    def _rebuild_input(self) -> None:
        self._text_host.widget = self._make_input_widget()

    def _render_transcript(self) -> None:
        self._transcript.Clear(delete_windows=True)
        width, _height = self._window_size()
        wrap = int(self._controller.geometry.transcript_wrap_width(width))
        for message in self._controller.visible_messages():
            label = wx.StaticText(self, label=message.display_text())
            label.Wrap(max(wrap, 1))
            self._transcript.Add(label, 0, wx.TOP, 4)
        self.Layout()

    def _refresh_send_label(self) -> None:
        label = _PENDING_LABEL if self._controller.is_awaiting_reply else _SEND_LABEL
        if self._send_btn.GetLabel() != label:
            self._send_btn.SetLabel(label)

    # ------------------------------------------------------------------
    def _resize(self, direction: ResizeDirection) -> None:
        if self._controller.resize(direction):
            self._rebuild_input()
            self._apply_geometry()

    def _on_send(self, _event: wx.CommandEvent) -> None:
        if self._controller.submit():
            self._text_host.Refresh()
            self._render_transcript()
            self._refresh_send_label()

    def _on_parent_size(self, event: wx.SizeEvent) -> None:
        event.Skip()
        self._rebuild_input()
        self._apply_geometry()

    def _on_char_hook(self, event: wx.KeyEvent) -> None:
        if not self._text_host.input.queue_key_event(event):
            event.Skip()

    def _on_frame(self, _event: wx.TimerEvent) -> None:
        if self._controller.poll_completion():
            self._render_transcript()
            self._refresh_send_label()

        _output, leftover = self._text_host.run_frame()
        if leftover is not None and self._on_shortcut is not None:
            self._on_shortcut(leftover)

        command = self._controller.take_command()
        if command is not None:
            logger.info("Applying chat command %s", command.name)
            if self._on_command is not None:
                self._on_command(command)
