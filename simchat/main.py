"""Application entry point for the SimChat demo front-end."""

from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path

import wx

from .chat.controller import ChatSessionController
from .chat.layout import PanelGeometry
from .llm.execution import ThreadedFetchExecutor
from .log import configure_logging, install_exception_hooks, logger
from .settings import AppSettings, load_app_settings
from .simulation import SimulationClock
from .ui.chat_panel import ChatPanel
from .ui.keys import Key

APP_NAME = "SimChat"


class SimChatApp(wx.App):
    """Custom wx.App that logs unhandled GUI exceptions."""

    def OnExceptionInMainLoop(self) -> None:  # pragma: no cover - GUI path
        exc_info = sys.exc_info()
        try:
            logger.error("Unhandled exception in GUI main loop", exc_info=exc_info)
        finally:
            super().OnExceptionInMainLoop()


class SimulationFrame(wx.Frame):
    """Top-level window showing the simulation status and the chat overlay."""

    def __init__(self, settings: AppSettings, executor: ThreadedFetchExecutor) -> None:
        super().__init__(
            None,
            title=APP_NAME,
            size=(settings.ui.window_width, settings.ui.window_height),
        )
        self.clock = SimulationClock()
        self._last_tick = time.monotonic()
        self._executor = executor

        self._canvas = wx.Panel(self)
        self._canvas.SetBackgroundColour(wx.Colour(12, 14, 18))
        self._status = wx.StaticText(self._canvas, label=self.clock.status_text(), pos=(12, 12))
        self._status.SetForegroundColour(wx.Colour(230, 230, 230))

        controller = ChatSessionController(
            executor=executor,
            llm_defaults=settings.llm,
            geometry=PanelGeometry(settings.ui.width_pct, settings.ui.height_pct),
            prefill=settings.ui.prefill,
        )
        self.chat = ChatPanel(
            self._canvas,
            controller,
            on_command=self.clock.apply,
            on_shortcut=self._on_shortcut,
            frame_interval_ms=settings.ui.frame_interval_ms,
        )

        self._timer = wx.Timer(self)
        self.Bind(wx.EVT_TIMER, self._on_tick, self._timer)
        self._timer.Start(settings.ui.frame_interval_ms)
        self.Bind(wx.EVT_CLOSE, self._on_close)

    def _on_shortcut(self, key: Key) -> None:
        if key is Key.SPACE:
            self.clock.toggle()

    def _on_tick(self, _event: wx.TimerEvent) -> None:
        now = time.monotonic()
        self.clock.tick(now - self._last_tick)
        self._last_tick = now
        label = self.clock.status_text()
        if self._status.GetLabel() != label:
            self._status.SetLabel(label)

    def _on_close(self, event: wx.CloseEvent) -> None:
        self._timer.Stop()
        self._executor.shutdown()
        event.Skip()


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="simchat", description="Simulation chat console")
    parser.add_argument("--settings", type=Path, help="TOML or JSON settings file")
    parser.add_argument("--log-dir", type=Path, help="directory for log files")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> None:
    """Run wx application with the simulation frame."""
    args = _parse_args(argv)
    configure_logging(log_dir=args.log_dir)
    install_exception_hooks()
    settings = load_app_settings(args.settings) if args.settings else AppSettings()
    app = SimChatApp()
    frame = SimulationFrame(settings, ThreadedFetchExecutor())
    frame.Show()
    app.MainLoop()


if __name__ == "__main__":  # pragma: no cover
    main()
