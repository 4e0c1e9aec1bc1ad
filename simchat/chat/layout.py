"""Panel geometry expressed as percentages of the viewport."""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from ..settings import (
    DEFAULT_PANEL_PCT,
    MAX_HEIGHT_PCT,
    MAX_WIDTH_PCT,
    MIN_HEIGHT_PCT,
    MIN_WIDTH_PCT,
)

__all__ = ["PanelGeometry", "ResizeDirection", "RESIZE_STEP"]

RESIZE_STEP = 5

_INPUT_WIDTH_SHARE = 0.65
_INPUT_HEIGHT_SHARE = 0.30
_MIN_INPUT_WIDTH = 220.0
_MIN_INPUT_HEIGHT = 90.0
_TRANSCRIPT_WRAP_SHARE = 0.9


class ResizeDirection(Enum):
    SHRINK = -1
    GROW = 1


@dataclass(frozen=True, slots=True)
class PanelGeometry:
    """Width and height of the chat panel as independent viewport percentages."""

    width_pct: int = DEFAULT_PANEL_PCT
    height_pct: int = DEFAULT_PANEL_PCT

    def resized(self, direction: ResizeDirection) -> PanelGeometry:
        """Return the geometry one step larger or smaller, clamped per axis."""
        delta = RESIZE_STEP * direction.value
        width = min(max(self.width_pct + delta, MIN_WIDTH_PCT), MAX_WIDTH_PCT)
        height = min(max(self.height_pct + delta, MIN_HEIGHT_PCT), MAX_HEIGHT_PCT)
        return replace(self, width_pct=width, height_pct=height)

    def panel_size(self, window_width: float, window_height: float) -> tuple[float, float]:
        return (
            self.width_pct / 100.0 * window_width,
            self.height_pct / 100.0 * window_height,
        )

    def input_size(self, window_width: float, window_height: float) -> tuple[float, float]:
        """Fixed pixel size of the text-entry widget for the given window."""
        panel_w, panel_h = self.panel_size(window_width, window_height)
        return (
            max(panel_w * _INPUT_WIDTH_SHARE, _MIN_INPUT_WIDTH),
            max(panel_h * _INPUT_HEIGHT_SHARE, _MIN_INPUT_HEIGHT),
        )

    def transcript_wrap_width(self, window_width: float) -> float:
        return round(self.width_pct * _TRANSCRIPT_WRAP_SHARE) / 100.0 * window_width
