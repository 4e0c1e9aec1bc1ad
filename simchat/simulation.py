"""Minimal simulation clock standing in for the host's speed control."""

from __future__ import annotations

import logging

from .chat.commands import ChatCommand

logger = logging.getLogger(__name__)

__all__ = ["SimulationClock"]


class SimulationClock:
    """Simulated time that advances only while running."""

    def __init__(self, *, speed: float = 1.0, paused: bool = False) -> None:
        self.speed = speed
        self.paused = paused
        self.elapsed = 0.0

    def pause(self) -> None:
        self.paused = True

    def resume(self) -> None:
        self.paused = False

    def toggle(self) -> None:
        self.paused = not self.paused

    def apply(self, command: ChatCommand) -> None:
        """Actuate a directive parsed from the chat transcript."""
        if command is ChatCommand.PAUSE:
            self.pause()
        elif command is ChatCommand.RESUME:
            self.resume()
        logger.info("Simulation %s by chat command", "paused" if self.paused else "running")

    def tick(self, dt: float) -> float:
        """Advance by *dt* real seconds; return the simulated seconds added."""
        if self.paused or dt <= 0:
            return 0.0
        step = dt * self.speed
        self.elapsed += step
        return step

    def status_text(self) -> str:
        state = "Paused" if self.paused else "Running"
        total = int(self.elapsed)
        hours, rem = divmod(total, 3600)
        minutes, seconds = divmod(rem, 60)
        return f"{state}  {hours:02d}:{minutes:02d}:{seconds:02d}"
