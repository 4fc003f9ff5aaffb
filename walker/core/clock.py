# walker/core/clock.py
from __future__ import annotations
import pygame
from dataclasses import dataclass, field
from walker.settings import TICK_RATE_HZ

@dataclass
class TickClock:
    """Rate-limited tick clock.
    tick() blocks until the next tick boundary (at most `fps` ticks per second)
    and returns the milliseconds elapsed since the previous call.
    """
    fps: int = TICK_RATE_HZ
    ticks: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        if self.fps <= 0:
            raise ValueError(f"fps must be positive, got {self.fps}")
        self._clock = pygame.time.Clock()

    def tick(self) -> int:
        self.ticks += 1
        return self._clock.tick(self.fps)
