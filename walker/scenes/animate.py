# walker/scenes/animate.py
from __future__ import annotations
import logging
from collections import deque
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Optional

import pygame

from walker import settings
from walker.core.coordinate import Coordinate, Marker
from walker.core.grid import Grid, OutOfBounds
from walker.world.tilemap import MapInfo
from walker.world.woodland import EMPTY, GRASS

logger = logging.getLogger(__name__)

class Intent(Enum):
    CLOSE = "close"
    RESET = "reset"
    PAUSE_RESUME = "pause_resume"

_KEY_INTENTS: dict[int, Intent] = {
    pygame.K_ESCAPE: Intent.CLOSE,
    pygame.K_r: Intent.RESET,
    pygame.K_p: Intent.PAUSE_RESUME,
}

def intent_for_event(event: pygame.event.Event) -> Optional[Intent]:
    if event.type == pygame.QUIT:
        return Intent.CLOSE
    if event.type == pygame.KEYDOWN:
        return _KEY_INTENTS.get(event.key)
    return None

@dataclass
class Tileset:
    """Maps tile markers to cells of the tileset texture (marker * tile size)."""
    info: MapInfo
    asset_dir: Path = Path(settings.ASSET_DIR)
    texture: Optional[pygame.Surface] = field(default=None, init=False)

    def load(self) -> bool:
        path = Path(self.asset_dir) / self.info.texture_filename
        try:
            self.texture = pygame.image.load(str(path))
        except (pygame.error, FileNotFoundError) as e:
            logger.warning("Unable to load tileset %s (%s), drawing flat colors", path, e)
            self.texture = None
        return self.texture is not None

    def tile_rect(self, marker: Marker) -> pygame.Rect:
        ts = self.info.tile_size
        origin = marker * ts
        return pygame.Rect(origin.x, origin.y, ts.x, ts.y)

    def screen_rect(self, at: Coordinate) -> pygame.Rect:
        ts = self.info.tile_size
        return pygame.Rect(at.x * ts.x, at.y * ts.y, ts.x, ts.y)

    def blit(self, surface: pygame.Surface, at: Coordinate, marker: Marker) -> None:
        dest = self.screen_rect(at)
        if self.texture is not None:
            surface.blit(self.texture, dest, self.tile_rect(marker))
            return
        color = settings.FALLBACK_COLORS.get(marker.as_tuple(), settings.FALLBACK_UNKNOWN_RGB)
        surface.fill(color, dest)
        if marker != GRASS:
            pygame.draw.rect(surface, settings.FALLBACK_BORDER_RGB, dest, width=1)

@dataclass
class AnimateScene:
    """
    Presentation side of the simulation:
    - poll() turns window/keyboard events into at most one Intent
      (Esc/close -> CLOSE, R -> RESET, P -> PAUSE_RESUME)
    - draw() renders a grid snapshot, grass first then each tile's marker
    """
    screen: pygame.Surface
    tileset: Tileset
    _pending: deque[Intent] = field(default_factory=deque, init=False)

    def poll(self) -> Optional[Intent]:
        for event in pygame.event.get():
            intent = intent_for_event(event)
            if intent is not None:
                self._pending.append(intent)
        # one per call; the rest wait for the next tick
        return self._pending.popleft() if self._pending else None

    def draw(self, grid: Grid) -> None:
        self.screen.fill(settings.BG_COLOR)
        # coordinates() never leaves the grid, so reads skip the bounds check
        for at in grid.coordinates():
            marker = grid.get(at, OutOfBounds.UNDEFINED)
            # NOTE: background should really be its own map layer
            self.tileset.blit(self.screen, at, GRASS)
            if marker not in (GRASS, EMPTY):
                self.tileset.blit(self.screen, at, marker)
