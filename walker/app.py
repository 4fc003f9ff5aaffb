# walker/app.py
from __future__ import annotations
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import pygame

from walker import settings
from walker.core.clock import TickClock
from walker.scenes.animate import AnimateScene, Intent, Tileset
from walker.sim.stepper import Simulation
from walker.world.pathing import unit_paths
from walker.world.tilemap import TileMap, parse_map, read_map_file
from walker.world.trace import dump_records

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_UNREADABLE = 2
EXIT_BAD_MAP = 3

def _positive(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="walker",
        description="Walk colored units to their targets on a RiskyLab tile map.",
    )
    p.add_argument("map_file", help="tile map exported as JSON by the RiskyLab editor")
    p.add_argument("--trace", action="store_true",
                   help="print each unit's path as JSON instead of opening a window")
    p.add_argument("--indent", type=int, default=settings.TRACE_INDENT,
                   help="JSON indent for --trace output")
    p.add_argument("--fps", type=_positive, default=settings.TICK_RATE_HZ,
                   help="simulation ticks per second (default: %(default)s)")
    p.add_argument("--assets", default=settings.ASSET_DIR,
                   help="directory holding the tileset texture (default: %(default)s)")
    p.add_argument("--log-level", default=settings.LOG_LEVEL,
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p

def animate(tilemap: TileMap, *, fps: int, asset_dir: str | Path) -> None:
    """Show the units travelling to their targets until the window is closed."""
    sim = Simulation(tilemap.grid)

    pygame.init()
    try:
        pygame.display.set_caption(settings.WINDOW_TITLE)
        canvas = tilemap.info.canvas_size
        screen = pygame.display.set_mode((canvas.x, canvas.y))
        tileset = Tileset(tilemap.info, Path(asset_dir))
        tileset.load()
        scene = AnimateScene(screen, tileset)
        clock = TickClock(fps)

        running = True
        was_finished = False
        while running:
            # -- Input --
            intent = scene.poll()
            if intent is Intent.CLOSE:
                running = False
                continue
            if intent is Intent.RESET:
                sim.reset()
                was_finished = False
            elif intent is Intent.PAUSE_RESUME:
                sim.toggle_pause()

            # -- Render --
            scene.draw(sim.grid)
            pygame.display.flip()

            # -- Step --
            sim.tick()
            if sim.finished and not was_finished:
                logger.info("All units arrived after %d ticks", sim.ticks)
                was_finished = True

            clock.tick()
    finally:
        pygame.quit()

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format=settings.LOG_FORMAT)

    if not args.map_file:
        print("Usage: walker <map_file.json>", file=sys.stderr)
        return EXIT_USAGE

    json_text = read_map_file(args.map_file)
    if not json_text:
        print("Error: Unable to read map from file", file=sys.stderr)
        return EXIT_UNREADABLE

    tilemap = parse_map(json_text)
    if tilemap is None:
        print("Error: Unable to parse JSON tilemap", file=sys.stderr)
        return EXIT_BAD_MAP

    if args.trace:
        print(dump_records(unit_paths(tilemap.grid), indent=args.indent))
        return EXIT_OK

    animate(tilemap, fps=args.fps, asset_dir=args.assets)
    return EXIT_OK

if __name__ == "__main__":
    sys.exit(main())
