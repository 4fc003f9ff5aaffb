# walker/settings.py
from __future__ import annotations

# Window / render
WINDOW_TITLE: str = "Path Finder"
BG_COLOR: tuple[int, int, int] = (255, 255, 255)

# Tick rate (simulation steps per second, also the frame cap)
TICK_RATE_HZ: int = 5

# Texture lookup: <ASSET_DIR>/<layers[0].tileset>
ASSET_DIR: str = "assets"

# Logging
LOG_LEVEL: str = "INFO"
LOG_FORMAT: str = "%(levelname)s: %(message)s"

# Flat colors used when the tileset texture can't be loaded.
# Keyed by marker (x, y) as found in the woodland tileset.
FALLBACK_COLORS: dict[tuple[int, int], tuple[int, int, int]] = {
    (1, 0): (110, 170, 80),     # grass
    (3, 0): (30, 80, 40),       # forest
    (0, 5): (240, 150, 150),    # target red
    (8, 1): (200, 30, 30),      # unit red
    (0, 6): (150, 170, 240),    # target blue
    (8, 4): (30, 60, 200),      # unit blue
    (0, 7): (160, 230, 160),    # target green
    (8, 7): (20, 150, 40),      # unit green
    (0, 9): (210, 160, 230),    # target purple
    (8, 13): (120, 40, 160),    # unit purple
}
FALLBACK_UNKNOWN_RGB: tuple[int, int, int] = (200, 200, 200)
FALLBACK_BORDER_RGB: tuple[int, int, int] = (60, 60, 60)

# Trace output
TRACE_INDENT: int | None = None
