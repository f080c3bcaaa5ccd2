from __future__ import annotations

WIDTH, HEIGHT = 800, 600
FPS = 60

# Motion
SEEK_SPEED = 100.0  # units per second
TARGET_TOLERANCE = 5.0
ROTATION_RATE = 2.0  # radians per second
MAX_DT: float | None = None
NUDGE_STRENGTH = 100.0

# Colors
BACKGROUND = (26, 26, 26)
TEXT = (255, 255, 255)
TARGET = (255, 255, 255)
GUIDE = (90, 90, 90)
OUTLINE = (255, 255, 255)

FONT_SIZE = 18
TARGET_RADIUS = 4

DEFAULT_PRESET = "mixed"
