from __future__ import annotations

GRID_WIDTH, GRID_HEIGHT = 20, 20
BLOCK = 20
# The playfield is framed by a one-cell border.
BORDER = 1
PANEL_WIDTH = 260

INITIAL_SNAKE = ((1, 1), (1, 2), (1, 3))

# Milliseconds between ticks at speed 1.0.
BASE_TICK_MS = 200
FPS = 120

FONT_SIZE = 22

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)
YELLOW = (255, 255, 0)
GREEN = (0, 200, 0)
RED = (255, 0, 0)
PANEL_BG = (20, 20, 30)
GREY = (140, 140, 140)
