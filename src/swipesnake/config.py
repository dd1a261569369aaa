from __future__ import annotations

GRID_SIZE = 20

# Window is square: the board spans the full width.
WIDTH = 400
INSET = 2
# Smallest width that still leaves each cell a visible square after the inset.
MIN_WIDTH = GRID_SIZE * (INSET + 1)

TICK_MS = 200
FPS = 60

START_SNAKE = [(5, 5), (4, 5), (3, 5)]

# Board gradient, top row to bottom row.
BOARD_TOP = (44, 44, 78)
BOARD_BOTTOM = (28, 28, 46)
GREEN = (0, 255, 0)
YELLOW = (255, 255, 0)
WHITE = (255, 255, 255)
BLACK = (0, 0, 0)

OVERLAY_ALPHA = 178  # ~0.7 opacity

SCORE_FONT_SIZE = 28
TITLE_FONT_SIZE = 44
BUTTON_FONT_SIZE = 24
BUTTON_PADDING = (20, 10)
