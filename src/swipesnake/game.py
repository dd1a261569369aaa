from __future__ import annotations

import logging
import random

import pygame

from . import config
from .gesture import DragTracker, key_direction
from .logic import new_state, reset, steer, step
from .render import Fonts, draw_state
from .ticker import TICK_EVENT, Ticker

logger = logging.getLogger(__name__)


class Session:
    """Holds the live game state and routes events to the pure game logic."""

    def __init__(self, size: tuple[int, int], rng=None):
        self.rng = rng or random.Random()
        self.state = new_state(self.rng)
        self.drag = DragTracker(size)
        self.reset_button: pygame.Rect | None = None
        self.running = True

    def tick(self) -> None:
        was_over = self.state.game_over
        self.state = step(self.state, self.state.direction, self.rng)
        if self.state.game_over and not was_over:
            print("Game Over! Score:", self.state.score)

    def steer(self, direction: tuple[int, int]) -> None:
        self.state = steer(self.state, direction)

    def reset(self) -> None:
        self.state = reset(self.state, self.rng)
        self.reset_button = None

    def tap(self, pos) -> None:
        if self.state.game_over and self.reset_button is not None and self.reset_button.collidepoint(pos):
            self.reset()

    def handle_event(self, event) -> None:
        if event.type == pygame.QUIT:
            self.running = False
        elif event.type == TICK_EVENT:
            self.tick()
        elif event.type == pygame.KEYDOWN:
            if event.key in (pygame.K_ESCAPE, pygame.K_q):
                self.running = False
            elif event.key == pygame.K_r and self.state.game_over:
                self.reset()
            else:
                direction = key_direction(event.key)
                if direction is not None:
                    self.steer(direction)
        else:
            result = self.drag.handle(event)
            if result is None:
                return
            kind, value = result
            if kind == "swipe":
                self.steer(value)
            elif kind == "tap":
                self.tap(value)


def board_width(width: int) -> int:
    """Largest multiple of the grid size that fits, so every column is a whole cell."""
    return (width // config.GRID_SIZE) * config.GRID_SIZE


def main(width: int = config.WIDTH, tick_ms: int = config.TICK_MS, seed: int | None = None) -> int:
    pygame.init()
    size = board_width(width)
    screen = pygame.display.set_mode((size, size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()
    fonts = Fonts()

    session = Session(screen.get_size(), random.Random(seed))
    logger.info("new game, grid %dx%d, tick %d ms", config.GRID_SIZE, config.GRID_SIZE, tick_ms)

    try:
        with Ticker(tick_ms):
            while session.running:
                for event in pygame.event.get():
                    session.handle_event(event)
                session.reset_button = draw_state(screen, session.state, fonts)
                clock.tick(config.FPS)
    finally:
        pygame.quit()

    print("Final score:", session.state.score)
    return 0
