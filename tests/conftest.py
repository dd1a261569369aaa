import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import random

import pygame
import pytest

from swipesnake.state import RIGHT, State


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def make_state():
    def _make(snake=None, direction=RIGHT, food=(10, 10), score=0, game_over=False):
        return State(
            snake=list(snake or [(5, 5), (4, 5), (3, 5)]),
            direction=direction,
            food=food,
            score=score,
            game_over=game_over,
        )

    return _make


@pytest.fixture
def screen():
    pygame.init()
    pygame.display.set_mode((400, 400))
    yield pygame.Surface((400, 400), depth=32)
    pygame.quit()
