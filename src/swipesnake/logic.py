from __future__ import annotations

import logging
import random

from . import config
from .state import DIRECTIONS, RIGHT, Functor, State, add_vectors, direction_name

logger = logging.getLogger(__name__)


def random_cell(rng=random) -> tuple[int, int]:
    # May land on the snake; nothing excludes body cells.
    return (
        rng.randint(0, config.GRID_SIZE - 1),
        rng.randint(0, config.GRID_SIZE - 1),
    )


def new_state(rng=random) -> State:
    return State(
        snake=list(config.START_SNAKE),
        direction=RIGHT,
        food=random_cell(rng),
        score=0,
        game_over=False,
    )


def reset(state: State | None = None, rng=random) -> State:
    """Replace the whole game with a fresh initial state."""
    fresh = new_state(rng)
    if state is not None:
        logger.info("reset after score %d", state.score)
    return fresh


def steer(state: State, direction: tuple[int, int]) -> State:
    """Set the pending direction. A reversal is accepted and ends the game on
    the next tick."""
    if direction not in DIRECTIONS.values():
        raise ValueError(f"not a cardinal direction: {direction!r}")
    if direction == state.direction:
        return state
    logger.debug("direction %s -> %s", direction_name(state.direction), direction_name(direction))
    return state._replace(direction=direction)


def hits_wall(cell: tuple[int, int]) -> bool:
    x, y = cell
    return x < 0 or x >= config.GRID_SIZE or y < 0 or y >= config.GRID_SIZE


def hits_body(cell: tuple[int, int], snake: list[tuple[int, int]]) -> bool:
    return cell in snake


def move_snake(state: State, new_head: tuple[int, int]) -> State:
    if new_head == state.food:
        new_snake = [new_head] + state.snake
    else:
        new_snake = [new_head] + state.snake[:-1]
    return state._replace(snake=new_snake)


def update_food_and_score(state: State, rng=random) -> State:
    if state.snake[0] != state.food:
        return state
    score = state.score + 1
    logger.debug("ate food at %s, score %d", state.food, score)
    return state._replace(food=random_cell(rng), score=score)


def step(state: State, direction: tuple[int, int] | None = None, rng=random) -> State:
    """Advance the game by one tick.

    Collisions are checked against the body as it is before the move, so the
    tail cell is still solid this tick.
    """
    if state.game_over:
        return state
    if direction is None:
        direction = state.direction

    new_head = add_vectors(state.snake[0], direction)
    if hits_wall(new_head):
        logger.info("game over: hit wall at %s, score %d", new_head, state.score)
        return state._replace(game_over=True)
    if hits_body(new_head, state.snake):
        logger.info("game over: hit self at %s, score %d", new_head, state.score)
        return state._replace(game_over=True)

    return (
        Functor(state)
        .map(lambda s: move_snake(s, new_head))
        .map(lambda s: update_food_and_score(s, rng))
        .get()
    )
