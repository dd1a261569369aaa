from __future__ import annotations

import pygame

from . import config
from .state import State


class Fonts:
    def __init__(self):
        self.score = pygame.font.Font(None, config.SCORE_FONT_SIZE)
        self.title = pygame.font.Font(None, config.TITLE_FONT_SIZE)
        self.button = pygame.font.Font(None, config.BUTTON_FONT_SIZE)


def gradient_color(row: int, height: int, top=config.BOARD_TOP, bottom=config.BOARD_BOTTOM):
    t = row / max(1, height - 1)
    return tuple(round(a + (b - a) * t) for a, b in zip(top, bottom))


def draw_board(screen: pygame.Surface) -> None:
    w, h = screen.get_size()
    for row in range(h):
        pygame.draw.line(screen, gradient_color(row, h), (0, row), (w - 1, row))


def cell_rect(cell: tuple[int, int], block: int) -> pygame.Rect:
    x, y = cell
    return pygame.Rect(x * block, y * block, block - config.INSET, block - config.INSET)


def reset_button_rect(screen: pygame.Surface, fonts: Fonts) -> pygame.Rect:
    w, h = screen.get_size()
    label_w, label_h = fonts.button.size("Reset Game")
    pad_x, pad_y = config.BUTTON_PADDING
    rect = pygame.Rect(0, 0, label_w + 2 * pad_x, label_h + 2 * pad_y)
    rect.center = (w // 2, h // 2 + config.TITLE_FONT_SIZE)
    return rect


def draw_game_over(screen: pygame.Surface, fonts: Fonts) -> pygame.Rect:
    w, h = screen.get_size()
    shade = pygame.Surface((w, h), pygame.SRCALPHA)
    shade.fill((*config.BLACK, config.OVERLAY_ALPHA))
    screen.blit(shade, (0, 0))

    title = fonts.title.render("Game Over!", True, config.WHITE)
    screen.blit(title, title.get_rect(center=(w // 2, h // 2 - config.TITLE_FONT_SIZE // 2)))

    button = reset_button_rect(screen, fonts)
    pygame.draw.rect(screen, config.WHITE, button, border_radius=5)
    label = fonts.button.render("Reset Game", True, config.BLACK)
    screen.blit(label, label.get_rect(center=button.center))
    return button


def draw_state(screen: pygame.Surface, state: State, fonts: Fonts) -> pygame.Rect | None:
    """Draws one frame. Returns the reset button rect while the game is over."""
    draw_board(screen)
    block = screen.get_width() // config.GRID_SIZE

    for cell in state.snake:
        pygame.draw.rect(screen, config.GREEN, cell_rect(cell, block))
    pygame.draw.rect(screen, config.YELLOW, cell_rect(state.food, block))

    score = fonts.score.render(f"Score: {state.score}", True, config.WHITE)
    screen.blit(score, (8, 8))

    button = None
    if state.game_over:
        button = draw_game_over(screen, fonts)

    pygame.display.flip()
    return button
