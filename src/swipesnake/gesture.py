from __future__ import annotations

import pygame

from .state import DOWN, LEFT, RIGHT, UP

KEY_MAP = {
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
    pygame.K_w: UP,
    pygame.K_s: DOWN,
    pygame.K_a: LEFT,
    pygame.K_d: RIGHT,
}


def direction_from_drag(dx: float, dy: float) -> tuple[int, int]:
    # No dead-zone: (0, 0) and exact diagonals fall through to the vertical axis.
    if abs(dx) > abs(dy):
        return RIGHT if dx > 0 else LEFT
    return DOWN if dy > 0 else UP


def key_direction(key: int) -> tuple[int, int] | None:
    return KEY_MAP.get(key)


class DragTracker:
    """Turns pointer events into swipe directions.

    Drag vectors are measured from where the gesture started, so every motion
    sample re-evaluates the whole swipe so far. A press released without any
    motion is a tap.
    """

    def __init__(self, size: tuple[int, int]):
        self.size = size
        self.origin: tuple[float, float] | None = None
        self.moved = False

    def _finger_pos(self, event) -> tuple[float, float]:
        return (event.x * self.size[0], event.y * self.size[1])

    def handle(self, event):
        """Returns ("swipe", direction), ("tap", pos) or None."""
        if event.type == pygame.MOUSEBUTTONDOWN and event.button == 1:
            self.origin = tuple(event.pos)
            self.moved = False
        elif event.type == pygame.FINGERDOWN:
            self.origin = self._finger_pos(event)
            self.moved = False
        elif event.type == pygame.MOUSEMOTION and self.origin is not None and event.buttons[0]:
            return self._drag_to(event.pos)
        elif event.type == pygame.FINGERMOTION and self.origin is not None:
            return self._drag_to(self._finger_pos(event))
        elif event.type == pygame.MOUSEBUTTONUP and event.button == 1:
            return self._release(tuple(event.pos))
        elif event.type == pygame.FINGERUP:
            return self._release(self._finger_pos(event))
        return None

    def _drag_to(self, pos):
        dx = pos[0] - self.origin[0]
        dy = pos[1] - self.origin[1]
        # A zero vector only counts once the pointer has moved; before that it
        # may still turn out to be a tap.
        if dx == 0 and dy == 0 and not self.moved:
            return None
        self.moved = True
        return ("swipe", direction_from_drag(dx, dy))

    def _release(self, pos):
        was_tap = self.origin is not None and not self.moved
        self.origin = None
        self.moved = False
        if was_tap:
            return ("tap", pos)
        return None
