from .logic import new_state, reset, step, steer
from .state import DOWN, LEFT, RIGHT, UP, State

__all__ = ["State", "UP", "DOWN", "LEFT", "RIGHT", "new_state", "reset", "step", "steer"]
