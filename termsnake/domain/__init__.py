"""
Domain entities for the termsnake game engine.

This module contains the core game entities that are independent of
the terminal they are drawn on.
"""

from .constants import (
    UP, DOWN, LEFT, RIGHT, VALID_MOVES, OPPOSITE,
    INITIAL_TICK_MS, TICK_DECREMENT_MS, MIN_TICK_MS,
)
from .errors import GameOver, SelfCollision, PerfectScore
from .food import generate_food
from .snake import Snake
from .game_state import GameState

__all__ = [
    'UP', 'DOWN', 'LEFT', 'RIGHT', 'VALID_MOVES', 'OPPOSITE',
    'INITIAL_TICK_MS', 'TICK_DECREMENT_MS', 'MIN_TICK_MS',
    'GameOver', 'SelfCollision', 'PerfectScore',
    'generate_food',
    'Snake',
    'GameState',
]
