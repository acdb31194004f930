"""
GameState entity - everything the game loop knows between ticks.
"""

from typing import Optional, Tuple

from .constants import FOOD_GLYPH, INITIAL_TICK_MS
from .snake import Snake


class GameState:
    """
    The state of a single game.

    Attributes:
        width, height: board dimensions (the terminal size)
        started: False until the first arrow key
        snake: the player's snake, created when the game starts
        food: (x, y) of the food, or None before it is first placed
        tick_duration_ms: how long each tick waits for input
    """

    def __init__(
        self,
        width: int,
        height: int,
        started: bool = False,
        snake: Optional[Snake] = None,
        food: Optional[Tuple[int, int]] = None,
        tick_duration_ms: int = INITIAL_TICK_MS
    ):
        if width < 1 or height < 1:
            raise ValueError(f"Board must be at least 1x1, got {width}x{height}.")
        self.width = width
        self.height = height
        self.started = started
        self.snake = snake
        self.food = food
        self.tick_duration_ms = tick_duration_ms

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        o = food
        ^ v < > = snake head, | - s = snake body
        Rows are printed top to bottom, the way the terminal shows them.
        """
        board = [['.' for _ in range(self.width)] for _ in range(self.height)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = FOOD_GLYPH

        if self.snake is not None:
            # Reversed so the head wins if anything overlaps
            for x, y, ch in reversed(list(self.snake.glyphs())):
                board[y][x] = ch

        return "\n".join("".join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState {self.width}x{self.height}, started={self.started}, "
            f"snake={self.snake!r}, food={self.food}, tick={self.tick_duration_ms}ms>"
        )
