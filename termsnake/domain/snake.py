"""
Snake entity for the game engine.
"""

import random
from collections import deque
from typing import Iterator, Optional, Tuple

from .constants import (
    BODY_GLYPH,
    DELTAS,
    HEAD_GLYPHS,
    HORIZONTAL_GLYPH,
    OPPOSITE,
    VALID_MOVES,
    VERTICAL_GLYPH,
)
from .errors import SelfCollision
from .food import generate_food


class Snake:
    """
    Represents the player's snake on a wrapping board.

    Attributes:
        direction: one of UP, DOWN, LEFT, RIGHT
        body: deque of (x, y) from head at index 0 to tail at the end
    """

    def __init__(self, position: Tuple[int, int], direction: str):
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {direction!r}")
        self.direction = direction
        self.body = deque([position])

    @classmethod
    def at_center(cls, width: int, height: int, direction: str) -> "Snake":
        """Create a one-cell snake in the middle of the board."""
        return cls((width // 2, height // 2), direction)

    @property
    def head(self) -> Tuple[int, int]:
        """Return the head position (first element)."""
        return self.body[0]

    def __len__(self) -> int:
        return len(self.body)

    def turn(self, direction: str) -> bool:
        """
        Change direction unless it would reverse the snake onto itself.

        Returns:
            True if the direction was accepted.
        """
        if direction not in VALID_MOVES:
            raise ValueError(f"Invalid direction: {direction!r}")
        if direction == OPPOSITE[self.direction]:
            return False
        self.direction = direction
        return True

    def next_head(self, width: int, height: int) -> Tuple[int, int]:
        """Head position after one move, wrapping around the board edges."""
        x, y = self.head
        dx, dy = DELTAS[self.direction]
        return ((x + dx) % width, (y + dy) % height)

    def step(
        self,
        width: int,
        height: int,
        food: Optional[Tuple[int, int]],
        rng: Optional[random.Random] = None,
    ) -> Optional[Tuple[int, int]]:
        """
        Advance the snake one cell.

        The tail is kept when the new head lands on the food, and a new food
        cell is generated for the grown body. Otherwise the tail moves up and
        the food is returned unchanged.

        Raises:
            SelfCollision: the new head hits any current body cell.
            PerfectScore: the grown snake fills the board.
        """
        new_head = self.next_head(width, height)

        # Checked before insertion, so the tail counts too
        if new_head in self.body:
            raise SelfCollision(new_head)

        self.body.appendleft(new_head)

        if new_head == food:
            return generate_food(width, height, self.body, rng)

        self.body.pop()
        return food

    def glyphs(self) -> Iterator[Tuple[int, int, str]]:
        """Yield (x, y, glyph) for every segment, head first."""
        previous = None
        for x, y in self.body:
            if previous is None:
                ch = HEAD_GLYPHS[self.direction]
            elif x == previous[0]:
                ch = VERTICAL_GLYPH
            elif y == previous[1]:
                ch = HORIZONTAL_GLYPH
            else:
                ch = BODY_GLYPH
            yield x, y, ch
            previous = (x, y)

    def __repr__(self):
        return f"<Snake direction={self.direction}, length={len(self.body)}, head={self.head}>"
