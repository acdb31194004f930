"""
The game loop.

SnakeGame owns the GameState and drives it one tick at a time:
clear the screen, advance and draw the snake, place or draw the food,
flush, then wait up to the tick duration for a key press.
"""

import logging
import random
from dataclasses import dataclass
from typing import Optional

from .controls import QUIT, command_for
from .domain.constants import (
    FOOD_COLOR,
    FOOD_GLYPH,
    MIN_TICK_MS,
    SNAKE_COLOR,
    START_TEXT,
    TEXT_COLOR,
    TICK_DECREMENT_MS,
    VALID_MOVES,
)
from .domain.errors import GameOver
from .domain.food import generate_food
from .domain.game_state import GameState
from .domain.snake import Snake

logger = logging.getLogger(__name__)

QUIT_REASON = "quit"


@dataclass
class GameResult:
    """How a game ended: reason is quit, self_collision or perfect_score."""
    reason: str
    message: Optional[str] = None
    snake_length: int = 0


class SnakeGame:
    """
    Manages:
      - Board (the terminal size at start-up)
      - The snake and its food
      - Tick speed
      - The start / play / terminated flow
    """

    def __init__(self, terminal, rng: Optional[random.Random] = None):
        self.terminal = terminal
        self.rng = rng
        width, height = terminal.size()
        self.state = GameState(width=width, height=height)
        self.result: Optional[GameResult] = None
        logger.info("New game on a %dx%d board", width, height)

    @property
    def game_over(self) -> bool:
        return self.result is not None

    def run(self) -> GameResult:
        """Tick until the game ends and return how it ended."""
        while self.tick():
            pass
        return self.result

    def tick(self) -> bool:
        """
        Execute one tick:
          1) Clear the screen
          2) Draw the start text, or advance and draw the snake and food
          3) Flush
          4) Wait for input up to the tick duration and apply it

        Returns:
            False once the game has ended.
        """
        if self.game_over:
            return False

        try:
            self.render_frame()
        except GameOver as exc:
            self.end(exc.reason, str(exc))
            return False

        event = self.terminal.poll_event(self.state.tick_duration_ms)
        if event is not None:
            self.handle_event(event)

        return not self.game_over

    def render_frame(self) -> None:
        self.terminal.clear_screen()
        if not self.state.started:
            self.terminal.write_styled_text(0, 0, START_TEXT, TEXT_COLOR)
        else:
            self.advance()
        self.terminal.flush()

    def advance(self) -> None:
        """Move the snake, draw it, then handle the food."""
        state = self.state
        previous_food = state.food

        new_food = state.snake.step(state.width, state.height, previous_food, self.rng)
        self.draw_snake()

        if new_food is not None and new_food != previous_food:
            self.speed_up()
        state.food = new_food

        if state.food is not None:
            self.draw_food()
        else:
            state.food = generate_food(state.width, state.height, state.snake.body, self.rng)

    def speed_up(self) -> None:
        state = self.state
        state.tick_duration_ms = max(MIN_TICK_MS, state.tick_duration_ms - TICK_DECREMENT_MS)
        logger.debug(
            "Snake grew to %d, tick is now %dms", len(state.snake), state.tick_duration_ms
        )

    def draw_snake(self) -> None:
        for x, y, ch in self.state.snake.glyphs():
            self.terminal.move_cursor(x, y)
            self.terminal.write_styled_char(ch, SNAKE_COLOR)

    def draw_food(self) -> None:
        fx, fy = self.state.food
        self.terminal.move_cursor(fx, fy)
        self.terminal.write_styled_char(FOOD_GLYPH, FOOD_COLOR)

    def handle_event(self, event) -> None:
        """Apply one key press: start, steer or quit."""
        command = command_for(event)
        if command == QUIT:
            self.end(QUIT_REASON)
        elif command in VALID_MOVES:
            self.steer(command)

    def steer(self, direction: str) -> None:
        state = self.state
        if not state.started:
            state.started = True
            state.snake = Snake.at_center(state.width, state.height, direction)
            logger.info("Game started moving %s from %s", direction, state.snake.head)
            return

        if not state.snake.turn(direction):
            logger.debug("Ignored reversal to %s while moving %s", direction, state.snake.direction)

    def end(self, reason: str, message: Optional[str] = None) -> None:
        snake_length = len(self.state.snake) if self.state.snake is not None else 0
        self.result = GameResult(reason=reason, message=message, snake_length=snake_length)
        if reason == QUIT_REASON:
            logger.info("Player quit with snake length %d", snake_length)
        else:
            logger.info("Game over (%s) with snake length %d", reason, snake_length)
            logger.debug("Final board:\n%s", self.state.print_board())
