"""
Game constants for termsnake.
"""

# Movement directions
UP = "UP"
DOWN = "DOWN"
LEFT = "LEFT"
RIGHT = "RIGHT"
VALID_MOVES = {UP, DOWN, LEFT, RIGHT}

OPPOSITE = {UP: DOWN, DOWN: UP, LEFT: RIGHT, RIGHT: LEFT}

# (dx, dy) per direction; y grows downwards like terminal rows
DELTAS = {
    UP: (0, -1),
    DOWN: (0, 1),
    LEFT: (-1, 0),
    RIGHT: (1, 0),
}

# Glyphs
HEAD_GLYPHS = {UP: "^", DOWN: "v", LEFT: "<", RIGHT: ">"}
VERTICAL_GLYPH = "|"
HORIZONTAL_GLYPH = "-"
BODY_GLYPH = "s"
FOOD_GLYPH = "o"

# Colors understood by the terminal adapter
SNAKE_COLOR = "green"
FOOD_COLOR = "red"
TEXT_COLOR = "magenta"

# Tick timing (milliseconds)
INITIAL_TICK_MS = 500
TICK_DECREMENT_MS = 20
MIN_TICK_MS = 50

START_TEXT = "Press arrows to move, or (q, Ctrl+c) to quit."
END_TEXT = "The program ended."
