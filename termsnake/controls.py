"""
Keyboard controls: turn key events into game commands.

Arrow keys steer (the first one also starts the game); q and Ctrl+C quit.
"""

from typing import Optional

from .domain.constants import VALID_MOVES

QUIT = "QUIT"

QUIT_KEYS = {"q"}
CTRL_QUIT_KEYS = {"c"}


def command_for(event) -> Optional[str]:
    """
    Map a KeyEvent to a direction, QUIT, or None for keys the game ignores.
    """
    if event is None:
        return None
    if event.ctrl:
        return QUIT if event.code in CTRL_QUIT_KEYS else None
    if event.code in VALID_MOVES:
        return event.code
    if event.code in QUIT_KEYS:
        return QUIT
    return None
