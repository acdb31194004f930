"""
Terminal adapter backed by curses.

CursesTerminal exposes the small surface the game needs: board size,
cursor-positioned coloured characters, screen clearing, bounded key polling
and raw-mode/cursor control. game_mode() wraps a play session so the
terminal is restored on every exit path, exceptions included.
"""

import curses
import logging
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Dict, Generator, Optional, Tuple

from .domain.constants import DOWN, LEFT, RIGHT, UP

logger = logging.getLogger(__name__)

CTRL_C = 3

ARROW_KEYS = {
    curses.KEY_UP: UP,
    curses.KEY_DOWN: DOWN,
    curses.KEY_LEFT: LEFT,
    curses.KEY_RIGHT: RIGHT,
}

COLORS = {
    "green": curses.COLOR_GREEN,
    "red": curses.COLOR_RED,
    "magenta": curses.COLOR_MAGENTA,
}


@dataclass(frozen=True)
class KeyEvent:
    """
    A key press.

    code is UP/DOWN/LEFT/RIGHT for arrows, otherwise the character
    (lowercase letter for Ctrl combinations, with ctrl=True).
    """
    code: str
    ctrl: bool = False


def key_event_from_code(code: int) -> Optional[KeyEvent]:
    """Translate a curses getch() code into a KeyEvent, or None for no key."""
    if code == -1 or code == curses.KEY_RESIZE:
        return None
    if code in ARROW_KEYS:
        return KeyEvent(ARROW_KEYS[code])
    if 1 <= code <= 26:
        # Control characters: Ctrl+A is 1 ... Ctrl+Z is 26
        return KeyEvent(chr(ord("a") + code - 1), ctrl=True)
    if 32 <= code < 127:
        return KeyEvent(chr(code))
    return KeyEvent(curses.keyname(code).decode("ascii", "replace"))


class CursesTerminal:
    """Terminal adapter over the standard curses screen."""

    def __init__(self):
        self.stdscr = None
        self._color_attrs: Dict[str, int] = {}
        self._clipped = False

    def enable_raw_mode(self) -> None:
        self.stdscr = curses.initscr()
        try:
            curses.noecho()
            curses.raw()
            self.stdscr.keypad(True)
            self._init_colors()
        except BaseException:
            # Half-initialised screens must not outlive a failed setup
            self.disable_raw_mode()
            raise
        logger.debug("Raw mode enabled")

    def disable_raw_mode(self) -> None:
        if self.stdscr is None:
            return
        self.stdscr.keypad(False)
        curses.noraw()
        curses.echo()
        curses.endwin()
        self.stdscr = None
        logger.debug("Raw mode disabled")

    def _init_colors(self) -> None:
        self._color_attrs = {}
        if not curses.has_colors():
            return
        curses.start_color()
        try:
            curses.use_default_colors()
            background = -1
        except curses.error:
            background = curses.COLOR_BLACK
        for pair_number, (name, color) in enumerate(COLORS.items(), start=1):
            curses.init_pair(pair_number, color, background)
            self._color_attrs[name] = curses.color_pair(pair_number)

    def hide_cursor(self) -> None:
        self._set_cursor_visibility(0)

    def show_cursor(self) -> None:
        self._set_cursor_visibility(1)

    def _set_cursor_visibility(self, visibility: int) -> None:
        try:
            curses.curs_set(visibility)
        except curses.error:
            # Some terminals cannot change cursor visibility at all
            logger.debug("Terminal does not support cursor visibility %d", visibility)

    def size(self) -> Tuple[int, int]:
        """Return (width, height) in cells."""
        rows, cols = self.stdscr.getmaxyx()
        return cols, rows

    def move_cursor(self, x: int, y: int) -> None:
        """Move to (x, y); positions outside the current window are clipped."""
        width, height = self.size()
        self._clipped = not (0 <= x < width and 0 <= y < height)
        if not self._clipped:
            self.stdscr.move(y, x)

    def write_styled_char(self, ch: str, color: Optional[str] = None) -> None:
        """Write one character at the cursor position, unless it was clipped."""
        if self._clipped:
            return
        attr = self._color_attrs.get(color, 0)
        y, x = self.stdscr.getyx()
        width, height = self.size()
        if (x, y) == (width - 1, height - 1):
            # addch would move the cursor past the last cell and fail
            self.stdscr.insch(ch, attr)
        else:
            self.stdscr.addch(ch, attr)

    def write_styled_text(self, x: int, y: int, text: str, color: Optional[str] = None) -> None:
        """Write text starting at (x, y), clipped to the screen width."""
        width, _ = self.size()
        for offset, ch in enumerate(text[:max(0, width - x)]):
            self.move_cursor(x + offset, y)
            self.write_styled_char(ch, color)

    def clear_screen(self) -> None:
        self.stdscr.erase()

    def flush(self) -> None:
        self.stdscr.refresh()

    def poll_event(self, timeout_ms: int) -> Optional[KeyEvent]:
        """Wait up to timeout_ms for a key press; return it, or None."""
        self.stdscr.timeout(timeout_ms)
        return key_event_from_code(self.stdscr.getch())


@contextmanager
def game_mode(terminal) -> Generator[object, None, None]:
    """
    Context manager for a play session.

    Automatically handles:
    - Enabling raw mode and hiding the cursor on entry
    - Clearing the screen, showing the cursor and leaving raw mode on exit,
      whether the session ended normally or with an exception

    Example:
        with game_mode(CursesTerminal()) as terminal:
            SnakeGame(terminal).run()
    """
    terminal.enable_raw_mode()
    try:
        terminal.hide_cursor()
        yield terminal
    finally:
        try:
            terminal.clear_screen()
            terminal.flush()
        finally:
            terminal.show_cursor()
            terminal.disable_raw_mode()
