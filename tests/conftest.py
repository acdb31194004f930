"""
Shared fixtures: a scripted in-memory terminal.
"""

import os
import sys
from collections import deque

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


class FakeTerminal:
    """
    In-memory stand-in for CursesTerminal.

    screen maps (x, y) -> (ch, color) for everything written since the last
    clear. events is a script of KeyEvent / None values handed out by
    poll_event(); once it runs out every poll times out.
    """

    def __init__(self, width=10, height=10, events=()):
        self.width = width
        self.height = height
        self.events = deque(events)
        self.screen = {}
        self.cursor = (0, 0)
        self.raw = False
        self.cursor_visible = True
        self.flushes = 0
        self.clears = 0
        self.polls = []
        self.calls = []

    def size(self):
        return self.width, self.height

    def move_cursor(self, x, y):
        self.cursor = (x, y)

    def write_styled_char(self, ch, color=None):
        self.screen[self.cursor] = (ch, color)

    def write_styled_text(self, x, y, text, color=None):
        for offset, ch in enumerate(text[:max(0, self.width - x)]):
            self.move_cursor(x + offset, y)
            self.write_styled_char(ch, color)

    def text_at_row(self, y):
        return "".join(
            self.screen[(x, y)][0] if (x, y) in self.screen else " "
            for x in range(self.width)
        ).rstrip()

    def clear_screen(self):
        self.calls.append("clear_screen")
        self.clears += 1
        self.screen = {}

    def flush(self):
        self.calls.append("flush")
        self.flushes += 1

    def poll_event(self, timeout_ms):
        self.calls.append("poll_event")
        self.polls.append(timeout_ms)
        return self.events.popleft() if self.events else None

    def enable_raw_mode(self):
        self.calls.append("enable_raw_mode")
        self.raw = True

    def disable_raw_mode(self):
        self.calls.append("disable_raw_mode")
        self.raw = False

    def hide_cursor(self):
        self.calls.append("hide_cursor")
        self.cursor_visible = False

    def show_cursor(self):
        self.calls.append("show_cursor")
        self.cursor_visible = True


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def make_terminal():
    return FakeTerminal
