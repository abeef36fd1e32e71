"""Shared fixtures: an in-memory display surface."""

from contextlib import contextmanager

import pytest

from glance.terminal import WindowSize


class FakeTerminal:
    """Display surface that draws into a dict of rows instead of a tty.

    Keys are served from a queue; an exception instance in the queue is
    raised from ``read_key`` instead of being returned.
    """

    def __init__(self, width=80, height=24, keys=()):
        self.width = width
        self.height = height
        self.keys = list(keys)
        self.screen: dict[int, str] = {}
        self.cursor = (0, 0)
        self.cursor_visible = True
        self.reversed: list[str] = []
        self.writes: list[str] = []
        self.setup_count = 0
        self.cleanup_count = 0
        self.flush_count = 0

    def setup(self):
        self.setup_count += 1

    def cleanup(self):
        self.cleanup_count += 1

    @contextmanager
    def session(self):
        self.setup()
        try:
            yield self
        finally:
            self.cleanup()

    def window_size(self):
        return WindowSize(width=self.width, height=self.height)

    def read_key(self):
        assert self.keys, "read_key called with no keys left"
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def move_terminal_cursor(self, x, y):
        self.cursor = (x, y)

    def hide_cursor(self):
        self.cursor_visible = False

    def show_cursor(self):
        self.cursor_visible = True

    def clear_screen(self):
        self.screen.clear()

    def clear_current_line(self):
        x, y = self.cursor
        self.screen[y] = self.screen.get(y, "")[:x]

    def reverse(self, text):
        self.reversed.append(text)
        return text

    def write(self, text):
        x, y = self.cursor
        line = self.screen.get(y, "")
        self.screen[y] = line[:x].ljust(x) + text + line[x + len(text):]
        self.cursor = (x + len(text), y)
        self.writes.append(text)

    def flush(self):
        self.flush_count += 1

    def row(self, y):
        return self.screen.get(y, "")


@pytest.fixture
def make_terminal():
    """Factory for FakeTerminal instances."""
    return FakeTerminal
