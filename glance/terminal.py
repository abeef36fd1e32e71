"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import termios
from contextlib import contextmanager
from typing import Iterator, NamedTuple, Optional, TextIO

import blessed
from curtsies import Input

from .errors import TerminalError

logger = logging.getLogger(__name__)


class WindowSize(NamedTuple):
    width: int
    height: int


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Output goes to the blessed terminal's stream; nothing is cached
    between frames, so the window size is read fresh on every query.
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None, stream: Optional[TextIO] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal(stream=stream)
        self.stream = stream or self.term.stream
        self.is_fullscreen = False
        self._input: Optional[Input] = None

    def setup(self):
        """Enter fullscreen mode and start reading keys in cbreak mode.

        Raises:
            TerminalError: The input side could not be put in cbreak mode.
        """
        self.write(self.term.enter_fullscreen + self.term.hide_cursor + self.term.clear)
        self.is_fullscreen = True
        try:
            # Ctrl-S / Ctrl-Q must reach us instead of pausing the tty
            self._input = Input(keynames='curtsies', disable_terminal_start_stop=True)
            self._input.__enter__()
        except (OSError, termios.error) as e:
            self._input = None
            self.cleanup()
            raise TerminalError(f"Cannot enter interactive mode: {e}") from e
        self.flush()

    def cleanup(self):
        """Exit fullscreen mode and restore terminal."""
        if self._input is not None:
            try:
                self._input.__exit__(None, None, None)
            except (OSError, termios.error) as e:
                # The output side still has to be restored below
                logger.debug(f"Could not restore terminal input mode: {e}")
            finally:
                self._input = None
        if self.is_fullscreen:
            self.write(self.term.exit_fullscreen + self.term.normal_cursor)
            self.flush()
            self.is_fullscreen = False

    @contextmanager
    def session(self) -> Iterator["TerminalInterface"]:
        """Hold the terminal in interactive mode for the duration of a block."""
        self.setup()
        try:
            yield self
        finally:
            self.cleanup()

    def window_size(self) -> WindowSize:
        """Current terminal size in columns and rows."""
        return WindowSize(width=self.term.width, height=self.term.height)

    def read_key(self) -> str:
        """Block until one key is pressed and return its curtsies token."""
        if self._input is None:
            raise TerminalError("Terminal input is not active")
        return str(next(self._input))

    def move_terminal_cursor(self, x: int, y: int):
        """Move the terminal cursor to screen column x, row y."""
        self.write(self.term.move_xy(x, y))

    def hide_cursor(self):
        self.write(self.term.hide_cursor)

    def show_cursor(self):
        self.write(self.term.normal_cursor)

    def clear_screen(self):
        """Clear the entire screen."""
        self.write(self.term.home + self.term.clear)

    def clear_current_line(self):
        """Clear from the cursor to the end of the current row."""
        self.write(self.term.clear_eol)

    def reverse(self, text: str) -> str:
        """Return text wrapped in reverse-video attributes."""
        return self.term.reverse + text + self.term.normal

    def write(self, text: str):
        print(text, end='', file=self.stream)

    def flush(self):
        self.stream.flush()
