"""Main viewer controller: the read, update, render loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .document import Document
from .keyboard import KeyboardHandler
from .line import Line
from .settings import ViewerSettings
from .terminal import TerminalInterface, WindowSize
from .viewport import Command, Viewport

logger = logging.getLogger(__name__)


class Viewer:
    """Interactive viewer for a document.

    Each cycle draws a frame, stops if a quit was requested, and otherwise
    blocks for one key, which moves the cursor and rescrolls the viewport.
    """

    def __init__(self, document: Optional[Document] = None,
                 terminal: Optional[TerminalInterface] = None,
                 settings: Optional[ViewerSettings] = None,
                 command_registry: Optional[CommandRegistry] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.document = document or Document()
        self.settings = settings or ViewerSettings()
        self.command_registry = command_registry or CommandRegistry()
        self.viewport = Viewport()
        self.should_quit = False

    def run(self):
        """Run the viewer until quit.

        The terminal is restored on every exit path. I/O errors from the
        terminal propagate to the caller once it has been restored.
        """
        with self.terminal.session():
            try:
                while True:
                    self.refresh_screen()
                    if self.should_quit:
                        break
                    self.process_keypress()
            except KeyboardInterrupt:
                # Ctrl-C ends the session like a quit, minus the last frame
                pass

    def window_size(self) -> WindowSize:
        """Size of the content area: the terminal minus the status bar."""
        return self._content_size(self.terminal.window_size())

    def _content_size(self, terminal_size: WindowSize) -> WindowSize:
        height = terminal_size.height
        if self._shows_status_bar(terminal_size):
            height -= 1
        return WindowSize(width=max(1, terminal_size.width), height=max(1, height))

    def _shows_status_bar(self, terminal_size: WindowSize) -> bool:
        # A one-row terminal has no room for anything but content
        return self.settings.status_bar and terminal_size.height >= 2

    def process_keypress(self) -> Command:
        """Read one key and apply the command bound to it."""
        key_event = self.keyboard.get_key_event()
        command = self.command_registry.translate(key_event)
        logger.debug(f"key {key_event.raw!r} -> {command}")
        self.apply(command)
        return command

    def apply(self, command: Command):
        """Update the cursor, then the scroll offset, for one command."""
        if command == Command.QUIT:
            self.should_quit = True
            return
        size = self.window_size()
        self.viewport.move(command, self.document.length_at, self.document.line_count(), size.height)
        self.viewport.scroll(size.height, size.width)

    def refresh_screen(self):
        """Draw the current frame, or only the goodbye message when quitting."""
        terminal = self.terminal
        terminal.hide_cursor()
        terminal.move_terminal_cursor(0, 0)

        if self.should_quit:
            terminal.clear_screen()
            terminal.write(self.settings.goodbye_message)
        else:
            terminal_size = terminal.window_size()
            size = self._content_size(terminal_size)
            # The window may have been resized since the last key
            self.viewport.scroll(size.height, size.width)
            self._draw_rows(size)
            if self._shows_status_bar(terminal_size):
                self._draw_status_bar(size)
            cursor = self.viewport.screen_cursor()
            terminal.move_terminal_cursor(cursor.x, cursor.y)

        terminal.show_cursor()
        terminal.flush()

    def visible_rows(self, size: WindowSize) -> list[str]:
        """Text of each content row in the window, top to bottom."""
        offset = self.viewport.offset
        filler = Line(self.settings.filler_marker).render(0, size.width)
        rows = []
        for row in range(size.height):
            line = self.document.line_at(offset.y + row)
            if line is None:
                rows.append(filler)
            else:
                rows.append(line.render(offset.x, offset.x + size.width))
        return rows

    def status_text(self, width: int) -> str:
        """Status bar contents, padded or truncated to ``width`` columns."""
        cursor = self.viewport.cursor
        left = f"{self.document.display_name} - {self.document.line_count()} lines"
        right = f"{cursor.y + 1}:{cursor.x + 1}"
        padding = max(1, width - Line(left).length() - len(right))
        return Line(left + " " * padding + right).render(0, width)

    def _draw_rows(self, size: WindowSize):
        for y, text in enumerate(self.visible_rows(size)):
            self.terminal.move_terminal_cursor(0, y)
            self.terminal.clear_current_line()
            self.terminal.write(text)

    def _draw_status_bar(self, size: WindowSize):
        self.terminal.move_terminal_cursor(0, size.height)
        self.terminal.clear_current_line()
        self.terminal.write(self.terminal.reverse(self.status_text(size.width)))
