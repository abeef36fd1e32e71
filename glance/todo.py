"""TODO/DONE board: a two-list demo driven by the viewport engine.

Items move between the lists with Space; the lists are not saved.

Usage:
    glance-todo [file]

Controls:
    j/k, Down/Up: Move within the list
    Space: Move the current item to the other list
    J, Tab: Switch between the TODO and DONE lists
    q: Quit
"""

import sys
from enum import Enum
from typing import Iterable, Optional

from .commands import CommandRegistry
from .constants import ViewerConstants
from .document import Document
from .errors import GlanceError
from .keyboard import KeyboardHandler, KeyType
from .line import Line
from .terminal import TerminalInterface, WindowSize
from .viewport import Command, Viewport


class TodoAction(Enum):
    UP = "up"
    DOWN = "down"
    TRANSFER = "transfer"
    SWITCH = "switch"
    QUIT = "quit"
    NOOP = "noop"


TODO_BINDINGS = {
    (KeyType.REGULAR, 'k'): TodoAction.UP,
    (KeyType.REGULAR, 'j'): TodoAction.DOWN,
    (KeyType.SPECIAL, 'up'): TodoAction.UP,
    (KeyType.SPECIAL, 'down'): TodoAction.DOWN,
    (KeyType.REGULAR, ' '): TodoAction.TRANSFER,
    (KeyType.REGULAR, 'J'): TodoAction.SWITCH,
    (KeyType.REGULAR, '\t'): TodoAction.SWITCH,
    (KeyType.REGULAR, 'q'): TodoAction.QUIT,
    (KeyType.CTRL, 'q'): TodoAction.QUIT,
}


class Status(Enum):
    TODO = "todo"
    DONE = "done"

    def toggle(self) -> "Status":
        return Status.DONE if self is Status.TODO else Status.TODO


class TodoList:
    """Items of one list plus the viewport that tracks its current item."""

    def __init__(self, items: Optional[Iterable[str]] = None):
        self.items: list[str] = list(items or [])
        self.viewport = Viewport()

    @property
    def current(self) -> int:
        return self.viewport.cursor.y

    def _length_at(self, row: int) -> Optional[int]:
        # Items are selected whole, so every row is zero columns wide
        return 0 if 0 <= row < len(self.items) else None

    def move(self, command: Command, window_height: int):
        self.viewport.move(command, self._length_at, len(self.items), window_height)
        self.viewport.scroll(window_height, 1)

    def transfer_to(self, other: "TodoList"):
        """Move the current item to the end of ``other``."""
        current = self.current
        if current < len(self.items):
            other.items.append(self.items.pop(current))
        # Keep the cursor on an item when the last one was taken
        if self.items and current == len(self.items):
            self.viewport.move(Command.MOVE_UP, self._length_at, len(self.items))


class TodoBoard:
    """The two lists and which one is active."""

    def __init__(self, todos: Optional[Iterable[str]] = None, dones: Optional[Iterable[str]] = None):
        self.todos = TodoList(todos)
        self.dones = TodoList(dones)
        self.status = Status.TODO

    @property
    def active(self) -> TodoList:
        return self.todos if self.status is Status.TODO else self.dones

    @property
    def inactive(self) -> TodoList:
        return self.dones if self.status is Status.TODO else self.todos

    def apply(self, action: TodoAction, window_height: int):
        if action == TodoAction.UP:
            self.active.move(Command.MOVE_UP, window_height)
        elif action == TodoAction.DOWN:
            self.active.move(Command.MOVE_DOWN, window_height)
        elif action == TodoAction.TRANSFER:
            self.active.transfer_to(self.inactive)
            self.active.viewport.scroll(window_height, 1)
        elif action == TodoAction.SWITCH:
            self.status = self.status.toggle()

    def header(self) -> str:
        if self.status is Status.TODO:
            return ViewerConstants.TODO_HEADER
        return ViewerConstants.DONE_HEADER

    def item_label(self, item: str) -> str:
        if self.status is Status.TODO:
            return ViewerConstants.TODO_ITEM_PREFIX + item
        return ViewerConstants.DONE_ITEM_PREFIX + item


class TodoApp:
    """Read, update, render loop for the board."""

    def __init__(self, board: Optional[TodoBoard] = None, terminal: Optional[TerminalInterface] = None):
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.board = board or TodoBoard()
        self.command_registry = CommandRegistry(TODO_BINDINGS, default=TodoAction.NOOP)
        self.should_quit = False

    def run(self):
        with self.terminal.session():
            try:
                while True:
                    self.refresh_screen()
                    if self.should_quit:
                        break
                    self.process_keypress()
            except KeyboardInterrupt:
                pass

    def window_size(self) -> WindowSize:
        """Size of the list area: the terminal minus the header row."""
        size = self.terminal.window_size()
        return WindowSize(width=max(1, size.width), height=max(1, size.height - 1))

    def process_keypress(self) -> TodoAction:
        action = self.command_registry.translate(self.keyboard.get_key_event())
        if action == TodoAction.QUIT:
            self.should_quit = True
        else:
            self.board.apply(action, self.window_size().height)
        return action

    def visible_items(self, size: WindowSize) -> list[tuple[str, bool]]:
        """(label, is_current) for each item row in the window."""
        todo_list = self.board.active
        top = todo_list.viewport.offset.y
        rows = []
        for index in range(top, min(len(todo_list.items), top + size.height)):
            label = Line(self.board.item_label(todo_list.items[index])).render(0, size.width)
            rows.append((label, index == todo_list.current))
        return rows

    def refresh_screen(self):
        terminal = self.terminal
        terminal.hide_cursor()
        terminal.clear_screen()
        if not self.should_quit:
            size = self.window_size()
            self.board.active.viewport.scroll(size.height, 1)
            terminal.move_terminal_cursor(0, 0)
            terminal.write(Line(self.board.header()).render(0, size.width))
            for row, (label, is_current) in enumerate(self.visible_items(size), start=1):
                terminal.move_terminal_cursor(0, row)
                terminal.write(terminal.reverse(label) if is_current else label)
        terminal.flush()


def main(argv: Optional[list[str]] = None) -> int:
    """Entry point for ``glance-todo``; seeds TODO items from an optional file."""
    args = sys.argv[1:] if argv is None else argv
    try:
        items = []
        if args:
            items = [line.text for line in Document.open(args[0]) if line.text.strip()]
        TodoApp(TodoBoard(todos=items)).run()
    except (GlanceError, OSError) as e:
        print(f"glance-todo: error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
