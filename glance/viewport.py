"""Cursor and scroll-offset model for the viewer.

The viewport keeps two positions: the logical cursor (an index into the
content) and the offset (the content coordinate drawn at the top-left
corner of the window). ``move`` changes the cursor in response to a
navigation command; ``scroll`` then snaps the offset by the smallest
amount that brings the cursor back into the window.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

LengthLookup = Callable[[int], Optional[int]]


@dataclass
class Position:
    # 0-indexed
    x: int = 0
    y: int = 0


class Command(Enum):
    """Navigation commands produced from key events."""
    MOVE_LEFT = "move_left"
    MOVE_DOWN = "move_down"
    MOVE_UP = "move_up"
    MOVE_RIGHT = "move_right"
    JUMP_LINE_START = "jump_line_start"
    JUMP_LINE_END = "jump_line_end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"
    QUIT = "quit"
    NOOP = "noop"


class Viewport:
    """Owns the cursor position and the scroll offset."""

    def __init__(self):
        self.cursor = Position()
        self.offset = Position()

    def move(self, command: Command, length_at: LengthLookup, line_count: int,
             window_height: int = 1) -> Position:
        """Apply a navigation command to the cursor.

        Args:
            command: The command to apply.
            length_at: Returns the length of a row, or None past the content.
            line_count: Number of rows in the content.
            window_height: Rows per page for PAGE_UP / PAGE_DOWN.

        Returns:
            The updated cursor. The offset is left for ``scroll``.
        """
        x, y = self.cursor.x, self.cursor.y
        last_row = max(0, line_count - 1)
        page = max(1, window_height)
        width = _length(length_at, y)

        if command == Command.MOVE_LEFT:
            if x > 0:
                x -= 1
            elif y > 0:
                y -= 1
                x = _length(length_at, y)
        elif command == Command.MOVE_DOWN:
            if y < line_count - 1:
                y += 1
        elif command == Command.MOVE_UP:
            y = max(0, y - 1)
        elif command == Command.MOVE_RIGHT:
            if x == width:
                if y < line_count - 1:
                    y += 1
                    x = 0
            elif x < width:
                x += 1
        elif command == Command.JUMP_LINE_START:
            x = 0
        elif command == Command.JUMP_LINE_END:
            x = width
        elif command == Command.PAGE_UP:
            y = max(0, y - page)
        elif command == Command.PAGE_DOWN:
            y = min(last_row, y + page)

        # Row widths differ, so x never carries over a row change unclamped
        x = min(x, _length(length_at, y))

        self.cursor = Position(x=x, y=y)
        return self.cursor

    def scroll(self, window_height: int, window_width: int) -> Position:
        """Snap the offset so the cursor lies inside the window.

        Moves the offset by exactly the overflow: a cursor below the
        window becomes the bottom row, a cursor above it the top row.
        Calling this twice with the same window size changes nothing.
        """
        height = max(1, window_height)
        width = max(1, window_width)
        x, y = self.cursor.x, self.cursor.y
        offset = self.offset

        if y < offset.y:
            offset.y = y
        elif y >= offset.y + height:
            offset.y = y - height + 1

        if x < offset.x:
            offset.x = x
        elif x >= offset.x + width:
            offset.x = x - width + 1

        return offset

    def screen_cursor(self) -> Position:
        """Cursor position relative to the top-left corner of the window."""
        return Position(
            x=max(0, self.cursor.x - self.offset.x),
            y=max(0, self.cursor.y - self.offset.y),
        )


def _length(length_at: LengthLookup, row: int) -> int:
    length = length_at(row)
    return length if length is not None else 0
