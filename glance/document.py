"""Read-only content source: an ordered sequence of lines."""

import logging
import os
from typing import Iterable, Iterator, Optional

from .constants import ViewerConstants
from .errors import DocumentError
from .line import Line

logger = logging.getLogger(__name__)


class Document:
    """Ordered lines of content plus the name they were loaded from."""

    def __init__(self, lines: Optional[Iterable[str]] = None, filename: Optional[str] = None):
        self.filename = filename
        self._lines: list[Line] = [Line(text) for text in (lines or [])]

    @classmethod
    def open(cls, filename: str) -> "Document":
        """Load a UTF-8 text file.

        A file that does not exist yields an empty document that keeps
        the filename.

        Raises:
            DocumentError: The file exists but cannot be read or decoded.
        """
        try:
            with open(filename, 'r', encoding='utf-8', newline='') as f:
                content = f.read()
        except FileNotFoundError:
            logger.info(f"{filename} does not exist, opening empty document")
            return cls(filename=filename)
        except (OSError, UnicodeDecodeError) as e:
            raise DocumentError(f"Cannot read {filename}: {e}") from e
        return cls(split_lines(content), filename=filename)

    def line_at(self, row: int) -> Optional[Line]:
        """Return the line at ``row``, or None past the content."""
        if 0 <= row < len(self._lines):
            return self._lines[row]
        return None

    def length_at(self, row: int) -> Optional[int]:
        """Grapheme length of the line at ``row``, or None past the content."""
        line = self.line_at(row)
        return None if line is None else len(line)

    def line_count(self) -> int:
        return len(self._lines)

    def is_empty(self) -> bool:
        return not self._lines

    @property
    def display_name(self) -> str:
        if not self.filename:
            return ViewerConstants.NO_NAME
        return os.path.basename(self.filename) or self.filename

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[Line]:
        return iter(self._lines)


def split_lines(content: str) -> list[str]:
    """Split file content into lines.

    Accepts ``\\n`` and ``\\r\\n`` endings. A final newline terminates the
    last line rather than starting an empty one.
    """
    if not content:
        return []
    lines = content.split('\n')
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]
