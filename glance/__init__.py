"""Glance - a terminal viewer that scrolls to follow the cursor."""

__version__ = "0.1.0"

from .document import Document
from .line import Line
from .viewport import Command, Position, Viewport

__all__ = [
    'Command',
    'Document',
    'Line',
    'Position',
    'Viewport',
]
