"""Keyboard input handling using curtsies-style tokens."""

from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"
    OTHER = "other"  # Anything glance has no binding for


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'j', 'left', 'page_down')
    raw: str  # The token as read from the terminal


# curtsies name -> our name
SPECIAL_KEYS = {
    'left': 'left',
    'right': 'right',
    'up': 'up',
    'down': 'down',
    'home': 'home',
    'end': 'end',
    'pageup': 'page_up',
    'page_up': 'page_up',
    'pagedown': 'page_down',
    'page_down': 'page_down',
}

WHITESPACE_KEYS = {'space': ' ', 'tab': '\t'}


class KeyboardHandler:
    """Reads key tokens from a terminal interface and parses them."""

    def __init__(self, terminal_interface):
        self.terminal = terminal_interface

    def get_key_event(self) -> KeyEvent:
        """Block until the next key and return it parsed."""
        return self.parse_key(self.terminal.read_key())

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token (or a single raw character).

        Args:
            key: Token such as ``'j'``, ``'<Ctrl-u>'``, ``'<PAGEDOWN>'``

        Returns:
            Parsed KeyEvent; tokens outside the bindable set come back
            as ``KeyType.OTHER``
        """
        key_str = str(key)

        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            name = key_str[1:-1].lower()
            if name in SPECIAL_KEYS:
                return KeyEvent(key_type=KeyType.SPECIAL, value=SPECIAL_KEYS[name], raw=key_str)
            if name in WHITESPACE_KEYS:
                value = WHITESPACE_KEYS[name]
                return KeyEvent(key_type=KeyType.REGULAR, value=value, raw=value)
            if name.startswith('ctrl-') and len(name) == 6 and name[-1].isalpha():
                return KeyEvent(key_type=KeyType.CTRL, value=name[-1], raw=key_str)
            return KeyEvent(key_type=KeyType.OTHER, value=name, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if o == 9:
                return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw=key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z
                return KeyEvent(key_type=KeyType.CTRL, value=chr(ord('a') + o - 1), raw=key_str)
            if o < 32 or o == 127:
                return KeyEvent(key_type=KeyType.OTHER, value=key_str, raw=key_str)
            return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

        # Pastes and other multi-character input
        return KeyEvent(key_type=KeyType.OTHER, value=key_str, raw=key_str)
