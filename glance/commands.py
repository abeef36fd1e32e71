"""Key bindings: maps parsed key events to commands."""

from typing import Dict, Hashable, Optional, Tuple

from .keyboard import KeyEvent, KeyType
from .viewport import Command

KeyBinding = Tuple[KeyType, str]


class CommandRegistry:
    """Registry for mapping key combinations to commands.

    Any hashable value can be bound; the viewer binds ``Command`` members
    and the todo board binds its own actions. Unbound keys translate to
    ``default``.
    """

    def __init__(self, bindings: Optional[Dict[KeyBinding, Hashable]] = None,
                 default: Hashable = Command.NOOP):
        self._commands: Dict[KeyBinding, Hashable] = {}
        self.default = default
        if bindings is None:
            self._setup_default_commands()
        else:
            for key, command in bindings.items():
                self.register(key, command)

    def _setup_default_commands(self):
        """Set up the viewer's default key mappings."""
        # vi-style movement
        self.register((KeyType.REGULAR, 'h'), Command.MOVE_LEFT)
        self.register((KeyType.REGULAR, 'j'), Command.MOVE_DOWN)
        self.register((KeyType.REGULAR, 'k'), Command.MOVE_UP)
        self.register((KeyType.REGULAR, 'l'), Command.MOVE_RIGHT)

        # Arrow keys
        self.register((KeyType.SPECIAL, 'left'), Command.MOVE_LEFT)
        self.register((KeyType.SPECIAL, 'down'), Command.MOVE_DOWN)
        self.register((KeyType.SPECIAL, 'up'), Command.MOVE_UP)
        self.register((KeyType.SPECIAL, 'right'), Command.MOVE_RIGHT)

        # Line start/end
        self.register((KeyType.REGULAR, '^'), Command.JUMP_LINE_START)
        self.register((KeyType.REGULAR, '$'), Command.JUMP_LINE_END)
        self.register((KeyType.SPECIAL, 'home'), Command.JUMP_LINE_START)
        self.register((KeyType.SPECIAL, 'end'), Command.JUMP_LINE_END)

        # Paging
        self.register((KeyType.CTRL, 'u'), Command.PAGE_UP)
        self.register((KeyType.CTRL, 'd'), Command.PAGE_DOWN)
        self.register((KeyType.SPECIAL, 'page_up'), Command.PAGE_UP)
        self.register((KeyType.SPECIAL, 'page_down'), Command.PAGE_DOWN)

        self.register((KeyType.CTRL, 'q'), Command.QUIT)

    def register(self, key: KeyBinding, command: Hashable):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[Hashable]:
        """Get the command bound to a key combination, if any."""
        return self._commands.get((key_type, value))

    def translate(self, key_event: KeyEvent) -> Hashable:
        """Translate a key event into its bound command, or the default."""
        command = self.get_command(key_event.key_type, key_event.value)
        return self.default if command is None else command
