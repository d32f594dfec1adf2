"""Keyboard input decoding for curtsies tokens and raw key strings."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'n', 'left', 'enter')
    raw: str  # The key string as received
    is_ctrl: bool = False
    is_sequence: bool = False


# Raw escape sequences for the arrow keys (normal and application cursor mode)
RAW_SEQUENCES = {
    '\x1b[A': 'up',
    '\x1b[B': 'down',
    '\x1b[C': 'right',
    '\x1b[D': 'left',
    '\x1bOA': 'up',
    '\x1bOB': 'down',
    '\x1bOC': 'right',
    '\x1bOD': 'left',
}

SPECIAL_NAMES = {
    'left', 'right', 'up', 'down', 'home', 'end', 'enter', 'backspace',
    'delete', 'page_up', 'page_down', 'insert',
}


class KeyboardHandler:
    """Turns keys read from the terminal into KeyEvents."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self, timeout: Optional[float] = None) -> Optional[KeyEvent]:
        """Read the next key from the terminal and parse it."""
        key = self.terminal.get_key(timeout)
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies token (e.g. '<RIGHT>') or a raw key string.

        Args:
            key: Key token; anything with a meaningful str()

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Curtsies-style names like '<LEFT>', '<SPACE>', '<Ctrl-c>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            return self._parse_token(key_str)

        if key_str in RAW_SEQUENCES:
            return KeyEvent(key_type=KeyType.SPECIAL, value=RAW_SEQUENCES[key_str],
                            raw=key_str, is_sequence=True)

        # Single-byte ASCII control chars (Ctrl-<letter>)
        if len(key_str) == 1:
            o = ord(key_str)
            if 1 <= o <= 26:  # Ctrl-A .. Ctrl-Z (exclude ESC=27)
                ch = chr(ord('a') + o - 1)
                # Ctrl-J / Ctrl-M are what terminals send for Enter
                if ch in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        if key_str == '\x1b':
            return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)

        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)

    def _parse_token(self, key_str: str) -> KeyEvent:
        name = key_str[1:-1].lower().replace('+', '-')
        parts = name.split('-')
        base = parts[-1]
        mods = set(parts[:-1])

        if base in ('pageup', 'page_up'):
            base = 'page_up'
        elif base in ('pagedown', 'page_down'):
            base = 'page_down'

        if not mods:
            if base in ('space', 'spacebar', 'spc'):
                return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
            if base in ('esc', 'escape'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw='\x1b')
        if 'ctrl' in mods and len(base) == 1:
            if base in ('j', 'm'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str,
                                is_sequence=True)
            return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str,
                            is_ctrl=True, is_sequence=True)
        if not mods and base in SPECIAL_NAMES:
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str, is_sequence=True)
        # Modified or unknown tokens are reported as-is and map to no action
        return KeyEvent(key_type=KeyType.SPECIAL, value=name, raw=key_str, is_sequence=True)
