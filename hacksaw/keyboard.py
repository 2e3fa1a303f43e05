"""Keyboard input handling using curtsies-style tokens."""

from typing import Optional
from dataclasses import dataclass
from enum import Enum


class KeyType(Enum):
    """Types of key events."""
    REGULAR = "regular"
    ALT = "alt"
    CTRL = "ctrl"
    SPECIAL = "special"


@dataclass
class KeyEvent:
    """Represents a parsed keyboard event."""
    key_type: KeyType
    value: str  # The base key (e.g., 'a', 'left', 'backspace')
    raw: str  # The raw key token from curtsies
    is_alt: bool = False
    is_ctrl: bool = False

    @property
    def is_printable(self) -> bool:
        """True for a regular key that inserts visible text (or a tab)."""
        if self.key_type != KeyType.REGULAR or not self.value:
            return False
        return self.value == '\t' or self.value.isprintable()


class KeyboardHandler:
    """Handles keyboard input using curtsies key names."""

    def __init__(self, terminal_interface):
        """Initialize with a terminal interface."""
        self.terminal = terminal_interface

    def get_key_event(self) -> Optional[KeyEvent]:
        """Block for the next key and map it to a KeyEvent."""
        key = self.terminal.get_key()
        if not key:
            return None
        return self.parse_key(key)

    def parse_key(self, key) -> KeyEvent:
        """Parse a curtsies key token into a KeyEvent.

        Args:
            key: curtsies token such as ``'a'``, ``'<UP>'`` or ``'<Ctrl-q>'``

        Returns:
            Parsed KeyEvent
        """
        key_str = str(key)

        # Named tokens like '<LEFT>', '<Ctrl-x>', '<Esc+u>'
        if len(key_str) > 2 and key_str.startswith('<') and key_str.endswith('>'):
            lower = key_str[1:-1].lower().replace('+', '-')
            parts = lower.split('-')
            base = parts[-1]
            mods = set(parts[:-1])
            if mods & {'meta', 'esc'}:
                mods.add('alt')

            if base in ('pageup', 'page_up'):
                base = 'page_up'
            elif base in ('pagedown', 'page_down'):
                base = 'page_down'
            elif base in ('esc', 'escape'):
                base = 'escape'

            if not mods:
                if base in ('space', 'spacebar', 'spc'):
                    return KeyEvent(key_type=KeyType.REGULAR, value=' ', raw=' ')
                if base == 'tab':
                    return KeyEvent(key_type=KeyType.REGULAR, value='\t', raw='\t')
            if 'ctrl' in mods and len(base) == 1:
                # Terminals report Enter as Ctrl-J or Ctrl-M, Backspace as Ctrl-H
                if base in ('j', 'm'):
                    return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
                if base == 'h':
                    return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
                return KeyEvent(key_type=KeyType.CTRL, value=base, raw=key_str, is_ctrl=True)
            if 'alt' in mods:
                return KeyEvent(key_type=KeyType.ALT, value=base, raw=key_str, is_alt=True)
            return KeyEvent(key_type=KeyType.SPECIAL, value=base, raw=key_str)

        if len(key_str) == 1:
            o = ord(key_str)
            if key_str in ('\n', '\r'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='enter', raw=key_str)
            if key_str in ('\x7f', '\x08'):
                return KeyEvent(key_type=KeyType.SPECIAL, value='backspace', raw=key_str)
            if key_str == '\x1b':
                return KeyEvent(key_type=KeyType.SPECIAL, value='escape', raw=key_str)
            if 1 <= o <= 26 and key_str != '\t':
                ch = chr(ord('a') + o - 1)
                return KeyEvent(key_type=KeyType.CTRL, value=ch, raw=key_str, is_ctrl=True)

        # Regular character
        return KeyEvent(key_type=KeyType.REGULAR, value=key_str, raw=key_str)
