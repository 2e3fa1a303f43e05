"""Session state for the hacksaw editor.

The editor is always in exactly one :class:`SessionState`. While
``PROMPTING`` it owns a :class:`Prompt` that accumulates a line of input
in the message bar until it is completed or cancelled.
"""

from enum import Enum
from typing import Callable, Optional, TYPE_CHECKING

from .keyboard import KeyType

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class SessionState(Enum):
    """States of the session loop."""
    RUNNING = "running"
    PROMPTING = "prompting"
    QUITTING = "quitting"


class PromptStatus(Enum):
    """Outcome of feeding one key to a prompt."""
    PENDING = "pending"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


PromptCallback = Callable[['Editor', Optional[str]], None]


class Prompt:
    """A single-line input prompt shown in the message bar.

    Printable keys append to the input, Backspace removes the last
    character, Enter completes and Escape or Ctrl-G cancels. The callback
    receives the accumulated input, or None when cancelled.
    """

    def __init__(self, text: str, on_complete: PromptCallback):
        self.text = text
        self.input = ""
        self.on_complete = on_complete

    def display(self) -> str:
        return self.text + self.input

    def feed(self, key_event: 'KeyEvent') -> PromptStatus:
        """Apply one key to the prompt and report whether it is finished."""
        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'enter':
            return PromptStatus.COMPLETED
        if (key_event.key_type == KeyType.SPECIAL and key_event.value == 'escape') or \
           (key_event.key_type == KeyType.CTRL and key_event.value == 'g'):
            return PromptStatus.CANCELLED
        if key_event.key_type == KeyType.SPECIAL and key_event.value == 'backspace':
            self.input = self.input[:-1]
        elif key_event.is_printable and key_event.value != '\t':
            self.input += key_event.value
        return PromptStatus.PENDING
