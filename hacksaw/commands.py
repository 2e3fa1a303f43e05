"""Command pattern implementation for editor actions."""

from abc import ABC, abstractmethod
from typing import Dict, Tuple, Optional, TYPE_CHECKING
from .keyboard import KeyType
from .model import Direction, Position

if TYPE_CHECKING:
    from .editor import Editor
    from .keyboard import KeyEvent


class EditorCommand(ABC):
    """Base class for editor commands."""

    @abstractmethod
    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command.

        Args:
            editor: Editor instance
            key_event: The key event that triggered this command

        Returns:
            True if the command modified the document
        """
        pass


class MovementCommand(EditorCommand):
    """Moves the cursor in a fixed direction."""

    def __init__(self, direction: Direction):
        self.direction = direction

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        editor.move_cursor(self.direction)
        return False


class EditCommand(EditorCommand):
    """Base class for editing commands."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        return self._edit(editor, key_event)

    @abstractmethod
    def _edit(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Perform the edit and report whether anything changed."""
        pass


class InsertTextCommand(EditCommand):
    def _edit(self, editor, key_event):
        if not key_event.is_printable:
            return False
        editor.document.insert(editor.cursor, key_event.value)
        editor.move_cursor(Direction.RIGHT)
        return True


class InsertNewlineCommand(EditCommand):
    def _edit(self, editor, key_event):
        editor.document.insert(editor.cursor, '\n')
        editor.cursor = Position(0, editor.cursor.y + 1)
        return True


class BackspaceCommand(EditCommand):
    def _edit(self, editor, key_event):
        cursor = editor.cursor
        if cursor.x == 0 and cursor.y == 0:
            return False
        editor.move_cursor(Direction.LEFT)
        if cursor.x == 0:
            # Joins the row onto the previous one; the cursor already sits at the seam
            editor.document.delete(cursor)
        else:
            editor.document.delete(editor.cursor)
        return True


class SystemCommand(EditorCommand):
    """Base class for system commands like save and quit."""

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """System commands don't modify document content directly."""
        self._execute_system(editor, key_event)
        return False

    @abstractmethod
    def _execute_system(self, editor: 'Editor', key_event: 'KeyEvent'):
        """Perform the system action."""
        pass


class QuitCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.quit()


class SaveCommand(SystemCommand):
    def _execute_system(self, editor, key_event):
        editor.handle_save()


class CommandRegistry:
    """Registry for mapping key combinations to commands."""

    def __init__(self):
        self._commands: Dict[Tuple[KeyType, str], EditorCommand] = {}
        self._setup_default_commands()

    def _setup_default_commands(self):
        """Set up the default command mappings."""
        # Movement commands
        self.register((KeyType.SPECIAL, 'left'), MovementCommand(Direction.LEFT))
        self.register((KeyType.SPECIAL, 'right'), MovementCommand(Direction.RIGHT))
        self.register((KeyType.SPECIAL, 'up'), MovementCommand(Direction.UP))
        self.register((KeyType.SPECIAL, 'down'), MovementCommand(Direction.DOWN))
        self.register((KeyType.SPECIAL, 'home'), MovementCommand(Direction.HOME))
        self.register((KeyType.SPECIAL, 'end'), MovementCommand(Direction.END))
        self.register((KeyType.SPECIAL, 'page_up'), MovementCommand(Direction.PAGE_UP))
        self.register((KeyType.SPECIAL, 'page_down'), MovementCommand(Direction.PAGE_DOWN))

        # Editing commands
        self.register((KeyType.SPECIAL, 'backspace'), BackspaceCommand())
        self.register((KeyType.SPECIAL, 'enter'), InsertNewlineCommand())

        # System commands
        self.register((KeyType.CTRL, 'q'), QuitCommand())
        self.register((KeyType.CTRL, 's'), SaveCommand())

    def register(self, key: Tuple[KeyType, str], command: EditorCommand):
        """Register a command for a key combination."""
        self._commands[key] = command

    def get_command(self, key_type: KeyType, value: str) -> Optional[EditorCommand]:
        """Get the command for a key combination."""
        return self._commands.get((key_type, value))

    def execute(self, editor: 'Editor', key_event: 'KeyEvent') -> bool:
        """Execute the command for the given key event.

        Unbound keys other than printable characters are ignored.

        Returns:
            True if the document was modified
        """
        command = self.get_command(key_event.key_type, key_event.value)
        if command:
            return command.execute(editor, key_event)

        if key_event.key_type == KeyType.REGULAR:
            return InsertTextCommand().execute(editor, key_event)

        return False
