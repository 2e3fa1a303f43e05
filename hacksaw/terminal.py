"""Terminal interface using Blessed for display and Curtsies for input."""

import logging
import termios
from typing import NamedTuple, Optional

import blessed
from curtsies import Input
from curtsies.events import PasteEvent

from .constants import EditorConstants
from .model import Position
from .view import Frame

logger = logging.getLogger(__name__)


class Size(NamedTuple):
    """Usable text area in character cells."""
    width: int
    height: int


class TerminalInterface:
    """Handles terminal I/O using Blessed.

    Use as a context manager so the terminal is restored on every exit
    path::

        with TerminalInterface() as terminal:
            key = terminal.get_key()
    """

    def __init__(self, terminal: Optional[blessed.Terminal] = None):
        """Initialize with a terminal instance (or create one)."""
        self.term = terminal or blessed.Terminal()
        self.is_fullscreen = False
        self._curtsies_input: Optional[Input] = None
        self._pending_keys: list[str] = []

    def __enter__(self) -> "TerminalInterface":
        self.setup()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.cleanup()
        return False

    def setup(self):
        """Enter fullscreen and raw input mode.

        Raises:
            OSError: If stdin cannot be switched to raw mode.
        """
        self.write(self.term.enter_fullscreen + self.term.hide_cursor + self.term.clear)
        self.is_fullscreen = True
        if self._curtsies_input is None:
            # Turn off XON/XOFF so Ctrl-S and Ctrl-Q reach us
            inp = Input(keynames='curtsies', disable_terminal_start_stop=True)
            try:
                inp.__enter__()
            except termios.error as e:
                self.cleanup()
                raise OSError(f"Cannot enter raw mode: {e}") from e
            self._curtsies_input = inp

    def cleanup(self):
        """Leave raw mode and fullscreen. Safe to call more than once."""
        if self._curtsies_input is not None:
            try:
                self._curtsies_input.__exit__(None, None, None)
            except (termios.error, OSError) as e:
                # Teardown continues so the screen is still restored
                logger.warning("Could not leave raw mode: %s", e)
            finally:
                self._curtsies_input = None
        if self.is_fullscreen:
            self.write(self.term.normal + self.term.exit_fullscreen + self.term.normal_cursor)
            self.is_fullscreen = False

    def size(self) -> Size:
        """Text area size, excluding the status and message bars."""
        return Size(
            self.term.width,
            max(self.term.height - EditorConstants.RESERVED_BOTTOM_ROWS, 0),
        )

    def get_key(self) -> str:
        """Block until a key is pressed and return its curtsies token.

        A paste arrives as one event; its keys are handed out one per call.

        Raises:
            OSError: If input is not initialised or stdin is closed.
        """
        if self._curtsies_input is None:
            raise OSError("Terminal input is not initialised")
        if self._pending_keys:
            return self._pending_keys.pop(0)
        try:
            event = next(self._curtsies_input)
        except StopIteration as e:
            raise OSError("End of terminal input") from e
        if isinstance(event, PasteEvent):
            logger.debug("Paste of %d keys", len(event.events))
            self._pending_keys.extend(str(key) for key in event.events)
            return self._pending_keys.pop(0) if self._pending_keys else ''
        return str(event)

    def write(self, text: str) -> None:
        print(text, end='', flush=True)

    def clear_screen(self):
        """Clear the entire screen and home the cursor."""
        self.write(self.term.home + self.term.clear)

    def hide_cursor(self):
        self.write(self.term.hide_cursor)

    def show_cursor(self):
        self.write(self.term.normal_cursor)

    def move_cursor(self, position: Position):
        self.write(self.term.move_xy(position.x, position.y))

    def set_fg_color(self, rgb: tuple[int, int, int]):
        self.write(self.term.color_rgb(*rgb))

    def reset_color(self):
        self.write(self.term.normal)

    def draw_frame(self, frame: Frame,
                   status_color: tuple[int, int, int] = EditorConstants.STATUS_FG_COLOR):
        """Paint a rendered frame and place the cursor.

        Content rows fill the top of the screen, followed by the status
        bar in ``status_color`` and the message bar.
        """
        self.hide_cursor()
        rows = [self.term.move_xy(0, y) + self.term.clear_eol + line
                for y, line in enumerate(frame.rows)]
        self.write(''.join(rows))
        status_y = len(frame.rows)
        self.write(self.term.move_xy(0, status_y) + self.term.clear_eol)
        self.set_fg_color(status_color)
        self.write(frame.status)
        self.reset_color()
        self.write(self.term.move_xy(0, status_y + 1) + self.term.clear_eol + frame.message)
        self.move_cursor(frame.cursor)
        self.show_cursor()

    def draw_goodbye(self):
        """Clear the screen and print the termination message."""
        self.clear_screen()
        self.write(EditorConstants.TERMINATED_MESSAGE + "\r\n")
