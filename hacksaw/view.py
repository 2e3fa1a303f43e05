"""Render pipeline: map buffer coordinates to screen lines.

Everything here is pure. The terminal layer takes the resulting
:class:`Frame` and paints it.
"""

import time
from dataclasses import dataclass
from typing import Optional

from .constants import EditorConstants
from .document import Document
from .model import Position, StatusMessage
from .row import Row


@dataclass
class Frame:
    """One fully rendered screen."""
    rows: list[str]
    status: str
    message: str
    cursor: Position  # Screen space


def render_row(row: Row, offset: Position, width: int) -> str:
    """Return the visible slice of ``row`` for a viewport starting at ``offset.x``."""
    return row.render(offset.x, offset.x + width)


def welcome_line(width: int, version: str) -> str:
    """Return the centred welcome banner, led by the filler ``~``."""
    message = f"{EditorConstants.PROGRAM_NAME} -- version {version}"
    padding = max(width - len(message), 0) // 2
    spaces = " " * max(padding - 1, 0)
    return f"{EditorConstants.FILLER_LINE}{spaces}{message}"[:width]


def render_rows(document: Document, offset: Position, width: int, height: int,
                version: str) -> list[str]:
    """Render the ``height`` content rows of the screen.

    A screen row shows the buffer row ``r + offset.y`` if it exists. An
    empty document gets the welcome banner a third of the way down; any
    other row past the end of the buffer is a bare ``~``.
    """
    lines = []
    for terminal_row in range(height):
        row = document.row(terminal_row + offset.y)
        if row is not None:
            lines.append(render_row(row, offset, width))
        elif document.is_empty() and terminal_row == height // 3:
            lines.append(welcome_line(width, version))
        else:
            lines.append(EditorConstants.FILLER_LINE)
    return lines


def status_bar(filename: Optional[str], line_count: int, cursor_y: int, width: int,
               modified: bool = False) -> str:
    """Return the status line: file and line count left, cursor row right.

    Unsaved changes add a ``(modified)`` marker after the line count.
    """
    if filename:
        name = filename[:EditorConstants.FILENAME_DISPLAY_WIDTH]
    else:
        name = EditorConstants.NO_NAME_PLACEHOLDER
    status = f"{name} - {line_count} lines"
    if modified:
        status += EditorConstants.MODIFIED_MARKER
    line_indicator = f"{cursor_y + 1} of {line_count}"
    length = len(status) + len(line_indicator)
    if width > length:
        status += " " * (width - length - 1)
    return f"{status} {line_indicator}"[:width]


def message_bar(message: Optional[StatusMessage], width: int,
                timeout: float = EditorConstants.MESSAGE_TIMEOUT,
                now: Optional[float] = None) -> str:
    """Return the message text while it is still fresh, else an empty line."""
    if message is None or not message.is_visible(timeout, now):
        return ""
    return message.text[:width]


def screen_cursor(cursor: Position, offset: Position) -> Position:
    """Translate a buffer-space cursor into screen space."""
    return Position(max(cursor.x - offset.x, 0), max(cursor.y - offset.y, 0))


def render_frame(document: Document, cursor: Position, offset: Position,
                 width: int, height: int, message: Optional[StatusMessage],
                 version: str, timeout: float = EditorConstants.MESSAGE_TIMEOUT,
                 now: Optional[float] = None) -> Frame:
    """Render the whole screen for the current editing state."""
    if now is None:
        now = time.monotonic()
    return Frame(
        rows=render_rows(document, offset, width, height, version),
        status=status_bar(document.filename, len(document), cursor.y, width,
                          modified=document.dirty),
        message=message_bar(message, width, timeout, now),
        cursor=screen_cursor(cursor, offset),
    )
