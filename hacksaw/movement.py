"""Cursor movement: navigation intent + document shape -> new cursor."""

from .document import Document
from .model import Direction, Position


def move_cursor(cursor: Position, direction: Direction, document: Document,
                page_height: int = 1) -> Position:
    """Return the cursor position after moving in ``direction``.

    The cursor may sit on the line just past the last row, so ``y`` never
    exceeds ``len(document)``. Moving right is deliberately unclamped: the
    cursor may run past the end of a short line and rendering tolerates it.

    Args:
        cursor: Current cursor position (not modified).
        direction: The navigation intent.
        document: Supplies the row count and row lengths.
        page_height: Rows moved by PAGE_UP / PAGE_DOWN.
    """
    x, y = cursor.x, cursor.y
    height = len(document)

    if direction == Direction.UP:
        y = max(y - 1, 0)
    elif direction == Direction.DOWN:
        if y < height:
            y += 1
    elif direction == Direction.LEFT:
        if x > 0:
            x -= 1
        elif y > 0:
            y -= 1
            row = document.row(y)
            x = len(row) if row is not None else 0
    elif direction == Direction.RIGHT:
        x += 1
    elif direction == Direction.HOME:
        x = 0
    elif direction == Direction.END:
        row = document.row(y)
        x = len(row) if row is not None else 0
    elif direction == Direction.PAGE_UP:
        y = max(y - page_height, 0)
    elif direction == Direction.PAGE_DOWN:
        y = min(y + page_height, height)

    return Position(x, y)
