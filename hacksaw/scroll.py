"""Viewport scrolling: keep the cursor inside the visible window."""

from .model import Position


def scroll(cursor: Position, offset: Position, width: int, height: int) -> Position:
    """Return the viewport offset that keeps ``cursor`` on screen.

    The offset only moves when the cursor has left the window, and then
    by the least amount that brings it back: to the top/left edge when the
    cursor is above/left of the window, to the bottom/right edge when it
    is below/right of it. Offsets never go negative.
    """
    return Position(
        _scroll_axis(cursor.x, offset.x, width),
        _scroll_axis(cursor.y, offset.y, height),
    )


def _scroll_axis(pos: int, start: int, extent: int) -> int:
    extent = max(extent, 1)
    if pos < start:
        return pos
    if pos >= start + extent:
        return max(pos - extent + 1, 0)
    return start
