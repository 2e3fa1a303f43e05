"""Hacksaw - a small terminal text editor."""

from .document import Document
from .model import Direction, Position, StatusMessage
from .movement import move_cursor
from .row import Row
from .scroll import scroll

__all__ = [
    'Direction',
    'Document',
    'Position',
    'Row',
    'StatusMessage',
    'move_cursor',
    'scroll',
]
