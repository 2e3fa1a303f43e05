"""Value types shared by the editing engine."""

import time
from dataclasses import dataclass, field
from enum import Enum


@dataclass
class Position:
    """A non-negative ``(x, y)`` coordinate pair.

    Used both for the cursor (buffer space: ``y`` is the row index and
    ``x`` the character column) and for the viewport offset (the top-left
    buffer coordinate currently on screen). Keep the two apart.
    """
    x: int = 0
    y: int = 0

    def __post_init__(self):
        if self.x < 0 or self.y < 0:
            raise ValueError(f"Position coordinates must be non-negative: ({self.x}, {self.y})")


class Direction(Enum):
    """Navigation intents understood by the movement engine."""
    UP = "up"
    DOWN = "down"
    LEFT = "left"
    RIGHT = "right"
    HOME = "home"
    END = "end"
    PAGE_UP = "page_up"
    PAGE_DOWN = "page_down"


@dataclass
class StatusMessage:
    """A transient notification shown in the message bar."""
    text: str = ""
    created: float = field(default_factory=time.monotonic)

    def is_visible(self, timeout: float, now: float | None = None) -> bool:
        if now is None:
            now = time.monotonic()
        return now - self.created < timeout
