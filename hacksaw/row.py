"""A single line of editable text."""


class Row:
    """One line of text, addressed by character column.

    A row never contains a newline; splitting on Enter is handled by the
    document, which creates a new row instead.
    """

    __slots__ = ("_text",)

    def __init__(self, text: str = ""):
        self._text = text

    def __repr__(self) -> str:
        return f"Row({self._text!r})"

    def __eq__(self, other) -> bool:
        if isinstance(other, Row):
            return self._text == other._text
        return NotImplemented

    def __len__(self) -> int:
        return len(self._text)

    @property
    def text(self) -> str:
        return self._text

    def render(self, start: int, end: int) -> str:
        """Return the characters in ``[start, end)``, clamped to the row.

        Never fails: an end past the row is truncated and a start past the
        row yields an empty string.
        """
        end = min(end, len(self._text))
        start = min(start, end)
        return self._text[start:end]

    def insert(self, at: int, ch: str) -> None:
        """Insert ``ch`` before column ``at``; append if ``at`` is past the end."""
        if at >= len(self._text):
            self._text += ch
        else:
            self._text = self._text[:at] + ch + self._text[at:]

    def delete(self, at: int) -> None:
        """Remove the character at column ``at``; out of range is a no-op."""
        if at < 0 or at >= len(self._text):
            return
        self._text = self._text[:at] + self._text[at + 1:]

    def split(self, at: int) -> "Row":
        """Truncate this row at ``at`` and return the remainder as a new row."""
        at = min(at, len(self._text))
        remainder = Row(self._text[at:])
        self._text = self._text[:at]
        return remainder

    def append(self, other: "Row") -> None:
        self._text += other._text

    def as_bytes(self) -> bytes:
        return self._text.encode("utf-8")
