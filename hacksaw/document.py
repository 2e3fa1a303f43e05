"""The in-memory line buffer for one file."""

import logging
import os
import tempfile
from typing import Optional

from .constants import EditorConstants
from .model import Position
from .row import Row

logger = logging.getLogger(__name__)


class Document:
    """An ordered sequence of rows plus an optional filename.

    Row ``i`` is line ``i`` of the file. The sequence may be empty. Edits
    are addressed by cursor position; a cursor on the line just past the
    last row (``y == len(document)``) appends a new row when typed into.
    """

    def __init__(self, rows: Optional[list[Row]] = None, filename: Optional[str] = None):
        self.rows: list[Row] = rows if rows is not None else []
        self.filename = filename
        self.dirty = False

    @classmethod
    def from_text(cls, content: str, filename: Optional[str] = None) -> "Document":
        """Build a document from file content.

        Lines end at ``\\n`` (a preceding ``\\r`` is dropped). A trailing
        newline does not produce an extra empty row.
        """
        lines = content.split("\n")
        if lines[-1] == "":
            lines.pop()
        return cls([Row(line.removesuffix("\r")) for line in lines], filename=filename)

    @classmethod
    def open(cls, path: str) -> "Document":
        """Read ``path`` into a new document.

        Raises:
            OSError: If the file cannot be read.
            UnicodeDecodeError: If the file is not valid UTF-8.
        """
        with open(path, "r", encoding="utf-8", newline="") as f:
            content = f.read()
        document = cls.from_text(content, filename=path)
        logger.info("Opened %s (%d lines)", path, len(document))
        return document

    def save(self) -> bool:
        """Write every row followed by a newline to ``filename``.

        The write is atomic: content goes to a temporary file in the same
        directory which then replaces the target.

        Returns:
            False without touching the disk if no filename is set, True
            after a successful write.

        Raises:
            OSError: If the file cannot be written.
        """
        if not self.filename:
            return False

        dir_name = os.path.dirname(self.filename) or "."
        base_name = os.path.basename(self.filename)
        temp_filename = None
        try:
            with tempfile.NamedTemporaryFile(
                mode="wb",
                dir=dir_name,
                prefix=EditorConstants.ATOMIC_SAVE_PREFIX + base_name,
                suffix=EditorConstants.ATOMIC_SAVE_SUFFIX,
                delete=False,
            ) as temp_file:
                temp_filename = temp_file.name
                for row in self.rows:
                    temp_file.write(row.as_bytes())
                    temp_file.write(b"\n")
                temp_file.flush()
                os.fsync(temp_file.fileno())
            os.replace(temp_filename, self.filename)
        except OSError:
            if temp_filename and os.path.exists(temp_filename):
                try:
                    os.remove(temp_filename)
                except OSError:
                    logger.warning("Could not remove temporary file %s", temp_filename)
            raise

        self.dirty = False
        logger.info("Saved %s (%d lines)", self.filename, len(self))
        return True

    def __len__(self) -> int:
        return len(self.rows)

    def is_empty(self) -> bool:
        return not self.rows

    def row(self, index: int) -> Optional[Row]:
        """Return the row at ``index``, or None if there is none."""
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def lines(self) -> list[str]:
        return [row.text for row in self.rows]

    def insert(self, at: Position, ch: str) -> None:
        """Insert ``ch`` at the cursor position ``at``.

        A newline splits the row at ``at.x`` instead of being stored.
        Positions below the line just past the end are ignored.
        """
        if at.y > len(self.rows):
            return
        self.dirty = True
        if ch == "\n":
            self._insert_newline(at)
            return
        if at.y == len(self.rows):
            self.rows.append(Row(ch))
            return
        self.rows[at.y].insert(at.x, ch)

    def _insert_newline(self, at: Position) -> None:
        if at.y == len(self.rows):
            self.rows.append(Row())
            return
        remainder = self.rows[at.y].split(at.x)
        self.rows.insert(at.y + 1, remainder)

    def delete(self, at: Position) -> None:
        """Delete at the cursor position ``at``.

        At column 0 of any row but the first, the row is joined onto the end
        of the previous row. Otherwise the character at ``at`` is removed if
        there is one.
        """
        row = self.row(at.y)
        if row is None:
            return
        if at.x == 0 and at.y > 0:
            self.rows[at.y - 1].append(row)
            del self.rows[at.y]
            self.dirty = True
            return
        if at.x < len(row):
            row.delete(at.x)
            self.dirty = True
