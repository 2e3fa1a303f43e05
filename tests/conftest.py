"""Shared fixtures: a scripted stand-in for the terminal boundary."""

import pytest

from hacksaw.editor import Editor
from hacksaw.terminal import Size


class FakeTerminal:
    """Records frames and replays a fixed list of key tokens."""

    def __init__(self, keys=(), width=80, height=10):
        self.keys = list(keys)
        self.width = width
        self.height = height
        self.frames = []
        self.goodbye = False
        self.entered = False
        self.exited = False

    def __enter__(self):
        self.entered = True
        return self

    def __exit__(self, exc_type, exc, tb):
        self.exited = True
        return False

    def size(self):
        return Size(self.width, self.height)

    def get_key(self):
        if not self.keys:
            raise OSError("no more input")
        key = self.keys.pop(0)
        if isinstance(key, BaseException):
            raise key
        return key

    def draw_frame(self, frame, status_color=None):
        self.frames.append(frame)

    def draw_goodbye(self):
        self.goodbye = True


@pytest.fixture
def make_editor():
    """Build an Editor wired to a FakeTerminal."""
    def _make(lines=None, keys=(), width=80, height=10, filename=None):
        editor = Editor(terminal=FakeTerminal(keys, width=width, height=height))
        if lines is not None:
            from hacksaw.document import Document
            editor.document = Document.from_text("\n".join(lines), filename=filename)
        return editor
    return _make
