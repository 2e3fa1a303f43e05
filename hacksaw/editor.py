"""Main editor controller: the session loop."""

import logging
from typing import Optional

from .commands import CommandRegistry
from .constants import EditorConstants
from .document import Document
from .keyboard import KeyboardHandler, KeyEvent
from .model import Direction, Position, StatusMessage
from .movement import move_cursor
from .scroll import scroll
from .session import Prompt, PromptCallback, PromptStatus, SessionState
from .settings import Settings
from .terminal import TerminalInterface
from .version import get_version
from .view import render_frame

logger = logging.getLogger(__name__)


class Editor:
    """Owns the editing session: document, cursor, viewport and state.

    Every handler receives the editor itself, so there is no ambient
    state. One cycle of :meth:`run` renders, reads one key, dispatches it
    and rescrolls.
    """

    def __init__(self, terminal: Optional[TerminalInterface] = None,
                 settings: Optional[Settings] = None):
        """Initialize the editor components."""
        self.settings = settings or Settings()
        self.terminal = terminal or TerminalInterface()
        self.keyboard = KeyboardHandler(self.terminal)
        self.command_registry = CommandRegistry()
        self.version = get_version()
        self.document = Document()
        self.cursor = Position()
        self.offset = Position()
        self.state = SessionState.RUNNING
        self.prompt: Optional[Prompt] = None
        self.status_message = StatusMessage(EditorConstants.HELP_MESSAGE)

    def load_file(self, filename: str):
        """Open ``filename``, falling back to an empty unnamed document.

        Args:
            filename: Path to file to load
        """
        try:
            self.document = Document.open(filename)
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not open %s: %s", filename, e)
            self.document = Document()
            self.set_status(EditorConstants.OPEN_FAILED_MESSAGE.format(filename))
        self.cursor = Position()
        self.offset = Position()

    def set_status(self, text: str):
        self.status_message = StatusMessage(text)

    def run(self):
        """Run the main editor loop until the user quits.

        The terminal is restored on every exit path. An ``OSError`` from
        the terminal propagates to the caller after restoration.
        """
        with self.terminal:
            try:
                while True:
                    self.refresh_screen()
                    if self.state == SessionState.QUITTING:
                        break
                    self.process_keypress()
            except KeyboardInterrupt:
                self.quit()
                self.refresh_screen()

    def refresh_screen(self):
        """Draw the current editor state to terminal."""
        if self.state == SessionState.QUITTING:
            self.terminal.draw_goodbye()
            return
        width, height = self.terminal.size()
        frame = render_frame(
            self.document,
            self.cursor,
            self.offset,
            width,
            height,
            self._current_message(),
            self.version,
            timeout=self.settings.message_timeout,
        )
        self.terminal.draw_frame(frame, self.settings.status_color)

    def _current_message(self) -> StatusMessage:
        if self.state == SessionState.PROMPTING and self.prompt is not None:
            return StatusMessage(self.prompt.display())
        return self.status_message

    def process_keypress(self):
        key_event = self.keyboard.get_key_event()
        if key_event:
            self._handle_key_event(key_event)

    def _handle_key_event(self, key_event: KeyEvent):
        """Dispatch one key according to the session state, then rescroll."""
        if self.state == SessionState.PROMPTING:
            self._handle_prompt_key(key_event)
        elif self.state == SessionState.RUNNING:
            self.command_registry.execute(self, key_event)
        self.scroll()

    def _handle_prompt_key(self, key_event: KeyEvent):
        prompt = self.prompt
        status = prompt.feed(key_event)
        if status == PromptStatus.PENDING:
            return
        self.prompt = None
        self.state = SessionState.RUNNING
        self.set_status("")
        if status == PromptStatus.CANCELLED:
            logger.debug("Prompt %r cancelled", prompt.text)
            prompt.on_complete(self, None)
        else:
            prompt.on_complete(self, prompt.input)

    def start_prompt(self, text: str, on_complete: PromptCallback):
        """Enter the prompting state with an empty input line."""
        self.prompt = Prompt(text, on_complete)
        self.state = SessionState.PROMPTING

    def scroll(self):
        width, height = self.terminal.size()
        self.offset = scroll(self.cursor, self.offset, width, height)

    def move_cursor(self, direction: Direction):
        _, height = self.terminal.size()
        self.cursor = move_cursor(self.cursor, direction, self.document, page_height=max(height, 1))

    def quit(self):
        self.state = SessionState.QUITTING

    def handle_save(self):
        """Save, asking for a filename first if the document has none."""
        if self.document.filename:
            self.save_document()
        else:
            self.start_prompt(EditorConstants.SAVE_PROMPT, _finish_save_as)

    def save_document(self) -> bool:
        """Save the document and report the outcome in the message bar.

        Returns:
            True if save succeeded, False otherwise
        """
        try:
            saved = self.document.save()
        except OSError as e:
            logger.warning("Could not save %s: %s", self.document.filename, e)
            self.set_status(EditorConstants.SAVE_FAILED_MESSAGE.format(e.strerror or e))
            return False
        if saved:
            self.set_status(EditorConstants.SAVE_OK_MESSAGE)
        return saved


def _finish_save_as(editor: Editor, filename: Optional[str]):
    if not filename:
        editor.set_status(EditorConstants.SAVE_CANCELLED_MESSAGE)
        return
    editor.document.filename = filename
    editor.save_document()
