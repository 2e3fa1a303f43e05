"""Constants and configuration for the hacksaw editor."""

class EditorConstants:
    """Central configuration constants for the editor."""

    PROGRAM_NAME = "Hacksaw"

    # Screen layout
    RESERVED_BOTTOM_ROWS = 2  # Status bar + message bar
    FILENAME_DISPLAY_WIDTH = 20  # Max characters of the filename in the status bar
    NO_NAME_PLACEHOLDER = "[No Name]"
    MODIFIED_MARKER = " (modified)"
    FILLER_LINE = "~"

    # Status messages
    MESSAGE_TIMEOUT = 5.0  # Seconds a status message stays visible
    HELP_MESSAGE = "^Q: Quit    ^S: Save"
    OPEN_FAILED_MESSAGE = "ERROR: Could not open '{}'"
    SAVE_OK_MESSAGE = "File saved successfully"
    SAVE_FAILED_MESSAGE = "Error saving file: {}"
    SAVE_CANCELLED_MESSAGE = "Save cancelled"
    SAVE_PROMPT = "Save as: "
    TERMINATED_MESSAGE = "Terminated Hacksaw"

    # Status bar colour (foreground RGB)
    STATUS_FG_COLOR = (63, 63, 63)

    # File operations
    ATOMIC_SAVE_PREFIX = "."  # Prefix for temporary save files
    ATOMIC_SAVE_SUFFIX = ".tmp"  # Suffix for temporary save files
