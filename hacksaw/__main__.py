"""Hacksaw CLI entry point.

Allows running via `python -m hacksaw` and provides the console script
defined in `pyproject.toml`.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .version import get_version_string

USAGE = "usage: hacksaw [-h] [-V] [FILE]"

logger = logging.getLogger("hacksaw")


def main(argv: Optional[list[str]] = None) -> int:
    # Tiny arg parsing: version, help, and an optional filename
    args = sys.argv[1:] if argv is None else argv
    if args and args[0] in ("--version", "-V"):
        print(get_version_string())
        return 0
    if args and args[0] in ("--help", "-h"):
        print(USAGE)
        return 0
    if len(args) > 1:
        print(USAGE, file=sys.stderr)
        return 2

    # Lazy import to avoid importing UI deps for --version
    from .editor import Editor
    from .logging_config import setup_logging
    from .settings import load_settings

    settings = load_settings()
    setup_logging(settings.log_level)

    editor = Editor(settings=settings)
    if args:
        editor.load_file(args[0])
    try:
        editor.run()
    except OSError as e:
        logger.error("Fatal terminal error", exc_info=True)
        print(f"hacksaw: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
