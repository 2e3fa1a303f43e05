from __future__ import annotations

import importlib.metadata
import os
import subprocess
from pathlib import Path
from typing import Optional

_FALLBACK_VERSION = "0.1.0"


def get_version() -> str:
    """Return the installed package version."""
    try:
        return importlib.metadata.version("hacksaw")
    except importlib.metadata.PackageNotFoundError:
        return _FALLBACK_VERSION


def _run_git(args: list[str], cwd: Optional[str] = None) -> Optional[str]:
    try:
        out = subprocess.check_output(
            ["git", *args], cwd=cwd or os.getcwd(), stderr=subprocess.DEVNULL
        )
        return out.decode().strip() or None
    except (OSError, subprocess.CalledProcessError):
        return None


def get_commit() -> Optional[str]:
    """Return the short commit hash when running from a git checkout."""
    here = Path(__file__).resolve().parent
    root = _run_git(["rev-parse", "--show-toplevel"], cwd=str(here))
    if not root:
        return None
    commit = _run_git(["rev-parse", "HEAD"], cwd=root)
    return commit[:7] if commit else None


def get_version_string() -> str:
    commit = get_commit()
    suffix = f" ({commit})" if commit else ""
    return f"hacksaw {get_version()}{suffix}"
