"""Text and filesystem helpers."""

from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Optional

import platformdirs

_APP_NAME = "helix"


def find_first_non_whitespace_char(line: str) -> Optional[int]:
    """Return the index of the first non-whitespace character, or None."""
    return next((i for i, ch in enumerate(line) if not ch.isspace()), None)


def find_root(root: Optional[str] = None) -> Optional[Path]:
    """Return the nearest directory at or above ``root`` that holds a ``.git`` directory."""
    current_dir = Path.cwd()
    if root is None:
        start = current_dir
    else:
        path = Path(root)
        start = path if path.is_absolute() else current_dir / path
    for ancestor in (start, *start.parents):
        if (ancestor / ".git").is_dir():
            return ancestor
    return None


def runtime_dir() -> Path:
    """Return the runtime directory: ``HELIX_RUNTIME`` or the program's directory."""
    env = os.environ.get("HELIX_RUNTIME")
    if env is not None:
        return Path(env)
    program = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    return Path(program).resolve().parent


def config_dir() -> Path:
    """Return the user configuration directory."""
    return platformdirs.user_config_path(_APP_NAME, appauthor=False)


def cache_dir() -> Path:
    """Return the user cache directory."""
    return platformdirs.user_cache_path(_APP_NAME, appauthor=False)