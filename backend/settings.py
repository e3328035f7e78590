"""Backend configuration for Gallery."""

from __future__ import annotations

import os
from pathlib import Path


def _env_flag(name: str, default: bool = False) -> bool:
    """Return True if the environment variable is set to a truthy value."""
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "on"}


def _env_int(name: str, default: int) -> int:
    """Return the environment variable as an int, or default if unset or malformed."""
    value = os.getenv(name)
    if value is None:
        return default
    try:
        return int(value.strip())
    except ValueError:
        return default


# Image handles in the content table are resolved against this directory.
# Anchored to project root, not current working directory.
_PROJECT_ROOT = Path(__file__).resolve().parent.parent
IMAGES_DIR = Path(os.getenv("GALLERY_IMAGES_DIR", _PROJECT_ROOT / "assets" / "images"))

LOG_LEVEL = (os.getenv("GALLERY_LOG_LEVEL") or "INFO").strip().upper()

# Page shown when the screen is created. Clamped into range by the screen.
INITIAL_PAGE = _env_int("GALLERY_INITIAL_PAGE", 0)

# When off, searching only filters the active page and never moves the carousel.
AUTO_NAVIGATE = _env_flag("GALLERY_AUTO_NAVIGATE", True)

# Theme chosen in the command palette, restored on the next start.
THEME_FILE = Path(os.getenv("GALLERY_THEME_FILE", _PROJECT_ROOT / "data" / "theme.txt"))
