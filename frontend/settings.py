"""Theme persistence for Gallery.

The theme picked in the command palette is written to THEME_FILE
(`GALLERY_THEME_FILE`) and restored on the next start. A saved name Textual
does not know, an unreadable file or a failed write never stops the app.
"""

from __future__ import annotations

import logging
from collections.abc import Collection

from backend import settings as backend_settings

DEFAULT_THEME = "catppuccin-mocha"

logger = logging.getLogger("gallery")


def load_theme(available: Collection[str]) -> str:
    """Return the saved theme if it is one of `available`, else DEFAULT_THEME."""
    theme_file = backend_settings.THEME_FILE
    try:
        saved = theme_file.read_text(encoding="utf-8").strip()
    except FileNotFoundError:
        return DEFAULT_THEME
    except (OSError, UnicodeDecodeError) as exc:
        logger.warning("Could not read theme file %s: %s", theme_file, exc)
        return DEFAULT_THEME

    if not saved:
        return DEFAULT_THEME
    if saved not in available:
        logger.warning(
            "Unknown theme %s in %s, using %s", saved, theme_file, DEFAULT_THEME
        )
        return DEFAULT_THEME
    return saved


def save_theme(theme: str) -> bool:
    """Write theme to THEME_FILE. Returns False (and logs) when the write fails."""
    theme_file = backend_settings.THEME_FILE
    try:
        theme_file.parent.mkdir(parents=True, exist_ok=True)
        theme_file.write_text(theme, encoding="utf-8")
    except OSError as exc:
        logger.warning("Failed to save theme %s to %s: %s", theme, theme_file, exc)
        return False
    logger.info("Saved theme %s", theme)
    return True
