import logging
import os
from pathlib import Path

from textual.app import App
from textual.logging import TextualHandler

from backend.settings import LOG_LEVEL

LOGS_DIR = Path(__file__).parent / "logs"
LOGS_DIR.mkdir(exist_ok=True)

os.environ.setdefault("TEXTUAL_LOG", str(LOGS_DIR / "gallery.log"))


def _configure_logging() -> None:
    """Route all logging through Textual, with a file fallback."""
    log_path = Path(os.environ["TEXTUAL_LOG"])

    textual_handler = TextualHandler(stderr=False, stdout=False)
    textual_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    file_handler = logging.FileHandler(log_path, encoding="utf-8")
    file_handler.setFormatter(
        logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    )

    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        handlers=[textual_handler, file_handler],
        force=True,
    )


_configure_logging()

logger = logging.getLogger("gallery")

from frontend.screens.carousel_screen import CarouselScreen
from frontend.settings import load_theme, save_theme


class GalleryApp(App):
    """Image carousel with a searchable entry list."""

    TITLE = "Gallery"

    def on_mount(self) -> None:
        self.theme = load_theme(self.available_themes)
        logger.info("Starting with theme %s", self.theme)
        # Only changes made after startup (command palette) are written back
        self.watch(self, "theme", save_theme, init=False)
        self.push_screen(CarouselScreen())


def main() -> None:
    GalleryApp().run()


if __name__ == "__main__":
    main()
