"""Frontend test fixtures - lightweight apps for screen and widget tests."""

import asyncio
from contextlib import asynccontextmanager

from textual.app import App


class CarouselTestApp(App):
    """Test app that starts with CarouselScreen like the real app."""

    def __init__(self, initial_page: int = 0, auto_navigate: bool = True):
        super().__init__()
        self.initial_page = initial_page
        self.auto_navigate = auto_navigate

    def on_mount(self):
        from frontend.screens.carousel_screen import CarouselScreen
        self.push_screen(
            CarouselScreen(
                initial_page=self.initial_page, auto_navigate=self.auto_navigate
            )
        )


@asynccontextmanager
async def carousel_test_context(app):
    """Run the app headless and let the screen mount before yielding the pilot."""
    try:
        async with app.run_test() as pilot:
            for _ in range(2):
                await pilot.pause()
            yield pilot
    except asyncio.CancelledError:
        pass
