"""
Fullscreen toggle for the deck page via the browser Fullscreen API.
"""

import js
from core.navigation import FullscreenSurface


class BrowserFullscreen(FullscreenSurface):
    """Fullscreen over document.documentElement. The browser may refuse, which is fine."""

    def __init__(self, debug_callback=None):
        self.debug = debug_callback if debug_callback else print

    def is_active(self) -> bool:
        return js.document.fullscreenElement is not None

    def enter(self):
        try:
            js.document.documentElement.requestFullscreen()
        except Exception as e:
            self.debug(f"⚠ Fullscreen request refused: {e}")

    def exit(self):
        try:
            js.document.exitFullscreen()
        except Exception as e:
            self.debug(f"⚠ Could not leave fullscreen: {e}")
