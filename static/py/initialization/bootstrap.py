import js
import json
import asyncio
from pyodide.ffi import create_proxy
from core.config import DECK_CONTAINER_ID, DECK_SOURCE_ID
from core.deck_loader import DeckLoadError, load_deck_from_data
from core.navigation import NavigationController
from core.projection import project
from core.scheduler import AsyncioScheduler
from core.session import presenter_mode_from_query
from core.step_state import StepStateStore
from ui.browser_storage import BrowserLocalStorage
from ui.deck_view import DeckView
from ui.error_display import ErrorDisplay
from ui.fullscreen import BrowserFullscreen
from utils import update_debug

MAX_ATTEMPTS = 50


class DeckSession:
    """Everything one open deck page needs, wired together once at page load"""

    def __init__(self, deck, presenter_mode):
        self.deck = deck
        self.presenter_mode = presenter_mode  # Read once, never re-evaluated
        self.storage = BrowserLocalStorage(debug_callback=update_debug)
        self.store = StepStateStore(self.storage, deck.question_count, debug_callback=update_debug)
        self.navigation = NavigationController(self.store, fullscreen=BrowserFullscreen(debug_callback=update_debug))
        self.view = DeckView(self.navigation, AsyncioScheduler(asyncio.get_running_loop()), DECK_CONTAINER_ID, debug_callback=update_debug)
        self._proxies = []

    def start(self):
        self.store.subscribe(self._on_change)
        self._listen(js.document, "keydown", self._on_keydown)
        self._listen(js.document, "dblclick", self._on_dblclick)
        self.redraw(scroll_to_bottom=True)
        update_debug(f"🎬 Deck '{self.deck.title}' ready at step {self.store.state.step}"
                     f"{' (presenter mode)' if self.presenter_mode else ''}")

    def redraw(self, scroll_to_bottom=False):
        state = self.store.state
        view_model = project(self.deck, state.step, state.highlights, self.presenter_mode)
        self.view.render(view_model, scroll_to_bottom=scroll_to_bottom)

    def _on_change(self, change):
        self.redraw(scroll_to_bottom=change.scroll_to_bottom)

    def _on_keydown(self, event):
        if self.navigation.handle_key(event.key):
            # No page scroll on Space
            event.preventDefault()

    def _on_dblclick(self, event):
        self.navigation.toggle_fullscreen()

    def _listen(self, target, event_name, handler):
        proxy = create_proxy(handler)
        target.addEventListener(event_name, proxy)
        self._proxies.append(proxy)


# Global session instance for JavaScript callbacks
deck_session = None


def read_deck_source():
    """Deck JSON embedded by the page template, or None if the page has not rendered it yet"""
    source = js.document.getElementById(DECK_SOURCE_ID)
    if not source:
        return None
    return json.loads(source.textContent)


# This waits for the page to provide the deck, then starts the session.
# This is the starting point launched by deck.html
async def start_bootstrap():
    global deck_session
    update_debug("BOOTSTRAP: start_bootstrap() function called!")

    data = None
    for attempt in range(MAX_ATTEMPTS):
        try:
            data = read_deck_source()
            if data is not None:
                break
            print(f"BOOTSTRAP: Attempt {attempt + 1}/{MAX_ATTEMPTS} - Deck source not ready")
        except ValueError as e:
            ErrorDisplay().show_system_error(context="The embedded deck is not valid JSON", details=str(e))
            return
        await asyncio.sleep(0.1)

    if data is None:
        ErrorDisplay().show_system_error(context="No deck content was found on this page")
        return

    try:
        deck = load_deck_from_data(data)
    except DeckLoadError as e:
        ErrorDisplay().show_system_error(context="The deck content does not match the expected shape", details=str(e))
        return

    deck_session = DeckSession(deck, presenter_mode_from_query(js.window.location.search))
    js.window.deck_session = deck_session
    deck_session.start()


# Auto-start bootstrap when module loads
asyncio.create_task(start_bootstrap())
