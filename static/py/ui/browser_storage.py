"""
Browser Storage - window.localStorage behind the KeyValueStorage interface.
The window "storage" event only fires for writes made by other tabs.
"""

import js
from pyodide.ffi import create_proxy
from core.storage import KeyValueStorage


class BrowserLocalStorage(KeyValueStorage):
    """localStorage of the current origin, shared by all its tabs"""

    def __init__(self, debug_callback=None):
        self.debug = debug_callback if debug_callback else print

    def get_item(self, key):
        value = js.window.localStorage.getItem(key)
        return None if value is None else str(value)

    def set_item(self, key, value):
        js.window.localStorage.setItem(key, value)

    def subscribe(self, callback):
        def on_storage(event):
            callback(event.key)

        proxy = create_proxy(on_storage)
        js.window.addEventListener("storage", proxy)
        self.debug("👂 Following deck progress from other tabs")

        def unsubscribe():
            js.window.removeEventListener("storage", proxy)
            proxy.destroy()

        return unsubscribe
