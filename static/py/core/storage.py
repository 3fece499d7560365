"""
Key/value storage used to persist deck progress.
The browser implementation lives in ui.browser_storage (window.localStorage).
"""

from abc import ABC, abstractmethod


class KeyValueStorage(ABC):
    """
    String key/value store shared by every session of the same origin.

    Subscribers hear about writes made by *other* sessions only, the same
    way the browser "storage" event behaves.
    """

    @abstractmethod
    def get_item(self, key):
        """Return the stored string, or None if the key is absent"""

    @abstractmethod
    def set_item(self, key, value):
        """Store a string value"""

    @abstractmethod
    def subscribe(self, callback):
        """
        Call callback(key) whenever another session writes a key.
        key is None when the whole store was cleared.

        Returns:
            callable: Removes the subscription
        """


class MemoryStorage(KeyValueStorage):
    """In-process storage. Used when no browser storage exists, and in tests."""

    def __init__(self, initial=None):
        self.data = dict(initial or {})
        self._listeners = []

    def get_item(self, key):
        return self.data.get(key)

    def set_item(self, key, value):
        self.data[key] = str(value)

    def subscribe(self, callback):
        self._listeners.append(callback)

        def unsubscribe():
            if callback in self._listeners:
                self._listeners.remove(callback)

        return unsubscribe

    def external_write(self, key, value):
        """Write as another session would: store the value and notify subscribers."""
        if value is None:
            self.data.pop(key, None)
        else:
            self.data[key] = str(value)
        for listener in list(self._listeners):
            listener(key)

    def external_clear(self):
        self.data.clear()
        for listener in list(self._listeners):
            listener(None)
