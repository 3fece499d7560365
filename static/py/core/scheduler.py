"""
Deferred calls for the deck engine.
The browser runs a single event loop, so "later" means a timer on that loop.
"""

import asyncio
from abc import ABC, abstractmethod


class Scheduler(ABC):
    """Schedules one-shot callbacks. Handles returned by call_later expose cancel()."""

    @abstractmethod
    def call_later(self, delay, callback):
        """Run callback() after delay seconds and return a cancellable handle"""


class AsyncioScheduler(Scheduler):
    """Scheduler backed by the running asyncio loop (Pyodide's WebLoop in the browser)."""

    def __init__(self, loop=None):
        self.loop = loop

    def _get_loop(self):
        if self.loop is not None:
            return self.loop
        # Raises RuntimeError outside a running loop
        return asyncio.get_running_loop()

    def call_later(self, delay, callback):
        return self._get_loop().call_later(delay, callback)
