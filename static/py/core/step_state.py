"""
Step State Store for the deck engine.
Holds the current StepState, persists it, and follows writes from other tabs.
"""

import json
from typing import Literal
from pydantic import BaseModel, ValidationError
from core.config import HIGHLIGHTS_KEY, STATE_KEYS, STEP_KEY
from models.step_state import StepState


class StepChange(BaseModel):
    """Notification sent to subscribers after every state change"""
    state: StepState
    reason: Literal["step", "highlight", "external"]
    # New rows appear at the end of a growing list whenever the step moves
    scroll_to_bottom: bool = False


class StepStateStore:
    """
    Owns the StepState of one session.

    Every change is written back to storage and announced to subscribers.
    Storage failures never stop the deck: they are reported through the
    debug callback and the store keeps going in memory.
    """

    def __init__(self, storage, question_count, debug_callback=None):
        """
        Args:
            storage (KeyValueStorage): Shared key/value store
            question_count (int): Number of question/answer items in the deck
            debug_callback: Function to call for debug messages
        """
        self.storage = storage
        self.question_count = question_count
        self.debug = debug_callback if debug_callback else print
        self._subscribers = []
        self._external_subscribers = []
        self.state = self.load()
        self._unsubscribe_storage = self.storage.subscribe(self._on_storage_event)

    @property
    def last_step(self) -> int:
        return max(0, 2 * self.question_count - 1)

    def clamp(self, step: int) -> int:
        return min(self.last_step, max(0, step))

    # --- Reading ---

    def load(self) -> StepState:
        """Read persisted state. Missing or malformed values fall back to defaults."""
        step = self._read_step()
        highlights = self._read_highlights()
        return StepState(step=self.clamp(step), highlights=highlights)

    def _read_raw(self, key):
        try:
            return self.storage.get_item(key)
        except Exception as e:
            self.debug(f"⚠ Could not read '{key}' from storage: {e}")
            return None

    def _read_step(self) -> int:
        raw = self._read_raw(STEP_KEY)
        if raw is None:
            return 0
        try:
            value = json.loads(raw)
        except (TypeError, ValueError):
            self.debug(f"⚠ Ignoring malformed stored step: {raw!r}")
            return 0
        if isinstance(value, bool) or not isinstance(value, int):
            self.debug(f"⚠ Ignoring malformed stored step: {raw!r}")
            return 0
        return value

    def _read_highlights(self):
        raw = self._read_raw(HIGHLIGHTS_KEY)
        if raw is None:
            return []
        try:
            return StepState(highlights=json.loads(raw)).highlights
        except (TypeError, ValueError, ValidationError):
            self.debug(f"⚠ Ignoring malformed stored highlights: {raw!r}")
            return []

    # --- Writing ---

    def _write(self, key, value):
        try:
            self.storage.set_item(key, json.dumps(value))
        except Exception as e:
            self.debug(f"⚠ Could not save '{key}' to storage, continuing in memory: {e}")

    def set_step(self, step: int):
        """Turn the page: clamp, clear highlights, persist both, notify with scroll."""
        self.state = StepState(step=self.clamp(step), highlights=[])
        self._write(STEP_KEY, self.state.step)
        self._write(HIGHLIGHTS_KEY, self.state.highlights)
        self._notify("step", scroll_to_bottom=True)

    def add_highlight(self, question_index: int):
        """Acknowledge a question. Duplicates are kept, order is irrelevant."""
        highlights = self.state.highlights + [question_index]
        self.state = StepState(step=self.state.step, highlights=highlights)
        self._write(HIGHLIGHTS_KEY, self.state.highlights)
        self._notify("highlight")

    # --- Subscriptions ---

    def subscribe(self, callback):
        """Call callback(StepChange) after every change. Returns an unsubscribe function."""
        self._subscribers.append(callback)
        return lambda: self._remove(self._subscribers, callback)

    def on_external_change(self, callback):
        """Call callback(StepState) after another session changed the stored state."""
        self._external_subscribers.append(callback)
        return lambda: self._remove(self._external_subscribers, callback)

    @staticmethod
    def _remove(callbacks, callback):
        if callback in callbacks:
            callbacks.remove(callback)

    def _notify(self, reason, scroll_to_bottom=False):
        change = StepChange(state=self.state, reason=reason, scroll_to_bottom=scroll_to_bottom)
        for callback in list(self._subscribers):
            callback(change)

    def _on_storage_event(self, key):
        if key is not None and key not in STATE_KEYS:
            return
        previous_step = self.state.step
        self.state = self.load()
        self.debug(f"🔄 State changed in another tab: step {self.state.step}")
        for callback in list(self._external_subscribers):
            callback(self.state)
        self._notify("external", scroll_to_bottom=self.state.step != previous_step)

    def close(self):
        """Stop following other sessions"""
        self._unsubscribe_storage()
