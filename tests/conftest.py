import os

import django
import pytest

os.environ.setdefault("DJANGO_SETTINGS_MODULE", "deck_site.settings")
django.setup()

from core.storage import MemoryStorage  # noqa: E402
from core.step_state import StepStateStore  # noqa: E402
from models.deck import Deck  # noqa: E402


class ManualTimer:
    def __init__(self, delay, callback):
        self.delay = delay
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Scheduler whose timers only fire when the test says so."""

    def __init__(self) -> None:
        self.timers = []

    def call_later(self, delay, callback):
        timer = ManualTimer(delay, callback)
        self.timers.append(timer)
        return timer

    @property
    def pending(self):
        return [timer for timer in self.timers if not timer.cancelled]

    def fire_all(self) -> None:
        for timer in self.pending:
            timer.cancelled = True
            timer.callback()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def intro_deck() -> Deck:
    return Deck.model_validate(
        {
            "title": "Intro",
            "items": [
                {"section": "Intro"},
                {"question": "Q0", "answer": "A0"},
                {"question": "Q1", "answer": "A1"},
            ],
        }
    )


@pytest.fixture
def long_deck() -> Deck:
    return Deck.model_validate(
        {
            "title": "Long",
            "items": [
                {"question": "Q0", "answer": "A0"},
                {"question": "Q1", "answer": {"choice": ["Yes", "No"]}},
                {"section": "Middle"},
                {"question": "Q2", "answer": "A2"},
                {"block": "<p>note</p>"},
                {"question": "Q3", "answer": "A3"},
            ],
        }
    )


@pytest.fixture
def storage() -> MemoryStorage:
    return MemoryStorage()


@pytest.fixture
def make_store(storage):
    def factory(deck: Deck) -> StepStateStore:
        return StepStateStore(storage, deck.question_count, debug_callback=lambda message: None)

    return factory
