from abc import ABC, abstractmethod
from core.config import KEY_BINDINGS


class FullscreenSurface(ABC):
    """Fullscreen control over the deck root view. Requests are best effort."""

    @abstractmethod
    def is_active(self) -> bool:
        """Whether the deck is currently fullscreen"""

    @abstractmethod
    def enter(self):
        """Ask the environment to show the root view fullscreen"""

    @abstractmethod
    def exit(self):
        """Leave fullscreen"""


class NavigationController:
    """Maps key presses, row clicks and double-clicks onto step state transitions"""

    def __init__(self, store, fullscreen=None):
        """
        Args:
            store (StepStateStore): State being navigated
            fullscreen (FullscreenSurface): Optional fullscreen control
        """
        self.store = store
        self.fullscreen = fullscreen

    @property
    def step(self) -> int:
        return self.store.state.step

    def _go_to(self, step):
        # Requests landing on the current step are no-ops, highlights included
        target = self.store.clamp(step)
        if target == self.step:
            return False
        self.store.set_step(target)
        return True

    def next(self):
        """Reveal the current answer, or move on to the next question"""
        return self._go_to(min(self.store.last_step, self.step + 1))

    def previous(self):
        return self._go_to(max(0, self.step - 1))

    def reset(self):
        """Back to the first question"""
        return self._go_to(0)

    def acknowledge(self, question_index: int):
        """
        Clear the dimming of a past question row without turning the page.

        Returns:
            bool: True if the row was past and not yet highlighted
        """
        state = self.store.state
        if question_index >= state.question_number or state.is_highlighted(question_index):
            return False
        self.store.add_highlight(question_index)
        return True

    def toggle_fullscreen(self):
        if self.fullscreen is None:
            return
        if self.fullscreen.is_active():
            self.fullscreen.exit()
        else:
            self.fullscreen.enter()

    def handle_key(self, key) -> bool:
        """
        Dispatch a KeyboardEvent.key value.

        Returns:
            bool: True if the key is bound to a navigation action
        """
        action = KEY_BINDINGS.get(key)
        if action is None:
            return False
        getattr(self, action)()
        return True
