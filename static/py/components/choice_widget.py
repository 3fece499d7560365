# choice_widget.py
from typing import Literal, Optional, Tuple
from pydantic import Field, field_validator
from components.base_component import BaseComponent, BaseComponentConfig
from core.config import CHOICE_ADVANCE_DELAY


class ChoiceConfig(BaseComponentConfig):
    # Authored as `answer: {choice: [...]}` in deck YAML, see models.deck
    type: Literal["choice"] = "choice"
    options: Tuple[str, ...] = Field(..., min_length=1)  # Markup, rendered as-is

    @field_validator('options')
    def validate_options_not_blank(cls, v):
        if any(not option.strip() for option in v):
            raise ValueError("Choice options cannot be blank")
        return v


class ChoiceWidget(BaseComponent):
    """
    Multiple-choice control embedded in an answer.

    The first pick schedules a single deferred "next step" so the deck
    reveals the pick, pauses, then moves on. Later picks only change which
    option is marked.
    """

    def __init__(self, component_id, config: ChoiceConfig, next_step, scheduler,
                 delay=CHOICE_ADVANCE_DELAY):
        """
        Args:
            component_id: Question index of the row hosting this widget
            config (ChoiceConfig): Authored options
            next_step: Zero-argument callable, normally NavigationController.next
            scheduler (Scheduler): Source of the deferred call
            delay (float): Seconds between the first pick and next_step()
        """
        super().__init__(component_id, config)
        self.next_step = next_step
        self.scheduler = scheduler
        self.delay = delay
        self.selected: Optional[int] = None
        self._pending = None

    @property
    def decided(self) -> bool:
        return self.selected is not None

    @property
    def advance_pending(self) -> bool:
        return self._pending is not None

    def select(self, option: int):
        """Pick an option. Only the first pick schedules the automatic advance."""
        if not 0 <= option < len(self.config.options):
            raise IndexError(f"Choice {self.component_id} has no option {option}")

        if self.selected is None and self.mounted:
            self._pending = self.scheduler.call_later(self.delay, self._advance)

        self.selected = option

    def _advance(self):
        self._pending = None
        if not self.mounted:
            return
        self.next_step()

    def teardown(self):
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
        super().teardown()

    def render(self) -> str:
        buttons = []
        for index, option in enumerate(self.config.options):
            selected_attr = ' data-selected="true"' if self.selected == index else ""
            buttons.append(
                f'<button type="button" class="choice-option" '
                f'data-choice="{self.component_id}" data-option="{index}"{selected_attr}>'
                f'&gt; {option}</button>'
            )

        decided_attr = ' data-selected="true"' if self.decided else ""
        return f'<div class="choice"{decided_attr}>{"".join(buttons)}</div>'
