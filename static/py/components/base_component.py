# base_component.py
from pydantic import BaseModel, ConfigDict, Field
from abc import ABC, abstractmethod


class BaseComponentConfig(BaseModel):
    """Authored configuration of an embedded component. Read-only once loaded."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    type: str = Field(...) #Choice, etc. Each child narrows this to a Literal for the item union


class BaseComponent(ABC):
    """
    Live instance of a component mounted inside a deck row.

    Lifetime is tied to the row being visible: the deck view creates the
    component when its row enters the visible slice and tears it down when
    the row leaves it. State held here is never persisted.
    """

    def __init__(self, component_id, config: BaseComponentConfig):
        self.component_id = component_id
        self.config = config
        self.mounted = True

    @abstractmethod
    def render(self) -> str:
        """Return the component markup for its current state"""

    def teardown(self):
        """Called once when the component leaves the view"""
        self.mounted = False
