"""
Deck Content Model

Pydantic models for the authored deck: an ordered, read-only list of
question/answer pairs, section headers and free-form blocks.

Items are a tagged union on the `type` field. Deck YAML may omit the tag
and use the short authoring form instead:

    - question: <p>Have you used Rust?</p>
      answer: <p>A little.</p>
    - question: <p>Pick one</p>
      answer:
        choice: [Yes, No]
    - section: Ownership
    - block: <p>Free-form markup</p>
"""

from typing import Annotated, Any, List, Literal, Optional, Tuple, Union
from pydantic import BaseModel, ConfigDict, Field, field_validator
from components.choice_widget import ChoiceConfig

# Opaque markup. The engine never looks inside, it only renders it.
RichContent = str


class DeckModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")


class QuestionAnswerItem(DeckModel):
    type: Literal["qa"] = "qa"
    question: RichContent
    answer: Union[ChoiceConfig, RichContent]

    @property
    def has_choice(self) -> bool:
        return isinstance(self.answer, ChoiceConfig)


class SectionItem(DeckModel):
    type: Literal["section"] = "section"
    title: RichContent


class BlockItem(DeckModel):
    type: Literal["block"] = "block"
    content: RichContent


Item = Annotated[
    Union[QuestionAnswerItem, SectionItem, BlockItem],
    Field(discriminator="type"),
]


def normalize_item(raw: Any) -> Any:
    """Turn the short authoring form of an item into its tagged form."""
    if not isinstance(raw, dict) or "type" in raw:
        return raw

    if "section" in raw:
        data = {k: v for k, v in raw.items() if k != "section"}
        return {"type": "section", "title": raw["section"], **data}
    if "block" in raw:
        data = {k: v for k, v in raw.items() if k != "block"}
        return {"type": "block", "content": raw["block"], **data}
    if "question" in raw:
        data = dict(raw, type="qa")
        answer = data.get("answer")
        if isinstance(answer, dict) and "choice" in answer and "type" not in answer:
            data["answer"] = {"type": "choice", "options": answer["choice"]}
        return data
    return raw


class Deck(DeckModel):
    """
    The full ordered content list driving a presentation.

    Question/answer items are numbered separately from item positions:
    sections and blocks do not consume a question index or a step.
    """

    title: str = Field(default="Untitled deck", min_length=1)
    items: Tuple[Item, ...] = ()

    @field_validator('items', mode='before')
    def normalize_items(cls, v):
        if v is None:
            return ()
        if not isinstance(v, (list, tuple)):
            raise ValueError("Deck items must be a list")
        return [normalize_item(item) for item in v]

    @property
    def question_count(self) -> int:
        return sum(1 for item in self.items if item.type == "qa")

    @property
    def last_step(self) -> int:
        """Highest valid step: two steps (question, answer) per question, never below 0"""
        return max(0, 2 * self.question_count - 1)

    def question_indices(self) -> List[Optional[int]]:
        """Question index for each item position, None for sections and blocks"""
        indices = []
        next_index = 0
        for item in self.items:
            if item.type == "qa":
                indices.append(next_index)
                next_index += 1
            else:
                indices.append(None)
        return indices
