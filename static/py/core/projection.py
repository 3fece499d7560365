"""
Render Projection - what the deck shows for a given step.

Pure function from (deck, step, highlights, presenter mode) to a ViewModel.
No DOM access here; ui.deck_view turns the ViewModel into markup.
"""

from typing import Annotated, List, Literal, Union
from pydantic import BaseModel, Field
from components.choice_widget import ChoiceConfig
from core.config import (
    ANSWER_HIDDEN_OPACITY,
    ANSWER_PEEK_OPACITY,
    ANSWER_SHOWN_OPACITY,
    FUTURE_ROW_OPACITY,
    PAST_ROW_OPACITY,
)
from models.deck import Deck


class QuestionRowView(BaseModel):
    kind: Literal["qa"] = "qa"
    position: int  # Index into deck.items
    question_index: int
    question: str
    answer: Union[ChoiceConfig, str]
    show_answer: bool
    is_past: bool  # Past and not acknowledged: rendered dimmed
    is_future: bool  # Only reachable in presenter mode
    answer_opacity: float
    row_opacity: float


class SectionRowView(BaseModel):
    kind: Literal["section"] = "section"
    position: int
    title: str


class BlockRowView(BaseModel):
    kind: Literal["block"] = "block"
    position: int
    content: str


RowView = Annotated[
    Union[QuestionRowView, SectionRowView, BlockRowView],
    Field(discriminator="kind"),
]


class ViewModel(BaseModel):
    title: str
    step: int
    last_step: int
    question_number: int
    is_answer_phase: bool
    presenter_mode: bool
    rows: List[RowView] = Field(default_factory=list)

    def question_rows(self) -> List[QuestionRowView]:
        return [row for row in self.rows if row.kind == "qa"]


def visible_item_count(deck: Deck, cutoff_question: int) -> int:
    """
    Number of leading items visible when questions up to cutoff_question are in view.

    Sections and blocks before the cutoff question are included. If the deck
    has no question with that index, every item is visible.
    """
    for position, question_index in enumerate(deck.question_indices()):
        if question_index == cutoff_question:
            return position + 1
    return len(deck.items)


def _answer_opacity(show_answer, presenter_mode):
    if show_answer:
        return ANSWER_SHOWN_OPACITY
    # Presenters peek at answers the audience cannot see yet
    return ANSWER_PEEK_OPACITY if presenter_mode else ANSWER_HIDDEN_OPACITY


def project(deck: Deck, step: int, highlights, presenter_mode: bool = False) -> ViewModel:
    question_number = step // 2
    is_answer_phase = step % 2 == 1
    highlighted = set(highlights)
    cutoff = question_number + (1 if presenter_mode else 0)
    count = visible_item_count(deck, cutoff)

    rows = []
    indices = deck.question_indices()
    for position, item in enumerate(deck.items[:count]):
        if item.type == "section":
            rows.append(SectionRowView(position=position, title=item.title))
        elif item.type == "block":
            rows.append(BlockRowView(position=position, content=item.content))
        else:
            question_index = indices[position]
            show_answer = question_index < question_number or (
                question_index == question_number and is_answer_phase
            )
            is_past = question_index < question_number and question_index not in highlighted
            is_future = question_index > question_number
            rows.append(
                QuestionRowView(
                    position=position,
                    question_index=question_index,
                    question=item.question,
                    answer=item.answer,
                    show_answer=show_answer,
                    is_past=is_past,
                    is_future=is_future,
                    answer_opacity=_answer_opacity(show_answer, presenter_mode),
                    row_opacity=PAST_ROW_OPACITY if is_past else (
                        FUTURE_ROW_OPACITY if is_future else 1.0
                    ),
                )
            )

    return ViewModel(
        title=deck.title,
        step=step,
        last_step=deck.last_step,
        question_number=question_number,
        is_answer_phase=is_answer_phase,
        presenter_mode=presenter_mode,
        rows=rows,
    )
