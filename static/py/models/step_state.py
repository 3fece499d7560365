"""
Step State Model

The whole of the presentation progress: a single step counter encoding the
current question and whether its answer is revealed, plus the questions the
user acknowledged since the last page turn.
"""

from typing import List
from pydantic import BaseModel, Field, StrictInt, field_validator


class StepState(BaseModel):
    """
    Step counter and acknowledged questions.

    step 2n shows question n alone, step 2n+1 shows its answer too.
    """

    step: StrictInt = Field(default=0, ge=0)
    highlights: List[StrictInt] = Field(default_factory=list)

    @field_validator('highlights')
    def validate_highlights(cls, v):
        if any(index < 0 for index in v):
            raise ValueError("Highlight indices must be non-negative")
        return v

    @property
    def question_number(self) -> int:
        """Index of the question currently being revealed"""
        return self.step // 2

    @property
    def is_answer_phase(self) -> bool:
        """Whether the current question's answer is shown"""
        return self.step % 2 == 1

    def is_highlighted(self, question_index: int) -> bool:
        return question_index in self.highlights
