"""Pydantic schemas for questions, answers and grades."""
from datetime import datetime

from pydantic import AliasChoices, Field

from studyhub.schemas.base import CamelModel


class QuestionCreateSchema(CamelModel):
    subject: str | None = None
    text: str | None = None
    created_by: str | None = None
    suggested: str | None = Field(
        default=None,
        validation_alias=AliasChoices("suggested", "suggestedAnswer", "suggested_answer"),
    )


class QuestionOutSchema(CamelModel):
    id: int
    subject: str
    text: str
    suggested: str | None = None
    created_by: str
    created_at: datetime


class AnswerCreateSchema(CamelModel):
    question_id: int | None = None
    answer_text: str | None = None
    answered_by: str | None = None


class AnswerOutSchema(CamelModel):
    id: int
    question_id: int
    answer_text: str
    answered_by: str
    created_at: datetime


class GradeCreateSchema(CamelModel):
    answer_id: int | None = None
    question_id: int | None = None
    is_correct: bool | None = None
    feedback: str | None = None
    # any non-null grader id counts, including 0
    graded_by: str | int | None = None


class GradeOutSchema(CamelModel):
    id: int
    answer_id: int
    question_id: int
    is_correct: bool
    feedback: str | None = None
    graded_by: str
    created_at: datetime
