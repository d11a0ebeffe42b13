"""Questions, answers and grades API."""
from typing import Annotated

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.session import get_db
from studyhub.schemas.base import SuccessSchema
from studyhub.schemas.question import (
    AnswerCreateSchema,
    AnswerOutSchema,
    GradeCreateSchema,
    GradeOutSchema,
    QuestionCreateSchema,
    QuestionOutSchema,
)
from studyhub.services import questions

router = APIRouter(tags=["questions"])


@router.get("/questions", response_model=list[QuestionOutSchema])
async def list_questions(
    db: Annotated[AsyncSession, Depends(get_db)],
    subject: str | None = None,
):
    return await questions.list_questions(db, subject)


@router.post("/questions", response_model=QuestionOutSchema)
async def create_question(
    body: QuestionCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await questions.create_question(
        db, body.subject, body.text, body.created_by, body.suggested
    )


@router.delete("/questions/{question_id}", response_model=SuccessSchema)
async def delete_question(
    question_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Delete a question together with its answers and grades."""
    await questions.delete_question_cascade(db, question_id)
    return SuccessSchema()


@router.get("/answers", response_model=list[AnswerOutSchema])
async def list_answers(
    db: Annotated[AsyncSession, Depends(get_db)],
    question_id: Annotated[int | None, Query(alias="questionId")] = None,
):
    return await questions.list_answers(db, question_id)


@router.post("/answers", response_model=AnswerOutSchema)
async def create_answer(
    body: AnswerCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await questions.create_answer(db, body.question_id, body.answer_text, body.answered_by)


@router.get("/grades", response_model=list[GradeOutSchema])
async def list_grades(
    db: Annotated[AsyncSession, Depends(get_db)],
    answer_id: Annotated[int | None, Query(alias="answerId")] = None,
):
    return await questions.list_grades(db, answer_id)


@router.post("/grades", response_model=GradeOutSchema)
async def grade_answer(
    body: GradeCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Grade an answer, replacing any earlier grade for it."""
    return await questions.grade_answer(
        db,
        body.answer_id,
        body.question_id,
        body.is_correct,
        body.graded_by,
        body.feedback,
    )
