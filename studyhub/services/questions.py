"""Questions, answers and grades."""
import logging

from sqlalchemy import delete, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.errors import require_fields
from studyhub.db.session import utcnow
from studyhub.models.answer import Answer
from studyhub.models.grade import Grade
from studyhub.models.question import Question

logger = logging.getLogger(__name__)


async def list_questions(db: AsyncSession, subject: str | None = None) -> list[Question]:
    stmt = select(Question)
    if subject:
        stmt = stmt.where(Question.subject == subject)
    result = await db.execute(stmt.order_by(Question.created_at.desc(), Question.id.desc()))
    return list(result.scalars().all())


async def create_question(
    db: AsyncSession,
    subject: str,
    text: str,
    created_by: str,
    suggested: str | None = None,
) -> Question:
    require_fields(subject=subject, text=text, createdBy=created_by)
    question = Question(
        subject=subject,
        text=text,
        suggested=suggested,
        created_by=created_by,
        created_at=utcnow(),
    )
    db.add(question)
    await db.commit()
    await db.refresh(question)
    return question


async def delete_question_cascade(db: AsyncSession, question_id: int) -> None:
    """Delete a question with all its answers and grades in one transaction."""
    answer_ids = select(Answer.id).where(Answer.question_id == question_id).scalar_subquery()
    grades = await db.execute(
        delete(Grade).where(
            or_(Grade.question_id == question_id, Grade.answer_id.in_(answer_ids))
        )
    )
    answers = await db.execute(delete(Answer).where(Answer.question_id == question_id))
    await db.execute(delete(Question).where(Question.id == question_id))
    await db.commit()
    logger.info(
        "Deleted question %s with %s answers and %s grades",
        question_id,
        answers.rowcount,
        grades.rowcount,
    )


async def list_answers(db: AsyncSession, question_id: int | None = None) -> list[Answer]:
    stmt = select(Answer)
    if question_id is not None:
        stmt = stmt.where(Answer.question_id == question_id)
    result = await db.execute(stmt.order_by(Answer.created_at.asc(), Answer.id.asc()))
    return list(result.scalars().all())


async def create_answer(db: AsyncSession, question_id: int, answer_text: str, answered_by: str) -> Answer:
    require_fields(questionId=question_id, answerText=answer_text, answeredBy=answered_by)
    answer = Answer(
        question_id=question_id,
        answer_text=answer_text,
        answered_by=answered_by,
        created_at=utcnow(),
    )
    db.add(answer)
    await db.commit()
    await db.refresh(answer)
    return answer


async def list_grades(db: AsyncSession, answer_id: int | None = None) -> list[Grade]:
    stmt = select(Grade)
    if answer_id is not None:
        stmt = stmt.where(Grade.answer_id == answer_id)
    result = await db.execute(stmt.order_by(Grade.created_at.desc(), Grade.id.desc()))
    return list(result.scalars().all())


async def grade_answer(
    db: AsyncSession,
    answer_id: int,
    question_id: int,
    is_correct: bool,
    graded_by: str | int,
    feedback: str | None = None,
) -> Grade:
    """Replace the answer's grade: the previous row is dropped, not kept as history."""
    require_fields(
        answerId=answer_id,
        questionId=question_id,
        isCorrect=is_correct,
        gradedBy=graded_by,
    )
    await db.execute(delete(Grade).where(Grade.answer_id == answer_id))
    grade = Grade(
        answer_id=answer_id,
        question_id=question_id,
        is_correct=bool(is_correct),
        feedback=feedback,
        graded_by=str(graded_by),
        created_at=utcnow(),
    )
    db.add(grade)
    await db.commit()
    await db.refresh(grade)
    return grade
