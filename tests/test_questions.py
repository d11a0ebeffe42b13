"""Tests for questions, answers and grades."""
from sqlalchemy import func, select

from studyhub.models.answer import Answer
from studyhub.models.grade import Grade
from studyhub.services.questions import (
    create_answer,
    create_question,
    delete_question_cascade,
    grade_answer,
    list_grades,
    list_questions,
)


class TestQuestionsService:
    async def test_list_filters_and_orders(self, db):
        q1 = await create_question(db, "Ethics", "What is virtue?", "prof")
        q2 = await create_question(db, "Logic", "What is validity?", "prof")
        q3 = await create_question(db, "Ethics", "What is duty?", "prof", suggested="Kant")

        assert [q.id for q in await list_questions(db, "Ethics")] == [q3.id, q1.id]
        assert [q.id for q in await list_questions(db)] == [q3.id, q2.id, q1.id]
        assert q3.suggested == "Kant"

    async def test_regrade_replaces(self, db):
        q = await create_question(db, "Ethics", "Q?", "prof")
        a = await create_answer(db, q.id, "A.", "stu")

        await grade_answer(db, a.id, q.id, False, "prof", "try again")
        second = await grade_answer(db, a.id, q.id, True, "prof2", "good")

        grades = await list_grades(db, a.id)
        assert len(grades) == 1
        assert grades[0].id == second.id
        assert grades[0].is_correct is True
        assert grades[0].feedback == "good"
        assert grades[0].graded_by == "prof2"

    async def test_grader_zero_is_accepted(self, db):
        grade = await grade_answer(db, 1, 1, False, 0)
        assert grade.graded_by == "0"

    async def test_delete_cascades_to_answers_and_grades(self, db):
        q = await create_question(db, "Ethics", "Q?", "prof")
        keep = await create_question(db, "Ethics", "Other?", "prof")
        a1 = await create_answer(db, q.id, "A1", "stu")
        a2 = await create_answer(db, q.id, "A2", "stu")
        other = await create_answer(db, keep.id, "B", "stu")
        await grade_answer(db, a1.id, q.id, True, "prof")
        await grade_answer(db, a2.id, q.id, False, "prof")
        await grade_answer(db, other.id, keep.id, True, "prof")

        await delete_question_cascade(db, q.id)

        assert [x.id for x in await list_questions(db)] == [keep.id]
        answers = await db.scalar(select(func.count(Answer.id)).where(Answer.question_id == q.id))
        grades = await db.scalar(select(func.count(Grade.id)).where(Grade.question_id == q.id))
        assert answers == 0
        assert grades == 0
        assert len(await list_grades(db, other.id)) == 1


class TestQuestionsApi:
    def test_full_flow(self, client):
        q = client.post(
            "/questions",
            json={"subject": "Ethics", "text": "Define virtue", "createdBy": "prof", "suggested": "A habit"},
        ).json()
        assert q["suggested"] == "A habit"
        assert q["createdBy"] == "prof"

        a = client.post(
            "/answers", json={"questionId": q["id"], "answerText": "A trait", "answeredBy": "stu"}
        ).json()
        assert a["questionId"] == q["id"]

        answers = client.get("/answers", params={"questionId": q["id"]}).json()
        assert [x["id"] for x in answers] == [a["id"]]

        g1 = client.post(
            "/grades",
            json={"answerId": a["id"], "questionId": q["id"], "isCorrect": False, "gradedBy": "prof"},
        ).json()
        assert g1["isCorrect"] is False
        g2 = client.post(
            "/grades",
            json={
                "answerId": a["id"],
                "questionId": q["id"],
                "isCorrect": True,
                "gradedBy": 0,
                "feedback": "ok",
            },
        ).json()
        assert g2["gradedBy"] == "0"

        grades = client.get("/grades", params={"answerId": a["id"]}).json()
        assert len(grades) == 1
        assert grades[0]["isCorrect"] is True
        assert grades[0]["feedback"] == "ok"

        assert client.delete(f"/questions/{q['id']}").json() == {"success": True}
        assert client.get("/questions").json() == []
        assert client.get("/answers", params={"questionId": q["id"]}).json() == []
        assert client.get("/grades", params={"answerId": a["id"]}).json() == []

    def test_questions_filtered_by_subject(self, client):
        client.post("/questions", json={"subject": "Ethics", "text": "Q1", "createdBy": "p"})
        client.post("/questions", json={"subject": "Logic", "text": "Q2", "createdBy": "p"})
        listed = client.get("/questions", params={"subject": "Logic"}).json()
        assert [q["text"] for q in listed] == ["Q2"]

    def test_create_question_missing_fields(self, client):
        resp = client.post("/questions", json={"subject": "Ethics", "text": "Q"})
        assert resp.status_code == 400
        assert "createdBy" in resp.json()["error"]

    def test_grade_requires_is_correct(self, client):
        resp = client.post("/grades", json={"answerId": 1, "questionId": 1, "gradedBy": "p"})
        assert resp.status_code == 400
        assert "isCorrect" in resp.json()["error"]
