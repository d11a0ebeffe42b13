"""Tests for notes and comment threads."""
from datetime import datetime, timedelta

import pytest
from sqlalchemy import func, select

from studyhub.core.errors import ValidationError
from studyhub.models.comment import Comment
from studyhub.services.notes import add_comment, create_note, delete_note, list_notes


class TestNotesService:
    async def test_create_requires_subject_author_content(self, db):
        with pytest.raises(ValidationError) as exc:
            await create_note(db, "Ethics", "", None)
        assert "author" in exc.value.message
        assert "content" in exc.value.message

    async def test_listing_order(self, db):
        older = await create_note(db, "Ethics", "ana", "first")
        newer = await create_note(db, "Ethics", "ben", "second")
        await create_note(db, "Logic", "ana", "elsewhere")
        await add_comment(db, older.id, "ben", "c1")
        await add_comment(db, older.id, "cai", "c2")

        notes = await list_notes(db, "Ethics")
        assert [n.id for n in notes] == [newer.id, older.id]
        assert [c.content for c in notes[1].comments] == ["c1", "c2"]
        assert notes[0].comments == []

    async def test_delete_cascades_to_comments(self, db):
        note = await create_note(db, "Ethics", "ana", "bye")
        await add_comment(db, note.id, "ben", "reply")

        await delete_note(db, note.id)

        assert await list_notes(db, "Ethics") == []
        remaining = await db.scalar(select(func.count(Comment.id)).where(Comment.note_id == note.id))
        assert remaining == 0

    async def test_delete_missing_note_is_noop(self, db):
        await delete_note(db, 12345)

    async def test_comment_on_missing_note_is_accepted(self, db):
        comment = await add_comment(db, 999, "ana", "orphan")
        assert comment.note_id == 999


class TestNotesApi:
    def test_create_and_list_example(self, client):
        resp = client.post(
            "/notes",
            json={"subject": "Ethics", "author": "ana", "content": "hi", "isPublic": True},
        )
        assert resp.status_code == 200
        note = resp.json()
        assert isinstance(note["id"], int)
        assert note["isPublic"] is True
        assert note["comments"] == []
        created = datetime.fromisoformat(note["createdAt"].replace("Z", "+00:00"))
        assert created.utcoffset() == timedelta(0)

        listed = client.get("/notes", params={"subject": "Ethics"}).json()
        assert len(listed) == 1
        assert listed[0]["id"] == note["id"]
        assert listed[0]["createdAt"] == note["createdAt"]
        assert listed[0]["comments"] == []

    def test_is_public_defaults_to_true(self, client):
        note = client.post("/notes", json={"subject": "Ethics", "author": "ana", "content": "x"}).json()
        assert note["isPublic"] is True

    def test_private_note(self, client):
        note = client.post(
            "/notes",
            json={"subject": "Ethics", "author": "ana", "content": "x", "isPublic": False},
        ).json()
        assert note["isPublic"] is False

    def test_create_missing_fields(self, client):
        resp = client.post("/notes", json={"subject": "Ethics", "author": "ana"})
        assert resp.status_code == 400
        assert resp.json() == {"error": "Missing fields: content"}

    def test_list_requires_subject(self, client):
        assert client.get("/notes").status_code == 400

    def test_comment_then_delete_note(self, client):
        note = client.post("/notes", json={"subject": "Ethics", "author": "ana", "content": "hi"}).json()
        comment = client.post(
            f"/notes/{note['id']}/comments", json={"author": "ben", "content": "nice"}
        ).json()
        assert comment["noteId"] == note["id"]
        assert comment["author"] == "ben"

        listed = client.get("/notes", params={"subject": "Ethics"}).json()
        assert [c["content"] for c in listed[0]["comments"]] == ["nice"]

        assert client.delete(f"/notes/{note['id']}").json() == {"success": True}
        assert client.get("/notes", params={"subject": "Ethics"}).json() == []

    def test_comment_requires_author_and_content(self, client):
        resp = client.post("/notes/1/comments", json={"author": "ben"})
        assert resp.status_code == 400
