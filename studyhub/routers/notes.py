"""Notes and comments API."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.session import get_db
from studyhub.schemas.base import SuccessSchema
from studyhub.schemas.note import (
    CommentCreateSchema,
    CommentOutSchema,
    NoteCreateSchema,
    NoteOutSchema,
)
from studyhub.services import notes

router = APIRouter(prefix="/notes", tags=["notes"])


@router.get("", response_model=list[NoteOutSchema])
async def list_notes(
    db: Annotated[AsyncSession, Depends(get_db)],
    subject: str | None = None,
):
    """Notes for a subject, newest first, with their comments."""
    return await notes.list_notes(db, subject)


@router.post("", response_model=NoteOutSchema)
async def create_note(
    body: NoteCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await notes.create_note(db, body.subject, body.author, body.content, body.is_public)


@router.delete("/{note_id}", response_model=SuccessSchema)
async def delete_note(
    note_id: int,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Delete a note and its comments."""
    await notes.delete_note(db, note_id)
    return SuccessSchema()


@router.post("/{note_id}/comments", response_model=CommentOutSchema)
async def add_comment(
    note_id: int,
    body: CommentCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await notes.add_comment(db, note_id, body.author, body.content)
