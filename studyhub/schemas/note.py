"""Pydantic schemas for notes and comments."""
from datetime import datetime

from studyhub.schemas.base import CamelModel


class CommentCreateSchema(CamelModel):
    author: str | None = None
    content: str | None = None


class CommentOutSchema(CamelModel):
    id: int
    note_id: int
    author: str
    content: str
    created_at: datetime


class NoteCreateSchema(CamelModel):
    subject: str | None = None
    author: str | None = None
    content: str | None = None
    is_public: bool | None = None


class NoteOutSchema(CamelModel):
    id: int
    subject: str
    author: str
    content: str
    is_public: bool
    created_at: datetime
    comments: list[CommentOutSchema] = []
