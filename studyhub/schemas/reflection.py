"""Pydantic schemas for reflections."""
from datetime import datetime

from studyhub.schemas.base import CamelModel
from studyhub.schemas.xp import XPResultSchema


class ReflectionCreateSchema(CamelModel):
    username: str | None = None
    subject: str | None = None
    content: str | None = None
    mood: str | None = None


class ReflectionIdSchema(CamelModel):
    id: int | None = None


class ReflectionOutSchema(CamelModel):
    id: int
    username: str
    subject: str
    content: str
    mood: str
    created_at: datetime
    is_deleted: bool


class ReflectionCreatedSchema(ReflectionOutSchema):
    success: bool = True
    xp: XPResultSchema | None = None  # None when the XP award failed
    xp_error: str | None = None
