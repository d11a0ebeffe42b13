"""Pydantic schemas for per-subject progress."""
from datetime import datetime

from studyhub.schemas.base import CamelModel


class ProgressSetSchema(CamelModel):
    username: str | None = None
    subject: str | None = None
    value: int | None = None


class ProgressOutSchema(CamelModel):
    id: int
    username: str
    subject: str
    value: int
    updated_at: datetime
