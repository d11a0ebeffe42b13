"""Pydantic schemas for XP, levels and the XP ledger.

XP account responses keep snake_case keys (`last_login`) as existing clients
read them; only `autoCreated` is camelCase.
"""
from datetime import datetime

from pydantic import BaseModel, Field

from studyhub.schemas.base import CamelModel


class XPAddSchema(BaseModel):
    username: str | None = None
    amount: int | None = None


class XPResultSchema(BaseModel):
    username: str
    xp: int
    level: int


class XPAccountSchema(BaseModel):
    username: str
    xp: int
    level: int
    streak: int
    last_login: datetime | None = None
    auto_created: bool = Field(default=False, serialization_alias="autoCreated")


class ExpLogSchema(BaseModel):
    user: str | None = None
    amount: int | None = None


class ExpTotalSchema(BaseModel):
    total: int


class ExpEntryOutSchema(CamelModel):
    id: int
    username: str
    amount: int
    created_at: datetime
