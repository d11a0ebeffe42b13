"""Reflections API."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.config import Settings, get_app_settings
from studyhub.db.session import get_db
from studyhub.schemas.base import SuccessSchema
from studyhub.schemas.reflection import (
    ReflectionCreatedSchema,
    ReflectionCreateSchema,
    ReflectionIdSchema,
    ReflectionOutSchema,
)
from studyhub.schemas.xp import XPResultSchema
from studyhub.services import reflections

router = APIRouter(prefix="/reflections", tags=["reflections"])


@router.post("", response_model=ReflectionCreatedSchema)
async def create_reflection(
    body: ReflectionCreateSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
):
    """Save a reflection and award XP for it."""
    reflection, awarded, xp_error = await reflections.create_reflection(
        db,
        body.username,
        body.subject,
        body.content,
        body.mood,
        xp_reward=settings.reflection_xp_reward,
    )
    out = ReflectionOutSchema.model_validate(reflection)
    return ReflectionCreatedSchema(
        **out.model_dump(),
        xp=XPResultSchema(username=awarded.username, xp=awarded.xp, level=awarded.level) if awarded else None,
        xp_error=xp_error,
    )


@router.get("", response_model=list[ReflectionOutSchema])
async def list_reflections(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: str | None = None,
):
    """A user's reflections that are not deleted, newest first."""
    return await reflections.list_reflections(db, username)


@router.post("/delete", response_model=SuccessSchema)
async def delete_reflection(
    body: ReflectionIdSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Soft delete: the row is hidden from listings until restored."""
    await reflections.soft_delete(db, body.id)
    return SuccessSchema()


@router.post("/restore", response_model=SuccessSchema)
async def restore_reflection(
    body: ReflectionIdSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    await reflections.restore(db, body.id)
    return SuccessSchema()
