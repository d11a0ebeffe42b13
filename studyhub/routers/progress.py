"""Per-subject progress API."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.session import get_db
from studyhub.schemas.progress import ProgressOutSchema, ProgressSetSchema
from studyhub.services import progress as progress_service

router = APIRouter(prefix="/progress", tags=["progress"])


@router.get("", response_model=list[ProgressOutSchema])
async def get_progress(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: str | None = None,
):
    """All progress rows for a user, one per subject."""
    return await progress_service.get_progress(db, username)


@router.post("", response_model=ProgressOutSchema)
async def set_progress(
    body: ProgressSetSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await progress_service.set_progress(db, body.username, body.subject, body.value)
