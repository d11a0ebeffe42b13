"""XP account and XP ledger API."""
from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.db.session import get_db
from studyhub.schemas.base import SuccessSchema
from studyhub.schemas.xp import (
    ExpEntryOutSchema,
    ExpLogSchema,
    ExpTotalSchema,
    XPAccountSchema,
    XPAddSchema,
    XPResultSchema,
)
from studyhub.services import xp as xp_service

router = APIRouter(tags=["xp"])


@router.get("/xp", response_model=XPAccountSchema)
async def get_xp(
    db: Annotated[AsyncSession, Depends(get_db)],
    username: str | None = None,
):
    """XP, level and streak for a user; unknown users are created on the fly."""
    user, created = await xp_service.get_or_create_xp(db, username)
    return XPAccountSchema(
        username=user.username,
        xp=user.xp,
        level=user.level,
        streak=user.streak,
        last_login=user.last_login,
        auto_created=created,
    )


@router.post("/xp/add", response_model=XPResultSchema)
async def add_xp(
    body: XPAddSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    result = await xp_service.add_xp(db, body.username, body.amount)
    return XPResultSchema(username=result.username, xp=result.xp, level=result.level)


@router.post("/exp", response_model=SuccessSchema)
async def log_exp(
    body: ExpLogSchema,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    """Append an entry to the XP ledger (does not touch the user's XP)."""
    await xp_service.log_exp(db, body.user, body.amount)
    return SuccessSchema()


@router.get("/exp/{user}", response_model=ExpTotalSchema)
async def exp_total(
    user: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return ExpTotalSchema(total=await xp_service.exp_total(db, user))


@router.get("/exp-history/{user}", response_model=list[ExpEntryOutSchema])
async def exp_history(
    user: str,
    db: Annotated[AsyncSession, Depends(get_db)],
):
    return await xp_service.exp_history(db, user)
