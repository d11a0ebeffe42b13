"""Reflections (journal entries): XP on creation, soft delete and restore."""
import logging

from sqlalchemy import select, update
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.errors import NotFoundError, StoreError, require_fields
from studyhub.db.session import utcnow
from studyhub.models.reflection import Reflection
from studyhub.services.xp import XPResult, add_xp

logger = logging.getLogger(__name__)

REFLECTION_XP = 15


async def create_reflection(
    db: AsyncSession,
    username: str,
    subject: str,
    content: str,
    mood: str | None = None,
    xp_reward: int = REFLECTION_XP,
) -> tuple[Reflection, XPResult | None, str | None]:
    """Save a reflection, then award XP for it once.

    The reflection is committed before the award, so it is kept even when the
    award fails; in that case the XP result is None and the error message is
    returned instead.
    """
    require_fields(username=username, subject=subject, content=content)
    reflection = Reflection(
        username=username,
        subject=subject,
        content=content,
        mood=mood or "",
        created_at=utcnow(),
        is_deleted=False,
    )
    db.add(reflection)
    await db.commit()
    await db.refresh(reflection)
    # keep the saved row readable even if the award rolls the session back
    db.expunge(reflection)

    try:
        awarded = await add_xp(db, username, xp_reward)
    except StoreError as exc:
        logger.error("Reflection %s saved but XP award for %s failed: %s", reflection.id, username, exc)
        return reflection, None, exc.message
    return reflection, awarded, None


async def list_reflections(db: AsyncSession, username: str) -> list[Reflection]:
    require_fields(username=username)
    result = await db.execute(
        select(Reflection)
        .where(Reflection.username == username, Reflection.is_deleted == False)  # noqa: E712
        .order_by(Reflection.created_at.desc(), Reflection.id.desc())
    )
    return list(result.scalars().all())


async def _set_deleted(db: AsyncSession, reflection_id: int, deleted: bool) -> None:
    require_fields(id=reflection_id)
    result = await db.execute(
        update(Reflection)
        .where(Reflection.id == reflection_id)
        .values(is_deleted=deleted)
    )
    if result.rowcount == 0:
        await db.rollback()
        raise NotFoundError("Reflection not found")
    await db.commit()


async def soft_delete(db: AsyncSession, reflection_id: int) -> None:
    await _set_deleted(db, reflection_id, True)


async def restore(db: AsyncSession, reflection_id: int) -> None:
    await _set_deleted(db, reflection_id, False)
