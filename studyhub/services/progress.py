"""Per-subject progress: one row per (username, subject), last write wins."""
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.errors import StoreError, require_fields
from studyhub.db.session import insert_for, utcnow
from studyhub.models.progress import Progress


async def set_progress(db: AsyncSession, username: str, subject: str, value: int) -> Progress:
    """Atomic insert-or-update keyed by the (username, subject) unique constraint."""
    require_fields(username=username, subject=subject, value=value)
    now = utcnow()
    stmt = insert_for(db, Progress).values(
        username=username,
        subject=subject,
        value=value,
        updated_at=now,
    )
    stmt = stmt.on_conflict_do_update(
        index_elements=["username", "subject"],
        set_={"value": stmt.excluded.value, "updated_at": stmt.excluded.updated_at},
    )
    try:
        await db.execute(stmt)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreError(str(exc)) from exc

    result = await db.execute(
        select(Progress)
        .where(Progress.username == username, Progress.subject == subject)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one()


async def get_progress(db: AsyncSession, username: str) -> list[Progress]:
    require_fields(username=username)
    result = await db.execute(
        select(Progress).where(Progress.username == username).order_by(Progress.subject)
    )
    return list(result.scalars().all())
