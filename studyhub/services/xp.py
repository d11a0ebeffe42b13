"""XP accumulator and the append-only XP ledger."""
import logging
from dataclasses import dataclass

from sqlalchemy import func, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.errors import StoreError, ValidationError, require_fields
from studyhub.db.session import insert_for, utcnow
from studyhub.models.exp_entry import ExpEntry
from studyhub.models.user import User
from studyhub.services.leveling import INITIAL_LEVEL, leveled_columns

logger = logging.getLogger(__name__)

EXP_HISTORY_LIMIT = 50


@dataclass
class XPResult:
    username: str
    xp: int
    level: int


async def _level_up_in_place(db: AsyncSession, username: str, amount: int) -> tuple[int, int] | None:
    """One UPDATE ... RETURNING applying the leveling rule; None if no such user."""
    result = await db.execute(
        update(User)
        .where(User.username == username)
        .values(**leveled_columns(User.xp, User.level, amount))
        .returning(User.xp, User.level)
        .execution_options(synchronize_session=False)
    )
    row = result.one_or_none()
    return None if row is None else (row.xp, row.level)


async def _insert_user_if_absent(db: AsyncSession, **values) -> bool:
    """INSERT ... ON CONFLICT DO NOTHING. True if this call created the row."""
    stmt = insert_for(db, User).values(**values).on_conflict_do_nothing(
        index_elements=["username"]
    )
    result = await db.execute(stmt)
    return result.rowcount == 1


async def add_xp(db: AsyncSession, username: str, amount: int) -> XPResult:
    """Add amount to the user's XP, creating the account if needed.

    A brand-new account stores amount as-is at level 1: the leveling rule is
    only applied to accounts that already exist.
    """
    require_fields(username=username, amount=amount)
    try:
        leveled = await _level_up_in_place(db, username, amount)
        if leveled is None:
            created = await _insert_user_if_absent(
                db,
                username=username,
                password="",
                xp=amount,
                level=INITIAL_LEVEL,
                streak=0,
            )
            if created:
                await db.commit()
                logger.info("Created XP account for %s with %s xp", username, amount)
                return XPResult(username=username, xp=amount, level=INITIAL_LEVEL)
            # another request created it in between
            leveled = await _level_up_in_place(db, username, amount)
        await db.commit()
    except SQLAlchemyError as exc:
        await db.rollback()
        raise StoreError(str(exc)) from exc

    xp, level = leveled
    logger.debug("%s now has %s xp at level %s", username, xp, level)
    return XPResult(username=username, xp=xp, level=level)


async def _load_user(db: AsyncSession, username: str) -> User | None:
    # add_xp updates rows without touching the identity map; reload as stored
    result = await db.execute(
        select(User)
        .where(User.username == username)
        .execution_options(populate_existing=True)
    )
    return result.scalar_one_or_none()


async def get_or_create_xp(db: AsyncSession, username: str) -> tuple[User, bool]:
    """Return (user, auto_created). Missing accounts are created with zeroed counters."""
    require_fields(username=username)
    user = await _load_user(db, username)
    if user is not None:
        return user, False

    created = await _insert_user_if_absent(
        db,
        username=username,
        password="",
        xp=0,
        level=INITIAL_LEVEL,
        streak=0,
        last_login=utcnow(),
    )
    await db.commit()
    return await _load_user(db, username), created


async def log_exp(db: AsyncSession, username: str, amount: int) -> ExpEntry:
    """Append one entry to the XP ledger. A zero amount counts as missing."""
    require_fields(user=username, amount=amount)
    if amount == 0:
        raise ValidationError("Missing fields: amount")
    entry = ExpEntry(username=username, amount=amount, created_at=utcnow())
    db.add(entry)
    await db.commit()
    await db.refresh(entry)
    return entry


async def exp_total(db: AsyncSession, username: str) -> int:
    result = await db.execute(
        select(func.coalesce(func.sum(ExpEntry.amount), 0)).where(ExpEntry.username == username)
    )
    return int(result.scalar_one())


async def exp_history(db: AsyncSession, username: str, limit: int = EXP_HISTORY_LIMIT) -> list[ExpEntry]:
    result = await db.execute(
        select(ExpEntry)
        .where(ExpEntry.username == username)
        .order_by(ExpEntry.created_at.desc(), ExpEntry.id.desc())
        .limit(limit)
    )
    return list(result.scalars().all())
