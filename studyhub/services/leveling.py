"""Leveling rule: every full XP_PER_LEVEL points is traded for one level."""
from sqlalchemy import case

XP_PER_LEVEL = 100
INITIAL_LEVEL = 1


def apply_xp(xp: int, level: int, amount: int) -> tuple[int, int]:
    """Add amount to xp and roll surplus into levels.

    Returns (xp, level) where xp is the progress toward the next level. Level
    never goes down; a negative total is kept as-is.
    """
    xp += amount
    if xp >= XP_PER_LEVEL:
        gained, xp = divmod(xp, XP_PER_LEVEL)
        level += gained
    return xp, level


def leveled_columns(xp_column, level_column, amount: int) -> dict:
    """The same rule as apply_xp, as SQL expressions for a single UPDATE.

    Both expressions read the pre-update values, so the whole read-add-roll
    happens inside one statement.
    """
    total = xp_column + amount
    levels_up = total >= XP_PER_LEVEL
    return {
        "xp": case((levels_up, total % XP_PER_LEVEL), else_=total),
        "level": case((levels_up, level_column + total // XP_PER_LEVEL), else_=level_column),
    }
