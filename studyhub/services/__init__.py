from studyhub.services.leveling import XP_PER_LEVEL, apply_xp
from studyhub.services.progress import get_progress, set_progress
from studyhub.services.xp import add_xp, get_or_create_xp

__all__ = [
    "XP_PER_LEVEL",
    "apply_xp",
    "add_xp",
    "get_or_create_xp",
    "get_progress",
    "set_progress",
]
