"""SQLAlchemy declarative base and model imports for Alembic."""
from studyhub.db.session import Base

# Import all models so Alembic can see them
from studyhub.models.answer import Answer  # noqa: F401
from studyhub.models.comment import Comment  # noqa: F401
from studyhub.models.exp_entry import ExpEntry  # noqa: F401
from studyhub.models.file import StoredFile  # noqa: F401
from studyhub.models.grade import Grade  # noqa: F401
from studyhub.models.note import Note  # noqa: F401
from studyhub.models.progress import Progress  # noqa: F401
from studyhub.models.question import Question  # noqa: F401
from studyhub.models.reflection import Reflection  # noqa: F401
from studyhub.models.user import User  # noqa: F401

__all__ = [
    "Base",
    "User",
    "Note",
    "Comment",
    "StoredFile",
    "Reflection",
    "Question",
    "Answer",
    "Grade",
    "Progress",
    "ExpEntry",
]
