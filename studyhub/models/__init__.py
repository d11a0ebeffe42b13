from studyhub.models.user import User
from studyhub.models.note import Note
from studyhub.models.comment import Comment
from studyhub.models.file import StoredFile
from studyhub.models.reflection import Reflection
from studyhub.models.question import Question
from studyhub.models.answer import Answer
from studyhub.models.grade import Grade
from studyhub.models.progress import Progress
from studyhub.models.exp_entry import ExpEntry

__all__ = [
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
