from studyhub.schemas.base import CamelModel, SuccessSchema
from studyhub.schemas.file import FileOutSchema
from studyhub.schemas.note import (
    CommentCreateSchema,
    CommentOutSchema,
    NoteCreateSchema,
    NoteOutSchema,
)
from studyhub.schemas.progress import ProgressOutSchema, ProgressSetSchema
from studyhub.schemas.question import (
    AnswerCreateSchema,
    AnswerOutSchema,
    GradeCreateSchema,
    GradeOutSchema,
    QuestionCreateSchema,
    QuestionOutSchema,
)
from studyhub.schemas.reflection import (
    ReflectionCreatedSchema,
    ReflectionCreateSchema,
    ReflectionIdSchema,
    ReflectionOutSchema,
)
from studyhub.schemas.xp import (
    ExpEntryOutSchema,
    ExpLogSchema,
    ExpTotalSchema,
    XPAccountSchema,
    XPAddSchema,
    XPResultSchema,
)

__all__ = [
    "CamelModel",
    "SuccessSchema",
    "FileOutSchema",
    "CommentCreateSchema",
    "CommentOutSchema",
    "NoteCreateSchema",
    "NoteOutSchema",
    "ProgressOutSchema",
    "ProgressSetSchema",
    "AnswerCreateSchema",
    "AnswerOutSchema",
    "GradeCreateSchema",
    "GradeOutSchema",
    "QuestionCreateSchema",
    "QuestionOutSchema",
    "ReflectionCreatedSchema",
    "ReflectionCreateSchema",
    "ReflectionIdSchema",
    "ReflectionOutSchema",
    "ExpEntryOutSchema",
    "ExpLogSchema",
    "ExpTotalSchema",
    "XPAccountSchema",
    "XPAddSchema",
    "XPResultSchema",
]
