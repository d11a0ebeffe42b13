"""Note model: subject-scoped post owning a thread of comments."""
from sqlalchemy import Boolean, Column, Integer, String, Text
from sqlalchemy.orm import foreign, relationship

from studyhub.db.session import Base, UTCDateTime, utcnow
from studyhub.models.comment import Comment


class Note(Base):
    __tablename__ = "notes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False, index=True)
    author = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    is_public = Column(Boolean, nullable=False, default=True)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)

    # comments.note_id carries no FK constraint: a comment may point at a missing note
    comments = relationship(
        Comment,
        primaryjoin=lambda: Note.id == foreign(Comment.note_id),
        order_by=[Comment.created_at, Comment.id],
        viewonly=True,
    )
