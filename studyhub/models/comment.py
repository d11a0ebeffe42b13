"""Comment model: one reply in a note's thread."""
from sqlalchemy import Column, Integer, String, Text

from studyhub.db.session import Base, UTCDateTime, utcnow


class Comment(Base):
    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, autoincrement=True)
    note_id = Column(Integer, nullable=False, index=True)
    author = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
