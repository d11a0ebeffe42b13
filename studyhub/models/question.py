"""Question model: a prompt posted for a subject, answered and graded by others."""
from sqlalchemy import Column, Integer, String, Text

from studyhub.db.session import Base, UTCDateTime, utcnow


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False, index=True)
    text = Column(Text, nullable=False)
    suggested = Column(Text, nullable=True)  # suggested answer
    created_by = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
