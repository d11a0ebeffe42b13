"""Grade model: the current verdict on one answer. Regrading replaces the row."""
from sqlalchemy import Boolean, Column, Integer, String, Text

from studyhub.db.session import Base, UTCDateTime, utcnow


class Grade(Base):
    __tablename__ = "grades"

    id = Column(Integer, primary_key=True, autoincrement=True)
    answer_id = Column(Integer, nullable=False, index=True)
    question_id = Column(Integer, nullable=False, index=True)
    is_correct = Column(Boolean, nullable=False)
    feedback = Column(Text, nullable=True)
    graded_by = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
