"""Answer model: one response to a question, graded at most once at a time."""
from sqlalchemy import Column, Integer, String, Text

from studyhub.db.session import Base, UTCDateTime, utcnow


class Answer(Base):
    __tablename__ = "answers"

    id = Column(Integer, primary_key=True, autoincrement=True)
    question_id = Column(Integer, nullable=False, index=True)
    answer_text = Column(Text, nullable=False)
    answered_by = Column(String(255), nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
