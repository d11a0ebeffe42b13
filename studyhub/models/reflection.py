"""Reflection model: journal entry, soft-deleted via is_deleted."""
from sqlalchemy import Boolean, Column, Integer, String, Text

from studyhub.db.session import Base, UTCDateTime, utcnow


class Reflection(Base):
    __tablename__ = "reflections"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    content = Column(Text, nullable=False)
    mood = Column(String(64), nullable=False, default="")
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
    is_deleted = Column(Boolean, nullable=False, default=False)
