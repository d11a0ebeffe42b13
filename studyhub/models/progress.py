"""Progress model: one scalar value per (username, subject); last write wins."""
from sqlalchemy import Column, Integer, String, UniqueConstraint

from studyhub.db.session import Base, UTCDateTime, utcnow


class Progress(Base):
    __tablename__ = "progress"
    __table_args__ = (
        UniqueConstraint("username", "subject", name="uq_progress_username_subject"),
    )

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, index=True)
    subject = Column(String(255), nullable=False)
    value = Column(Integer, nullable=False, default=0)
    updated_at = Column(UTCDateTime(), nullable=False, default=utcnow)
