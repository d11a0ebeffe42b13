"""XP ledger entry. Append-only and independent of users.xp."""
from sqlalchemy import Column, Integer, String

from studyhub.db.session import Base, UTCDateTime, utcnow


class ExpEntry(Base):
    __tablename__ = "exp"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), nullable=False, index=True)
    amount = Column(Integer, nullable=False)
    created_at = Column(UTCDateTime(), nullable=False, default=utcnow)
