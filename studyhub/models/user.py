"""User model: account row auto-created on first XP read/write; carries XP and level."""
from sqlalchemy import Column, Integer, String

from studyhub.db.session import Base, UTCDateTime


class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(255), unique=True, nullable=False, index=True)
    password = Column(String(255), nullable=False, default="")
    xp = Column(Integer, nullable=False, default=0)  # progress toward the next level
    level = Column(Integer, nullable=False, default=1)
    streak = Column(Integer, nullable=False, default=0)
    last_login = Column(UTCDateTime(), nullable=True)
