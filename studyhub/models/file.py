"""Uploaded file metadata. The bytes live on disk under the upload dir."""
from sqlalchemy import Column, Integer, String

from studyhub.db.session import Base, UTCDateTime, utcnow


class StoredFile(Base):
    __tablename__ = "files"

    id = Column(Integer, primary_key=True, autoincrement=True)
    subject = Column(String(255), nullable=False, index=True)
    original_name = Column(String(512), nullable=False)
    file_path = Column(String(1024), nullable=False)  # public path, e.g. /uploads/<stored name>
    uploader = Column(String(255), nullable=False, default="Unknown")
    uploaded_at = Column(UTCDateTime(), nullable=False, default=utcnow)
