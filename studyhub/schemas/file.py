"""Pydantic schemas for uploaded file metadata."""
from datetime import datetime

from studyhub.schemas.base import CamelModel


class FileOutSchema(CamelModel):
    id: int
    subject: str
    original_name: str
    file_path: str
    uploader: str
    uploaded_at: datetime
