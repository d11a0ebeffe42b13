"""File metadata per subject and the ownership check on delete."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.errors import NotFoundError, PermissionDeniedError, require_fields
from studyhub.db.session import utcnow
from studyhub.models.file import StoredFile

logger = logging.getLogger(__name__)

DEFAULT_UPLOADER = "Unknown"


async def list_files(db: AsyncSession, subject: str) -> list[StoredFile]:
    require_fields(subject=subject)
    result = await db.execute(
        select(StoredFile)
        .where(StoredFile.subject == subject)
        .order_by(StoredFile.uploaded_at.desc(), StoredFile.id.desc())
    )
    return list(result.scalars().all())


async def store_file_metadata(
    db: AsyncSession,
    subject: str,
    original_name: str,
    file_path: str,
    uploader: str | None = None,
) -> StoredFile:
    require_fields(subject=subject, originalName=original_name, filePath=file_path)
    record = StoredFile(
        subject=subject,
        original_name=original_name,
        file_path=file_path,
        uploader=uploader or DEFAULT_UPLOADER,
        uploaded_at=utcnow(),
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


async def delete_file(
    db: AsyncSession,
    file_id: int,
    requesting_user: str,
    admin_username: str = "admin",
) -> StoredFile:
    """Delete the metadata row if requesting_user owns it or is the admin.

    Returns the deleted record so the caller can remove the stored bytes.
    """
    require_fields(user=requesting_user)
    record = await db.get(StoredFile, file_id)
    if record is None:
        raise NotFoundError("File not found")
    if requesting_user != record.uploader and requesting_user != admin_username:
        logger.warning("%s may not delete file %s owned by %s", requesting_user, file_id, record.uploader)
        raise PermissionDeniedError("Not allowed to delete this file")

    await db.execute(delete(StoredFile).where(StoredFile.id == file_id))
    await db.commit()
    return record
