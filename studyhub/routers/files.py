"""File upload / listing / deletion API."""
from typing import Annotated

from fastapi import APIRouter, BackgroundTasks, Depends, File, Form, UploadFile
from fastapi.concurrency import run_in_threadpool
from sqlalchemy.ext.asyncio import AsyncSession

from studyhub.core.config import Settings, get_app_settings
from studyhub.core.errors import ValidationError, require_fields
from studyhub.db.session import get_db
from studyhub.schemas.base import SuccessSchema
from studyhub.schemas.file import FileOutSchema
from studyhub.services import files, storage

router = APIRouter(tags=["files"])


@router.get("/files", response_model=list[FileOutSchema])
async def list_files(
    db: Annotated[AsyncSession, Depends(get_db)],
    subject: str | None = None,
):
    return await files.list_files(db, subject)


@router.post("/upload", response_model=FileOutSchema)
async def upload_file(
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    file: Annotated[UploadFile | None, File()] = None,
    subject: Annotated[str | None, Form()] = None,
    uploader: Annotated[str | None, Form()] = None,
):
    """Store an uploaded file and record its metadata under a subject."""
    if file is None or not file.filename:
        raise ValidationError("No file uploaded")
    require_fields(subject=subject)

    stored_name = await run_in_threadpool(storage.save_upload, file, settings.upload_path)
    public_path = f"{settings.uploads_url_prefix.rstrip('/')}/{stored_name}"
    try:
        return await files.store_file_metadata(db, subject, file.filename, public_path, uploader)
    except Exception:
        # no row points at the bytes, so drop them
        storage.remove_stored_file(settings.upload_path, public_path)
        raise


@router.delete("/files/{file_id}", response_model=SuccessSchema)
async def delete_file(
    file_id: int,
    background_tasks: BackgroundTasks,
    db: Annotated[AsyncSession, Depends(get_db)],
    settings: Annotated[Settings, Depends(get_app_settings)],
    user: str | None = None,
):
    """Delete a file (uploader or admin only); the stored bytes are removed after the response."""
    record = await files.delete_file(db, file_id, user, settings.admin_username)
    background_tasks.add_task(storage.remove_stored_file, settings.upload_path, record.file_path)
    return SuccessSchema()
