"""On-disk storage for uploads."""
import logging
import shutil
import time
from pathlib import Path

from fastapi import UploadFile

logger = logging.getLogger(__name__)


def stored_name_for(original_name: str) -> str:
    """`<epoch millis>-<basename>`; directory parts of the client name are dropped."""
    base = Path(original_name or "upload").name or "upload"
    return f"{int(time.time() * 1000)}-{base}"


def save_upload(upload: UploadFile, directory: Path) -> str:
    """Write the upload into directory and return the stored file name."""
    directory.mkdir(parents=True, exist_ok=True)
    name = stored_name_for(upload.filename)
    with open(directory / name, "wb") as out:
        shutil.copyfileobj(upload.file, out)
    logger.info("Stored upload %r as %s", upload.filename, name)
    return name


def remove_stored_file(directory: Path, file_path: str) -> None:
    """Best-effort removal of a stored upload; failures are logged, never raised."""
    target = directory / Path(file_path).name
    try:
        target.unlink()
    except OSError as exc:
        logger.warning("Could not remove stored file %s: %s", target, exc)
