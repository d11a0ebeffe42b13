"""Notes and their comment threads."""
import logging

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.orm.attributes import set_committed_value

from studyhub.core.errors import require_fields
from studyhub.db.session import utcnow
from studyhub.models.comment import Comment
from studyhub.models.note import Note

logger = logging.getLogger(__name__)


async def list_notes(db: AsyncSession, subject: str) -> list[Note]:
    """Notes for a subject, newest first, each with its comments oldest first."""
    require_fields(subject=subject)
    result = await db.execute(
        select(Note)
        .where(Note.subject == subject)
        .options(selectinload(Note.comments))
        .order_by(Note.created_at.desc(), Note.id.desc())
        .execution_options(populate_existing=True)
    )
    return list(result.scalars().all())


async def create_note(
    db: AsyncSession,
    subject: str,
    author: str,
    content: str,
    is_public: bool | None = True,
) -> Note:
    require_fields(subject=subject, author=author, content=content)
    note = Note(
        subject=subject,
        author=author,
        content=content,
        is_public=True if is_public is None else bool(is_public),
        created_at=utcnow(),
    )
    db.add(note)
    await db.commit()
    await db.refresh(note)
    # a new note has no thread yet; avoid a lazy load on the async session
    set_committed_value(note, "comments", [])
    return note


async def delete_note(db: AsyncSession, note_id: int) -> None:
    """Delete the note and its comments together. Missing ids are a no-op."""
    result = await db.execute(delete(Comment).where(Comment.note_id == note_id))
    await db.execute(delete(Note).where(Note.id == note_id))
    await db.commit()
    logger.info("Deleted note %s with %s comments", note_id, result.rowcount)


async def add_comment(db: AsyncSession, note_id: int, author: str, content: str) -> Comment:
    """Attach a comment to a note. The note's existence is not checked."""
    require_fields(author=author, content=content)
    comment = Comment(note_id=note_id, author=author, content=content, created_at=utcnow())
    db.add(comment)
    await db.commit()
    await db.refresh(comment)
    return comment
