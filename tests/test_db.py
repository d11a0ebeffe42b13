"""Tests for the database helpers: driver URL mapping and UTC timestamps."""
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select

from studyhub.db.session import to_sync_url
from studyhub.models.note import Note


@pytest.mark.parametrize(
    "url,expected",
    [
        ("sqlite+aiosqlite:///./compre.db", "sqlite:///./compre.db"),
        ("postgresql+asyncpg://u:p@db:5432/study", "postgresql+psycopg2://u:p@db:5432/study"),
        ("postgresql://u:p@db/study", "postgresql://u:p@db/study"),
        ("sqlite:///already-sync.db", "sqlite:///already-sync.db"),
    ],
)
def test_to_sync_url(url, expected):
    assert to_sync_url(url) == expected


async def test_timestamps_read_back_as_utc(session_factory):
    local = datetime(2024, 3, 1, 14, 30, tzinfo=timezone(timedelta(hours=2)))
    async with session_factory() as s:
        s.add(Note(subject="Ethics", author="ana", content="hi", is_public=True, created_at=local))
        await s.commit()

    async with session_factory() as s:
        note = (await s.execute(select(Note))).scalar_one()

    assert note.created_at.utcoffset() == timedelta(0)
    assert note.created_at == datetime(2024, 3, 1, 12, 30, tzinfo=timezone.utc)
