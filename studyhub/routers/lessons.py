"""Lessons API: the static semester catalogue."""
from fastapi import APIRouter

from studyhub.services.lessons import get_lessons

router = APIRouter(tags=["lessons"])


@router.get("/lessons")
async def list_lessons():
    return get_lessons()
