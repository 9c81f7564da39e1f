"""
User API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter

from . import service

router = APIRouter()


@router.get("/users")
async def get_users() -> list[dict]:
    return await service.list_users()


@router.get("/users/{username}")
async def get_user(username: str) -> dict:
    return await service.get_user(username)
