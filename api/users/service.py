"""
User business logic.
"""

from __future__ import annotations

from fastapi import HTTPException, status

from . import repository


def _to_user(row: dict) -> dict:
    return {
        "username": str(row["username"]),
        "name": str(row["name"]),
        "avatar_url": row["avatar_url"],
    }


async def list_users() -> list[dict]:
    return [_to_user(row) for row in await repository.list_users()]


async def get_user(username: str) -> dict:
    row = await repository.get_user_by_username(username.strip())
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Username not found")
    return _to_user(row)
