"""
User persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_users() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT username, name, avatar_url
        FROM users
        ORDER BY username ASC
        """
    )


async def get_user_by_username(username: str) -> dict | None:
    return await db.fetch_one(
        """
        SELECT username, name, avatar_url
        FROM users
        WHERE username = $1
        """,
        username,
    )
