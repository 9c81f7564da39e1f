"""
Topic persistence (raw SQL).
"""

from __future__ import annotations

from core import db


async def list_topics() -> list[dict]:
    return await db.fetch_all(
        """
        SELECT slug, description
        FROM topics
        ORDER BY slug ASC
        """
    )


async def topic_exists(slug: str) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM topics
        WHERE slug = $1
        LIMIT 1
        """,
        slug,
    )
    return row is not None


async def insert_topic(*, slug: str, description: str) -> dict | None:
    """
    Insert a topic; returns None when the slug is already taken.
    """
    return await db.fetch_one(
        """
        INSERT INTO topics (slug, description)
        VALUES ($1, $2)
        ON CONFLICT (slug) DO NOTHING
        RETURNING slug, description
        """,
        slug,
        description,
    )
