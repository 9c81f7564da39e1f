"""
Comment persistence (raw SQL).
"""

from __future__ import annotations

from core import db

_COMMENT_FIELDS = """
    comment_id,
    body,
    article_id,
    author,
    votes,
    created_at
"""


async def list_comments_for_article(
    article_id: int,
    *,
    limit: int | None = None,
    offset: int = 0,
) -> list[dict]:
    """
    Newest first; `limit=None` returns every comment.
    """
    return await db.fetch_all(
        f"""
        SELECT {_COMMENT_FIELDS}
        FROM comments
        WHERE article_id = $1
        ORDER BY created_at DESC, comment_id DESC
        LIMIT $2
        OFFSET $3
        """,
        article_id,
        limit,
        offset,
    )


async def insert_comment(*, article_id: int, author: str, body: str) -> dict:
    """
    Raises asyncpg.ForeignKeyViolationError for an unknown article or author.
    """
    row = await db.fetch_one(
        f"""
        INSERT INTO comments (article_id, author, body)
        VALUES ($1, $2, $3)
        RETURNING {_COMMENT_FIELDS}
        """,
        article_id,
        author,
        body,
    )
    if row is None:
        raise RuntimeError("Failed to insert comment.")
    return row


async def increment_votes(comment_id: int, inc_votes: int) -> dict | None:
    return await db.fetch_one(
        f"""
        UPDATE comments
        SET votes = votes + $1
        WHERE comment_id = $2
        RETURNING {_COMMENT_FIELDS}
        """,
        inc_votes,
        comment_id,
    )


async def delete_comment(comment_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM comments
        WHERE comment_id = $1
        RETURNING comment_id
        """,
        comment_id,
    )
    return row is not None
