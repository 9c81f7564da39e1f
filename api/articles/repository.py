"""
Article persistence (raw SQL).

Sorting is the only place where SQL text depends on the request: the column
and direction are looked up in fixed mappings below, never copied from input.
Everything else is a bound parameter.
"""

from __future__ import annotations

from core import db

# Public sort key -> SQL expression.
_SORT_EXPRESSIONS = {
    "article_id": "articles.article_id",
    "title": "articles.title",
    "topic": "articles.topic",
    "author": "articles.author",
    "created_at": "articles.created_at",
    "votes": "articles.votes",
    "article_img_url": "articles.article_img_url",
    "comment_count": "comment_count",
}

_ORDER_KEYWORDS = {
    "asc": "ASC",
    "desc": "DESC",
}

SORT_COLUMNS = tuple(_SORT_EXPRESSIONS)
ORDER_DIRECTIONS = tuple(_ORDER_KEYWORDS)

_ARTICLE_FIELDS = """
    articles.article_id,
    articles.title,
    articles.topic,
    articles.author,
    articles.body,
    articles.created_at,
    articles.votes,
    articles.article_img_url
"""


async def list_articles(
    *,
    topic: str | None = None,
    sort_by: str = "created_at",
    order: str = "desc",
    limit: int | None = None,
    offset: int = 0,
) -> list[dict]:
    """
    Return article summaries (no body) with their comment counts.

    `limit=None` returns every matching row.
    """
    try:
        sort_sql = _SORT_EXPRESSIONS[sort_by]
        direction = _ORDER_KEYWORDS[order]
    except KeyError as exc:
        raise ValueError(f"Unsupported sort: {sort_by!r} {order!r}") from exc

    return await db.fetch_all(
        f"""
        SELECT
          articles.article_id,
          articles.title,
          articles.topic,
          articles.author,
          articles.created_at,
          articles.votes,
          articles.article_img_url,
          COUNT(comments.comment_id)::int AS comment_count
        FROM articles
        LEFT JOIN comments ON comments.article_id = articles.article_id
        WHERE ($1::varchar IS NULL OR articles.topic = $1::varchar)
        GROUP BY articles.article_id
        ORDER BY {sort_sql} {direction}, articles.article_id {direction}
        LIMIT $2
        OFFSET $3
        """,
        topic,
        limit,
        offset,
    )


async def get_article(article_id: int) -> dict | None:
    return await db.fetch_one(
        f"""
        SELECT
          {_ARTICLE_FIELDS},
          COUNT(comments.comment_id)::int AS comment_count
        FROM articles
        LEFT JOIN comments ON comments.article_id = articles.article_id
        WHERE articles.article_id = $1
        GROUP BY articles.article_id
        """,
        article_id,
    )


async def article_exists(article_id: int) -> bool:
    row = await db.fetch_one(
        """
        SELECT 1 AS ok
        FROM articles
        WHERE article_id = $1
        LIMIT 1
        """,
        article_id,
    )
    return row is not None


async def increment_votes(article_id: int, inc_votes: int) -> dict | None:
    """
    Add `inc_votes` in a single statement; returns None when the article is missing.
    """
    return await db.fetch_one(
        f"""
        UPDATE articles
        SET votes = votes + $1
        WHERE article_id = $2
        RETURNING {_ARTICLE_FIELDS}
        """,
        inc_votes,
        article_id,
    )


async def insert_article(
    *,
    author: str,
    title: str,
    body: str,
    topic: str,
    article_img_url: str,
) -> dict:
    row = await db.fetch_one(
        f"""
        INSERT INTO articles (author, title, body, topic, article_img_url)
        VALUES ($1, $2, $3, $4, $5)
        RETURNING {_ARTICLE_FIELDS}
        """,
        author,
        title,
        body,
        topic,
        article_img_url,
    )
    if row is None:
        raise RuntimeError("Failed to insert article.")
    return row


async def delete_article(article_id: int) -> bool:
    row = await db.fetch_one(
        """
        DELETE FROM articles
        WHERE article_id = $1
        RETURNING article_id
        """,
        article_id,
    )
    return row is not None
