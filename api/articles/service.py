"""
Article business logic.

Scope:
- validate list queries against the sort/order allow-lists
- tell "topic has no articles" apart from "topic does not exist"
- map missing rows to 404s
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from topics import repository as topic_repository

from . import repository, schemas

logger = logging.getLogger(__name__)

DEFAULT_SORT_BY = "created_at"
DEFAULT_ORDER = "desc"
DEFAULT_ARTICLE_IMG_URL = (
    "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"
)


def _to_summary(row: dict) -> dict:
    return {
        "article_id": int(row["article_id"]),
        "title": str(row["title"]),
        "topic": str(row["topic"]),
        "author": str(row["author"]),
        "created_at": row["created_at"],
        "votes": int(row["votes"]),
        "article_img_url": row["article_img_url"],
        "comment_count": int(row.get("comment_count") or 0),
    }


def _to_article(row: dict) -> dict:
    article = {
        "article_id": int(row["article_id"]),
        "title": str(row["title"]),
        "topic": str(row["topic"]),
        "author": str(row["author"]),
        "body": str(row["body"]),
        "created_at": row["created_at"],
        "votes": int(row["votes"]),
        "article_img_url": row["article_img_url"],
    }
    if "comment_count" in row:
        article["comment_count"] = int(row["comment_count"] or 0)
    return article


def normalize_sort(sort_by: str | None, order: str | None) -> tuple[str, str]:
    """
    Return `(sort_by, order)` if both are on the allow-lists, else raise 400.
    """
    sort_key = (sort_by or DEFAULT_SORT_BY).strip()
    if sort_key not in repository.SORT_COLUMNS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid sort query")

    direction = (order or DEFAULT_ORDER).strip().lower()
    if direction not in repository.ORDER_DIRECTIONS:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid order query")

    return sort_key, direction


async def list_articles(
    *,
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    limit: int | None = None,
    offset: int = 0,
) -> list[dict]:
    sort_key, direction = normalize_sort(sort_by, order)
    topic = (topic or "").strip() or None

    rows = await repository.list_articles(
        topic=topic,
        sort_by=sort_key,
        order=direction,
        limit=limit,
        offset=offset,
    )
    if not rows and topic is not None and not await topic_repository.topic_exists(topic):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Topic not found")

    return [_to_summary(row) for row in rows]


async def get_article(article_id: int) -> dict:
    row = await repository.get_article(article_id)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article ID not found")
    return _to_article(row)


async def update_votes(article_id: int, payload: schemas.VoteUpdate) -> dict:
    row = await repository.increment_votes(article_id, payload.inc_votes)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Entry not found")

    logger.info("article_voted article_id=%s inc_votes=%s", article_id, payload.inc_votes)
    return _to_article(row)


async def create_article(payload: schemas.ArticleCreate) -> dict:
    # Unknown author/topic surfaces as a foreign-key violation (404).
    row = await repository.insert_article(
        author=payload.author.strip(),
        title=payload.title.strip(),
        body=payload.body,
        topic=payload.topic.strip(),
        article_img_url=(payload.article_img_url or "").strip() or DEFAULT_ARTICLE_IMG_URL,
    )
    article = _to_article(row)
    article["comment_count"] = 0

    logger.info("article_created article_id=%s topic=%s", article["article_id"], article["topic"])
    return article


async def delete_article(article_id: int) -> None:
    deleted = await repository.delete_article(article_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article ID not found")

    logger.info("article_deleted article_id=%s", article_id)
