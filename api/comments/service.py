"""
Comment business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from articles import repository as article_repository

from . import repository, schemas

logger = logging.getLogger(__name__)


def _to_comment(row: dict) -> dict:
    return {
        "comment_id": int(row["comment_id"]),
        "body": str(row["body"]),
        "article_id": int(row["article_id"]),
        "author": str(row["author"]),
        "votes": int(row["votes"]),
        "created_at": row["created_at"],
    }


async def list_comments(article_id: int, *, limit: int | None = None, offset: int = 0) -> list[dict]:
    rows = await repository.list_comments_for_article(article_id, limit=limit, offset=offset)
    if not rows and not await article_repository.article_exists(article_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Article ID not found")
    return [_to_comment(row) for row in rows]


async def add_comment(article_id: int, payload: schemas.CommentCreate) -> dict:
    if not payload.body.strip():
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Empty body - comment could not be added",
        )

    row = await repository.insert_comment(
        article_id=article_id,
        author=payload.username.strip(),
        body=payload.body,
    )
    comment = _to_comment(row)
    logger.info("comment_created comment_id=%s article_id=%s", comment["comment_id"], article_id)
    return comment


async def update_votes(comment_id: int, payload: schemas.VoteUpdate) -> dict:
    row = await repository.increment_votes(comment_id, payload.inc_votes)
    if row is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment not found")

    logger.info("comment_voted comment_id=%s inc_votes=%s", comment_id, payload.inc_votes)
    return _to_comment(row)


async def delete_comment(comment_id: int) -> None:
    deleted = await repository.delete_comment(comment_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Comment does not exist")

    logger.info("comment_deleted comment_id=%s", comment_id)
