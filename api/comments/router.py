"""
Comment API endpoints.

Listing and posting live under `/articles/{article_id}/comments`; votes and
deletion address a comment directly.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from core.errors import PG_INT_MAX
from core.pagination import Page

from . import schemas, service

router = APIRouter()


@router.get("/articles/{article_id}/comments")
async def get_article_comments(
    article_id: int = Path(..., le=PG_INT_MAX),
    page: Page = Depends(),
) -> list[dict]:
    return await service.list_comments(article_id, limit=page.limit, offset=page.offset)


@router.post("/articles/{article_id}/comments", status_code=status.HTTP_201_CREATED)
async def post_article_comment(
    request: schemas.CommentCreate,
    article_id: int = Path(..., le=PG_INT_MAX),
) -> dict:
    return {"comment": await service.add_comment(article_id, request)}


@router.patch("/comments/{comment_id}", status_code=status.HTTP_201_CREATED)
async def patch_comment(
    request: schemas.VoteUpdate,
    comment_id: int = Path(..., le=PG_INT_MAX),
) -> dict:
    return {"updated_comment": await service.update_votes(comment_id, request)}


@router.delete("/comments/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_comment(comment_id: int = Path(..., le=PG_INT_MAX)) -> Response:
    await service.delete_comment(comment_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
