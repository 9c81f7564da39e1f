"""
Article API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Path, Response, status

from core.errors import PG_INT_MAX
from core.pagination import Page

from . import schemas, service

router = APIRouter()


@router.get("/articles")
async def get_articles(
    topic: str | None = None,
    sort_by: str | None = None,
    order: str | None = None,
    page: Page = Depends(),
) -> list[dict]:
    return await service.list_articles(
        topic=topic,
        sort_by=sort_by,
        order=order,
        limit=page.limit,
        offset=page.offset,
    )


@router.post("/articles", status_code=status.HTTP_201_CREATED)
async def post_article(request: schemas.ArticleCreate) -> dict:
    return {"article": await service.create_article(request)}


@router.get("/articles/{article_id}")
async def get_article(article_id: int = Path(..., le=PG_INT_MAX)) -> dict:
    return {"article": await service.get_article(article_id)}


@router.patch("/articles/{article_id}", status_code=status.HTTP_201_CREATED)
async def patch_article(
    request: schemas.VoteUpdate,
    article_id: int = Path(..., le=PG_INT_MAX),
) -> dict:
    return {"updated_article": await service.update_votes(article_id, request)}


@router.delete("/articles/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(article_id: int = Path(..., le=PG_INT_MAX)) -> Response:
    await service.delete_article(article_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
