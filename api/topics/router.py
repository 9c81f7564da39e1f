"""
Topic API endpoints.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from . import schemas, service

router = APIRouter()


@router.get("/topics")
async def get_topics() -> dict:
    return {"topics": await service.list_topics()}


@router.post("/topics", status_code=status.HTTP_201_CREATED)
async def post_topic(request: schemas.TopicCreate) -> dict:
    return {"topic": await service.create_topic(request)}
