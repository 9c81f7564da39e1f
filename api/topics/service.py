"""
Topic business logic.
"""

from __future__ import annotations

import logging

from fastapi import HTTPException, status

from core.errors import BAD_REQUEST

from . import repository, schemas

logger = logging.getLogger(__name__)


async def list_topics() -> list[dict]:
    rows = await repository.list_topics()
    return [{"slug": str(row["slug"]), "description": row["description"]} for row in rows]


async def create_topic(payload: schemas.TopicCreate) -> dict:
    slug = payload.slug.strip()
    if not slug:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST)

    row = await repository.insert_topic(slug=slug, description=payload.description.strip())
    if row is None:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Topic already exists")

    logger.info("topic_created slug=%s", slug)
    return {"slug": str(row["slug"]), "description": row["description"]}
