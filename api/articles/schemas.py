"""
Pydantic schemas for article endpoints.

Unknown keys in request bodies are ignored.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, field_validator

from core.errors import PG_INT_MAX


class VoteUpdate(BaseModel):
    inc_votes: int = Field(..., ge=-PG_INT_MAX, le=PG_INT_MAX)

    @field_validator("inc_votes", mode="before")
    @classmethod
    def _reject_bool(cls, value: Any) -> Any:
        # bool is an int subclass; lax mode would turn true into 1.
        if isinstance(value, bool):
            raise ValueError("inc_votes must be an integer")
        return value


class ArticleCreate(BaseModel):
    author: str = Field(..., min_length=1)
    title: str = Field(..., min_length=1, max_length=300)
    body: str = Field(..., min_length=1)
    topic: str = Field(..., min_length=1)
    article_img_url: str | None = Field(default=None, max_length=2000)
