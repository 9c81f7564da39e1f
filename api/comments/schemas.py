"""
Pydantic schemas for comment endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field

from articles.schemas import VoteUpdate

__all__ = ["CommentCreate", "VoteUpdate"]


class CommentCreate(BaseModel):
    username: str = Field(..., min_length=1)
    # Blank bodies get their own message in the service layer.
    body: str
