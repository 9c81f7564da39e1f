"""
Pydantic schemas for topic endpoints.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class TopicCreate(BaseModel):
    slug: str = Field(..., min_length=1, max_length=100)
    description: str = Field(default="", max_length=1000)
