"""
Page/limit helpers shared by list endpoints.
"""

from __future__ import annotations

from fastapi import Query

from .errors import PG_INT_MAX

MAX_PAGE_SIZE = 100


class Page:
    """
    Optional `?limit=&p=` pair.

    `limit=None` means "no limit"; `p` only matters when a limit is set.
    """

    def __init__(
        self,
        limit: int | None = Query(default=None, ge=1, le=MAX_PAGE_SIZE),
        p: int = Query(default=1, ge=1, le=PG_INT_MAX),
    ) -> None:
        self.limit = limit
        self.page = p

    @property
    def offset(self) -> int:
        if self.limit is None:
            return 0
        return (self.page - 1) * self.limit
