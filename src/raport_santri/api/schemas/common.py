"""Shared Pydantic schemas for API responses."""

from __future__ import annotations

from pydantic import BaseModel, Field

DEFAULT_LIMIT = 8
MAX_LIMIT = 100


class PaginationMeta(BaseModel):
    """Pagination metadata for list responses."""

    total: int = Field(description="Total number of items matching the filters")
    page: int = Field(description="1-based page number")
    limit: int = Field(description="Maximum number of items per page")
    total_pages: int = Field(description="Number of pages available")


def build_pagination(total: int, page: int, limit: int) -> PaginationMeta:
    """Return pagination metadata for a page of a filtered result set."""
    return PaginationMeta(total=total, page=page, limit=limit, total_pages=-(-total // limit))
