"""Request models for API endpoints."""

from typing import List, Optional

from pydantic import BaseModel, Field


class SearchRequest(BaseModel):
    """Request model for search queries."""

    # Not stripped: the length check runs on the raw query.
    query: str = Field(default="", description="Search query")
    page: Optional[str] = Field(
        None, description="Path of the page showing the results, used to prefix result urls"
    )


class BatchSearchRequest(BaseModel):
    """Request model for batch search queries."""

    queries: List[str] = Field(..., min_length=1, max_length=100, description="List of search queries")
    page: Optional[str] = Field(
        None, description="Path of the page showing the results, used to prefix result urls"
    )
