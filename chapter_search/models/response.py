"""Response models for API endpoints."""

from datetime import datetime, timezone
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .document import DocumentRecord
from .payload import DisplayPayload


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class SearchResponse(BaseModel):
    """Response for search queries."""

    query: str = Field(..., description="Original search query")
    outcome: Literal["prompt", "no_results", "results"] = Field(..., description="Outcome kind")
    total_results: int = Field(..., description="Total number of matched records")
    results: List[DocumentRecord] = Field(..., description="Matched records in index order")
    payload: DisplayPayload = Field(..., description="Rendered display payload")
    execution_time_ms: float = Field(..., description="Query execution time in milliseconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Response timestamp")


class DocumentListResponse(BaseModel):
    """Response listing the indexed documents."""

    manifest: str = Field(..., description="Name of the loaded manifest")
    total_documents: int = Field(..., description="Number of records in the index")
    documents: List[DocumentRecord] = Field(..., description="Records in index order")


class ErrorResponse(BaseModel):
    """Error response model."""

    error: str = Field(..., description="Error type")
    message: str = Field(..., description="Error message")
    details: Optional[Dict[str, Any]] = Field(None, description="Additional error details")
    timestamp: datetime = Field(default_factory=_utcnow, description="Error timestamp")


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Service status")
    version: str = Field(..., description="Application version")
    uptime: float = Field(..., description="Service uptime in seconds")
    timestamp: datetime = Field(default_factory=_utcnow, description="Check timestamp")
    dependencies: Dict[str, str] = Field(..., description="Dependency status")


class MetricsResponse(BaseModel):
    """Performance metrics response."""

    total_queries: int = Field(..., description="Total queries processed")
    average_response_time_ms: float = Field(..., description="Average search time")
    prompt_rate: float = Field(..., description="Share of queries below the minimum length")
    no_results_rate: float = Field(..., description="Share of queries that matched nothing")
    results_rate: float = Field(..., description="Share of queries with results")
    indexed_documents: int = Field(..., description="Number of records in the index")
    memory_usage_mb: float = Field(..., description="Resident memory of the process in MB")
    timestamp: datetime = Field(default_factory=_utcnow, description="Metrics timestamp")
