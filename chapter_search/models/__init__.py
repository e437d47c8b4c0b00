"""Data models for chapter search."""

from .document import DocumentRecord
from .outcome import NoResultsOutcome, PromptOutcome, ResultsOutcome, SearchOutcome
from .payload import (
    DisplayPayload,
    MessagePayload,
    ResultEntry,
    ResultsPayload,
    SearchMessages,
    TitleSegment,
)
from .request import BatchSearchRequest, SearchRequest
from .response import (
    DocumentListResponse,
    ErrorResponse,
    HealthResponse,
    MetricsResponse,
    SearchResponse,
)

__all__ = [
    "DocumentRecord",
    "PromptOutcome",
    "NoResultsOutcome",
    "ResultsOutcome",
    "SearchOutcome",
    "DisplayPayload",
    "MessagePayload",
    "ResultEntry",
    "ResultsPayload",
    "SearchMessages",
    "TitleSegment",
    "SearchRequest",
    "BatchSearchRequest",
    "SearchResponse",
    "DocumentListResponse",
    "ErrorResponse",
    "HealthResponse",
    "MetricsResponse",
]
