"""Search API endpoints."""

import time
from typing import List, Optional

from fastapi import APIRouter, Query
from fastapi.responses import HTMLResponse

from ..config import get_settings
from ..core.renderer import resolve_base_path
from ..models.request import BatchSearchRequest, SearchRequest
from ..models.response import DocumentListResponse, SearchResponse

router = APIRouter(prefix="/api/v1", tags=["search"])
settings = get_settings()

# Import the global search engine instance
from ..engine_instance import search_engine


def _run_search(query: str, page: Optional[str]) -> SearchResponse:
    start_time = time.time()

    outcome, payload = search_engine.search_and_render(query, resolve_base_path(page))
    results = list(outcome.matches) if outcome.kind == "results" else []

    return SearchResponse(
        query=query,
        outcome=outcome.kind,
        total_results=len(results),
        results=results,
        payload=payload,
        execution_time_ms=(time.time() - start_time) * 1000,
    )


@router.get(
    "/search",
    response_model=SearchResponse,
    summary="Search chapters",
    description="Match a query against chapter titles and keywords"
)
async def search_chapters(
    q: str = Query("", description="The text to search for"),
    page: Optional[str] = Query(
        None, description="Path of the page showing the results"
    )
) -> SearchResponse:
    """
    Search chapters by title and keywords.

    Queries shorter than the minimum length return the prompt outcome
    instead of results. Matches keep the order of the index.
    """
    return _run_search(q, page)


@router.post(
    "/search",
    response_model=SearchResponse,
    summary="Search with request body",
    description="Search chapters using a structured request body"
)
async def search_with_body(request: SearchRequest) -> SearchResponse:
    """Search chapters using a JSON request body."""
    return _run_search(request.query, request.page)


@router.post(
    "/search/batch",
    response_model=List[SearchResponse],
    summary="Batch search",
    description="Search multiple queries in a single request"
)
async def batch_search(request: BatchSearchRequest) -> List[SearchResponse]:
    """Run several searches and return their responses in request order."""
    return [_run_search(query, request.page) for query in request.queries]


@router.get(
    "/search/html",
    response_class=HTMLResponse,
    summary="Rendered search fragment",
    description="Get the HTML fragment the search overlay injects into the page"
)
async def search_fragment(
    q: str = Query("", description="The text to search for"),
    page: Optional[str] = Query(
        None, description="Path of the page showing the results"
    )
) -> HTMLResponse:
    """Render search results as an HTML fragment."""
    _, payload = search_engine.search_and_render(q, resolve_base_path(page))
    return HTMLResponse(content=payload.to_html())


@router.get(
    "/documents",
    response_model=DocumentListResponse,
    summary="Get all indexed documents",
    description="Get the records of the loaded manifest in index order"
)
async def get_documents() -> DocumentListResponse:
    """Get all records currently indexed."""
    return DocumentListResponse(
        manifest=settings.manifest,
        total_documents=len(search_engine.index),
        documents=list(search_engine.index),
    )
