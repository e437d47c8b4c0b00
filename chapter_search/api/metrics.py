"""Metrics and monitoring API endpoints."""

from datetime import datetime, timezone

import psutil
from fastapi import APIRouter
from fastapi.responses import JSONResponse

from ..models.response import MetricsResponse

router = APIRouter(prefix="/api/v1", tags=["metrics"])

# Import the global search engine instance
from ..engine_instance import search_engine


def _process_memory_mb() -> float:
    return psutil.Process().memory_info().rss / (1024 * 1024)


@router.get(
    "/metrics",
    response_model=MetricsResponse,
    summary="Get search metrics",
    description="Get query counters and memory usage of the search service"
)
async def get_metrics() -> MetricsResponse:
    """
    Get search metrics.

    Reports how queries split between the prompt, no-results and results
    outcomes, the average search time and the memory held by the process.
    """
    stats = search_engine.get_stats()

    return MetricsResponse(
        total_queries=stats["total_queries"],
        average_response_time_ms=stats["average_execution_time_ms"],
        prompt_rate=stats["prompt_rate"],
        no_results_rate=stats["no_results_rate"],
        results_rate=stats["results_rate"],
        indexed_documents=stats["index_stats"]["total_records"],
        memory_usage_mb=_process_memory_mb()
    )


@router.get(
    "/metrics/detailed",
    summary="Get detailed metrics",
    description="Get raw query counters, index statistics and system memory"
)
async def get_detailed_metrics() -> JSONResponse:
    """Get detailed metrics with the breakdown by outcome."""
    stats = search_engine.get_stats()
    memory_info = psutil.virtual_memory()

    result_queries = stats["result_queries"]
    average_matches = stats["total_matches"] / result_queries if result_queries else 0.0

    return JSONResponse(
        status_code=200,
        content={
            "query_metrics": {
                "total_queries": stats["total_queries"],
                "prompts": stats["prompts"],
                "no_results": stats["no_results"],
                "result_queries": result_queries,
                "average_matches_per_result": average_matches,
                "average_response_time_ms": stats["average_execution_time_ms"],
                "total_execution_time_ms": stats["total_execution_time"]
            },
            "index_metrics": stats["index_stats"],
            "system_metrics": {
                "process_memory_mb": _process_memory_mb(),
                "memory_usage_percent": memory_info.percent,
                "available_memory_mb": memory_info.available / (1024 * 1024)
            },
            "timestamp": datetime.now(timezone.utc).isoformat()
        }
    )
