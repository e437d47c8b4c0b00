"""Main search engine implementation."""

import time
from typing import Any, Dict, Optional, Tuple

import structlog

from ..models.outcome import SearchOutcome
from ..models.payload import DisplayPayload, SearchMessages
from .index import SearchIndex
from .matcher import MIN_QUERY_LENGTH, QueryMatcher
from .renderer import ResultRenderer

logger = structlog.get_logger(__name__)


class SearchEngine:
    """Main search engine tying the index, matcher and renderer together."""

    def __init__(
        self,
        index: SearchIndex,
        min_query_length: int = MIN_QUERY_LENGTH,
        summary_size: int = 5,
        messages: Optional[SearchMessages] = None,
    ) -> None:
        """
        Initialize the search engine.

        Args:
            index: Index to search, built once at startup
            min_query_length: Queries shorter than this produce a prompt
            summary_size: Number of keywords shown under each result
            messages: Texts for the prompt and no-results states
        """
        self.index = index
        self.matcher = QueryMatcher(index, min_query_length=min_query_length)
        self.renderer = ResultRenderer(
            messages=messages,
            summary_size=summary_size,
            min_query_length=min_query_length,
        )

        # Performance tracking
        self._stats = self._empty_stats()

    @staticmethod
    def _empty_stats() -> Dict[str, Any]:
        return {
            "total_queries": 0,
            "prompts": 0,
            "no_results": 0,
            "result_queries": 0,
            "total_matches": 0,
            "total_execution_time": 0.0,
        }

    def search(self, query: str) -> SearchOutcome:
        """
        Search the index.

        Args:
            query: Raw user query

        Returns:
            Prompt, no-results or results outcome
        """
        start_time = time.time()

        outcome = self.matcher.search(query)

        execution_time = (time.time() - start_time) * 1000
        self._record(outcome, execution_time)

        logger.debug(
            "Search completed",
            query_length=len(query or ""),
            outcome=outcome.kind,
            matches=len(outcome.matches) if outcome.kind == "results" else 0,
            execution_time_ms=round(execution_time, 3),
        )

        return outcome

    def render(self, outcome: SearchOutcome, query: str, base_path: str = "") -> DisplayPayload:
        """Render an outcome for display."""
        return self.renderer.render(outcome, query, base_path)

    def search_and_render(
        self, query: str, base_path: str = ""
    ) -> Tuple[SearchOutcome, DisplayPayload]:
        """
        Search and render in one step.

        Args:
            query: Raw user query
            base_path: Prefix prepended to result urls

        Returns:
            Tuple of (outcome, payload)
        """
        outcome = self.search(query)
        return outcome, self.render(outcome, query, base_path)

    def _record(self, outcome: SearchOutcome, execution_time: float) -> None:
        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time

        if outcome.kind == "prompt":
            self._stats["prompts"] += 1
        elif outcome.kind == "no_results":
            self._stats["no_results"] += 1
        else:
            self._stats["result_queries"] += 1
            self._stats["total_matches"] += len(outcome.matches)

    def get_stats(self) -> Dict[str, Any]:
        """Get search statistics."""
        stats = self._stats.copy()
        total = stats["total_queries"]

        if total > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total
            stats["prompt_rate"] = stats["prompts"] / total
            stats["no_results_rate"] = stats["no_results"] / total
            stats["results_rate"] = stats["result_queries"] / total
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["prompt_rate"] = 0.0
            stats["no_results_rate"] = 0.0
            stats["results_rate"] = 0.0

        stats["index_stats"] = self.index.get_stats()
        return stats

    def reset_stats(self) -> None:
        """Reset query statistics."""
        self._stats = self._empty_stats()
