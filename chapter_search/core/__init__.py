"""Core search functionality."""

from .engine import SearchEngine
from .highlighter import escape_for_literal_match, highlight_title, summarize_keywords
from .index import SearchIndex
from .matcher import QueryMatcher
from .normalizer import TextNormalizer
from .renderer import ResultRenderer, render, resolve_base_path

__all__ = [
    "SearchEngine",
    "SearchIndex",
    "QueryMatcher",
    "TextNormalizer",
    "ResultRenderer",
    "render",
    "resolve_base_path",
    "escape_for_literal_match",
    "highlight_title",
    "summarize_keywords",
]
