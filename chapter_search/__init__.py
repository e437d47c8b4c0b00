"""
Chapter Search - in-memory lookup over a static index of book chapters.

Matches a free-text query against chapter titles and keywords by plain
case-insensitive substring containment, keeps index order, and renders the
matched part of each title highlighted.
"""

__version__ = "1.0.0"

from .core.engine import SearchEngine
from .core.highlighter import escape_for_literal_match
from .core.index import SearchIndex
from .core.matcher import QueryMatcher
from .core.renderer import render
from .models.document import DocumentRecord

__all__ = [
    "SearchEngine",
    "SearchIndex",
    "QueryMatcher",
    "DocumentRecord",
    "render",
    "escape_for_literal_match",
]
