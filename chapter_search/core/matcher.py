"""Case-insensitive substring matching over the search index."""

from ..models.document import DocumentRecord
from ..models.outcome import NoResultsOutcome, PromptOutcome, ResultsOutcome, SearchOutcome
from .index import SearchIndex
from .normalizer import TextNormalizer

MIN_QUERY_LENGTH = 2


class QueryMatcher:
    """Filters a SearchIndex by plain substring containment.

    A record matches when the case-folded query occurs anywhere in its
    title or keyword string. There is no tokenization, ranking or fuzzy
    matching, and matches keep their index order. The matcher holds no
    per-query state, so the same query against the same index always
    gives an equal outcome.
    """

    def __init__(self, index: SearchIndex, min_query_length: int = MIN_QUERY_LENGTH) -> None:
        """
        Initialize the matcher.

        Args:
            index: Index to search
            min_query_length: Queries shorter than this produce a prompt
        """
        self.index = index
        self.min_query_length = min_query_length
        self.normalizer = TextNormalizer()

    def search(self, query: str) -> SearchOutcome:
        """
        Search the index for a free-text query.

        The raw query length is checked before anything else; the query is
        not trimmed.

        Args:
            query: User-supplied text, any length and content

        Returns:
            PromptOutcome for short queries, NoResultsOutcome when nothing
            matches, otherwise ResultsOutcome with matches in index order
        """
        if not query or len(query) < self.min_query_length:
            return PromptOutcome(query=query or "")

        needle = self.normalizer.normalize(query)
        matches = tuple(record for record in self.index if self.matches(record, needle))

        if not matches:
            return NoResultsOutcome(query=query)

        return ResultsOutcome(query=query, matches=matches)

    def matches(self, record: DocumentRecord, needle: str) -> bool:
        """Check a record against an already normalized needle."""
        return (
            self.normalizer.contains(record.title, needle)
            or self.normalizer.contains(record.keywords, needle)
        )
