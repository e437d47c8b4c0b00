"""Read-only index of searchable document records."""

from typing import Any, Dict, Iterable, Iterator, Mapping, Tuple

from ..models.document import DocumentRecord


class SearchIndex:
    """Ordered collection of document records, fixed at construction.

    Record order is the order results are shown in. Duplicate titles and
    urls are allowed and surface as separate results.
    """

    __slots__ = ("_records", "_stats")

    def __init__(self, records: Iterable[DocumentRecord] = ()) -> None:
        """
        Initialize the index.

        Args:
            records: Document records in display order
        """
        self._records: Tuple[DocumentRecord, ...] = tuple(records)
        self._stats = {
            "total_records": len(self._records),
            "records_with_chapter": sum(1 for r in self._records if r.chapter),
            "records_without_keywords": sum(1 for r in self._records if not r.keywords),
        }

    @classmethod
    def from_manifest(cls, entries: Iterable[Mapping[str, Any]]) -> "SearchIndex":
        """
        Build an index from raw manifest entries.

        Args:
            entries: Mappings with ``title``, ``url``, ``keywords`` and
                optionally ``chapter``

        Returns:
            A new SearchIndex

        Raises:
            pydantic.ValidationError: If an entry lacks a title or url
        """
        return cls(DocumentRecord.model_validate(dict(entry)) for entry in entries)

    @property
    def records(self) -> Tuple[DocumentRecord, ...]:
        """All records in index order."""
        return self._records

    def __iter__(self) -> Iterator[DocumentRecord]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)

    def __getitem__(self, position: int) -> DocumentRecord:
        return self._records[position]

    def __repr__(self) -> str:
        return f"SearchIndex(records={len(self._records)})"

    def get_stats(self) -> Dict[str, int]:
        """Get index statistics."""
        return self._stats.copy()
