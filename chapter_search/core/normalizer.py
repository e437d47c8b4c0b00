"""Text normalization utilities for query and record comparison."""

from typing import List


class TextNormalizer:
    """Folds case for comparison and splits keyword strings into tokens."""

    def normalize(self, text: str) -> str:
        """
        Fold text to a single case for substring comparison.

        Only the case changes. No trimming, Unicode decomposition or
        delimiter rewriting is applied, so the folded text lines up with
        plain ordinal containment.

        Args:
            text: Input text to normalize

        Returns:
            Lower-cased text, or an empty string for empty input
        """
        if not text:
            return ""

        return text.lower()

    def tokenize(self, text: str) -> List[str]:
        """
        Split text on runs of whitespace.

        Args:
            text: Input text

        Returns:
            List of tokens in their original casing
        """
        if not text:
            return []

        return text.split()

    def contains(self, haystack: str, needle: str) -> bool:
        """
        Check whether an already normalized needle occurs in haystack.

        Args:
            haystack: Text to search in, any casing
            needle: Normalized text to look for

        Returns:
            True if needle is a case-insensitive substring of haystack
        """
        return needle in self.normalize(haystack)
