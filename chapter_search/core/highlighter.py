"""Literal-pattern escaping and title highlighting."""

import re
from typing import List

from ..models.payload import TitleSegment
from .normalizer import TextNormalizer

# Characters with special meaning in a regular expression outside a class.
_PATTERN_SPECIALS = re.compile(r"[.*+?^${}()|\[\]\\]")

_normalizer = TextNormalizer()


def escape_for_literal_match(text: str) -> str:
    """
    Escape text so that a compiled pattern matches it literally.

    Every character in ``. * + ? ^ $ { } ( ) | [ ] \\`` gets a backslash
    prefix; everything else passes through unchanged.

    Args:
        text: User-supplied text

    Returns:
        Pattern source that matches exactly ``text``
    """
    if not text:
        return ""

    return _PATTERN_SPECIALS.sub(lambda match: "\\" + match.group(0), text)


def highlight_title(title: str, query: str) -> List[TitleSegment]:
    """
    Split a title into plain and highlighted runs.

    Every non-overlapping, case-insensitive occurrence of the literal query
    is highlighted. Matched text keeps the title's own casing. When the
    query does not occur in the title the whole title comes back as one
    plain segment.

    Args:
        title: Record title
        query: Raw user query

    Returns:
        Segments whose texts concatenate back to ``title``
    """
    if not query:
        return [TitleSegment(text=title)]

    pattern = re.compile(escape_for_literal_match(query), re.IGNORECASE)

    segments: List[TitleSegment] = []
    position = 0
    for match in pattern.finditer(title):
        if match.start() > position:
            segments.append(TitleSegment(text=title[position:match.start()]))
        segments.append(TitleSegment(text=match.group(0), highlighted=True))
        position = match.end()

    if position < len(title) or not segments:
        segments.append(TitleSegment(text=title[position:]))

    return segments


def summarize_keywords(keywords: str, limit: int = 5) -> str:
    """
    Summarize a keyword string as its first few tokens.

    Args:
        keywords: Space-delimited keyword string, possibly empty
        limit: Maximum number of tokens to keep

    Returns:
        Tokens joined with ``", "``, or an empty string
    """
    return ", ".join(_normalizer.tokenize(keywords)[:limit])
