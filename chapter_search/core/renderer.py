"""Turn search outcomes into display payloads."""

from typing import Optional

from ..models.outcome import ResultsOutcome, SearchOutcome
from ..models.payload import (
    DisplayPayload,
    MessagePayload,
    ResultEntry,
    ResultsPayload,
    SearchMessages,
)
from .highlighter import highlight_title, summarize_keywords
from .matcher import MIN_QUERY_LENGTH

CHAPTERS_DIR = "/chapters/"


def resolve_base_path(page_path: Optional[str]) -> str:
    """
    Get the link prefix for results shown on a given page.

    Manifest urls are relative to the site root, so pages inside the
    chapters directory need to step up one level.

    Args:
        page_path: Path of the page showing the results

    Returns:
        ``"../"`` for chapter pages, otherwise an empty string
    """
    if page_path and CHAPTERS_DIR in page_path:
        return "../"
    return ""


class ResultRenderer:
    """Renders outcomes into messages or highlighted result entries."""

    def __init__(
        self,
        messages: Optional[SearchMessages] = None,
        summary_size: int = 5,
        min_query_length: int = MIN_QUERY_LENGTH,
    ) -> None:
        """
        Initialize the renderer.

        Args:
            messages: Message texts for the prompt and no-results states
            summary_size: Number of keywords shown under each title
            min_query_length: Value substituted into the prompt hint
        """
        self.messages = messages or SearchMessages()
        self.summary_size = summary_size
        self.min_query_length = min_query_length

    def render(self, outcome: SearchOutcome, query: str, base_path: str = "") -> DisplayPayload:
        """
        Render an outcome.

        Args:
            outcome: Result of QueryMatcher.search
            query: Raw query used for highlighting
            base_path: Prefix prepended to every result url

        Returns:
            MessagePayload for prompt and no-results outcomes, otherwise a
            ResultsPayload with one entry per match in order
        """
        if isinstance(outcome, ResultsOutcome):
            return ResultsPayload(entries=[
                ResultEntry(
                    url=f"{base_path}{record.url}",
                    title=record.title,
                    chapter=record.chapter,
                    title_segments=highlight_title(record.title, query),
                    summary=summarize_keywords(record.keywords, self.summary_size),
                )
                for record in outcome.matches
            ])

        if outcome.kind == "prompt":
            return MessagePayload(
                kind="prompt",
                message=self.messages.prompt_message,
                hint=self.messages.prompt_hint.replace(
                    "{min_query_length}", str(self.min_query_length)
                ),
            )

        return MessagePayload(
            kind="no_results",
            message=self.messages.no_results_message,
            hint=self.messages.no_results_hint,
        )


_default_renderer = ResultRenderer()


def render(outcome: SearchOutcome, query: str, base_path: str = "") -> DisplayPayload:
    """Render an outcome with the default messages."""
    return _default_renderer.render(outcome, query, base_path)
