"""Display payload models produced by the result renderer."""

import html
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class SearchMessages(BaseModel):
    """Texts shown in place of results."""

    prompt_message: str = Field(default="Введите запрос для поиска")
    prompt_hint: str = Field(default="Минимум {min_query_length} символа")
    no_results_message: str = Field(default="Ничего не найдено")
    no_results_hint: str = Field(default="Попробуйте другой запрос")


class TitleSegment(BaseModel):
    """A run of title text, either plain or emphasized."""

    text: str = Field(..., description="Segment text in its original casing")
    highlighted: bool = Field(default=False, description="Whether the segment matched the query")


class ResultEntry(BaseModel):
    """One rendered search result."""

    url: str = Field(..., description="Link target including the base path")
    title: str = Field(..., description="Unmodified record title")
    chapter: Optional[str] = Field(None, description="Chapter label")
    title_segments: List[TitleSegment] = Field(..., description="Title split into highlighted runs")
    summary: str = Field(default="", description="First few keywords, comma separated")

    def highlighted_title_html(self) -> str:
        """Title with matched runs wrapped in ``<mark>``."""
        parts = []
        for segment in self.title_segments:
            text = html.escape(segment.text)
            parts.append(f"<mark>{text}</mark>" if segment.highlighted else text)
        return "".join(parts)

    def to_html(self) -> str:
        chapter = ""
        if self.chapter:
            chapter = f'<span class="search-result-chapter">{html.escape(self.chapter)}</span>'
        return (
            f'<a href="{html.escape(self.url, quote=True)}" class="search-result-item">'
            f"{chapter}"
            f'<span class="search-result-title">{self.highlighted_title_html()}</span>'
            f'<span class="search-result-keywords">{html.escape(self.summary)}</span>'
            "</a>"
        )


class MessagePayload(BaseModel):
    """Fixed message rendered for the prompt and no-results outcomes."""

    kind: Literal["prompt", "no_results"]
    message: str
    hint: str

    def to_html(self) -> str:
        return (
            '<div class="search-empty">'
            f"<p>{html.escape(self.message)}</p>"
            f'<p class="search-hint">{html.escape(self.hint)}</p>'
            "</div>"
        )


class ResultsPayload(BaseModel):
    """Ordered result entries."""

    kind: Literal["results"] = "results"
    entries: List[ResultEntry] = Field(..., description="Rendered entries in match order")

    def to_html(self) -> str:
        return "".join(entry.to_html() for entry in self.entries)


DisplayPayload = Annotated[
    Union[MessagePayload, ResultsPayload],
    Field(discriminator="kind"),
]
