"""Document record model for the search index."""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentRecord(BaseModel):
    """One searchable page of the book."""

    model_config = ConfigDict(frozen=True)

    title: str = Field(..., min_length=1, description="Human-readable page title")
    url: str = Field(..., min_length=1, description="Link target relative to the site root")
    keywords: str = Field(default="", description="Space-delimited search terms")
    chapter: Optional[str] = Field(None, description="Short chapter label shown above the title")

    @field_validator("keywords", mode="before")
    @classmethod
    def join_keyword_list(cls, v: Any) -> Any:
        """Accept keywords given as a list and join them with spaces."""
        if v is None:
            return ""
        if isinstance(v, (list, tuple)):
            return " ".join(str(keyword) for keyword in v)
        return v
