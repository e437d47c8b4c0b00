"""Tri-state search outcome models."""

from typing import Annotated, Literal, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field

from .document import DocumentRecord


class PromptOutcome(BaseModel):
    """The query is too short to search; the caller should ask for more input."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["prompt"] = "prompt"
    query: str = Field(default="", description="Original search query")


class NoResultsOutcome(BaseModel):
    """The query was searched and nothing matched."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["no_results"] = "no_results"
    query: str = Field(..., description="Original search query")


class ResultsOutcome(BaseModel):
    """The query matched one or more records, in index order."""

    model_config = ConfigDict(frozen=True)

    kind: Literal["results"] = "results"
    query: str = Field(..., description="Original search query")
    matches: Tuple[DocumentRecord, ...] = Field(..., min_length=1, description="Matched records")


SearchOutcome = Annotated[
    Union[PromptOutcome, NoResultsOutcome, ResultsOutcome],
    Field(discriminator="kind"),
]
