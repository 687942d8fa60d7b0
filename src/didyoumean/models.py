from enum import StrEnum
from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, ConfigDict, Field

if TYPE_CHECKING:
    from .exceptions import SuggestionError

# =============================================================================
# LOOKUP MODELS
# =============================================================================
# Values describing one unresolved reference and the scoring applied to it.
# All of them are immutable and live only for the handling of one failure.


class LookupKind(StrEnum):
    """Which kind of reference failed to resolve."""

    NAME = "name"
    ATTRIBUTE = "attribute"


class TieBreak(StrEnum):
    """Ordering applied among candidates at the same minimum distance."""

    DISCOVERY = "discovery"
    LEXICAL = "lexical"


class FailedLookup(BaseModel):
    """One unresolved-reference event."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    name: str = Field(..., description="The name that failed to resolve")
    scope: Any = Field(None, description="Opaque identifier of the lookup scope")
    message: str = Field("", description="Original runtime failure message")
    kind: LookupKind = Field(LookupKind.NAME, description="Kind of failed reference")


class ScoredCandidate(BaseModel):
    """A candidate name with its edit distance from the failed name."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Candidate spelling")
    distance: int = Field(..., ge=0, description="Edit distance to the failed name")


# =============================================================================
# REPORT MODEL
# =============================================================================
# Serializable view of a SuggestionError for callers that log or transport it.


class SuggestionReport(BaseModel):
    """JSON-friendly summary of a suggestion error."""

    failed_name: str = Field(..., description="The name that failed to resolve")
    kind: LookupKind = Field(..., description="Kind of failed reference")
    message: str = Field(..., description="Original runtime failure message")
    rendered: str = Field(..., description="Message including the suggestion clause")
    suggestions: list[str] = Field(
        default_factory=list, description="Nearest names, best first"
    )
    exception_type: str = Field(..., description="Class name of the error")

    @classmethod
    def from_error(cls, error: "SuggestionError") -> "SuggestionReport":
        """Create a report from a SuggestionError.

        Args:
            error: The enriched error.

        Returns:
            SuggestionReport carrying the error's programmatic fields.
        """
        return cls(
            failed_name=error.failed_name,
            kind=error.failed.kind,
            message=error.failed.message,
            rendered=error.rendered_message(),
            suggestions=list(error.suggestions),
            exception_type=type(error).__name__,
        )
