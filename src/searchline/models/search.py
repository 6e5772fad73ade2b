"""Search models."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class CaseSensitivity(StrEnum):
    SENSITIVE = "sensitive"
    INSENSITIVE = "insensitive"


class SearchMode(StrEnum):
    """How a search walks the document."""

    ALL_OCCURRENCES = "all_occurrences"
    FROM_CURRENT_POSITION = "from_current_position"
    NEXT_MATCH = "next_match"
    PREVIOUS_MATCH = "previous_match"

    @property
    def is_navigation(self) -> bool:
        return self in (SearchMode.NEXT_MATCH, SearchMode.PREVIOUS_MATCH)


class SearchStatus(StrEnum):
    FOUND = "found"
    NO_MATCH = "no_match"
    CANCELLED = "cancelled"


class PresentationState(StrEnum):
    """Abstract styling of the search input, rendered by the host."""

    NORMAL = "normal"
    INVALID = "invalid"
    NO_MATCH = "no_match"


class SearchRequest(BaseModel):
    """A full search request as handed to the backend."""

    model_config = ConfigDict(frozen=True)

    session_id: int
    text: str
    from_start: bool = True
    case_sensitivity: CaseSensitivity = CaseSensitivity.INSENSITIVE
    mode: SearchMode = SearchMode.ALL_OCCURRENCES
    move_viewport: bool = False
    color: str


@dataclass
class SearchSession:
    """Live search state of one coordinator.

    ``dirty`` means backend-held match state must be discarded before the
    next search; ``running`` is true between a request and its completion.
    The two flags are independent.
    """

    session_id: int | None = None
    query_text: str = ""
    minimum_length: int = 0
    case_sensitivity: CaseSensitivity = CaseSensitivity.INSENSITIVE
    search_mode: SearchMode = SearchMode.ALL_OCCURRENCES
    highlight_color: str | None = None
    move_viewport: bool = False
    from_start: bool = True
    dirty: bool = False
    running: bool = False

    @property
    def text_is_valid(self) -> bool:
        """False while the text is non-empty but shorter than the minimum."""
        length = len(self.query_text)
        return not (0 < length < self.minimum_length)
