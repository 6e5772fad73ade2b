"""Configuration for searchline."""

from dataclasses import dataclass

from searchline.models.search import CaseSensitivity, SearchMode


@dataclass(frozen=True)
class Config:
    """Coordinator, indicator and backend configuration."""

    input_delay_ms: int = 700
    busy_delay_ms: int = 100
    minimum_length: int = 0
    case_sensitivity: CaseSensitivity = CaseSensitivity.INSENSITIVE
    search_mode: SearchMode = SearchMode.ALL_OCCURRENCES
    move_viewport: bool = False
    from_start: bool = True
    cancel_all_sessions: bool = False
