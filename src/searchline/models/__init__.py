"""Models for searchline."""

from searchline.models.search import (
    CaseSensitivity,
    PresentationState,
    SearchMode,
    SearchRequest,
    SearchSession,
    SearchStatus,
)

__all__ = [
    "CaseSensitivity",
    "PresentationState",
    "SearchMode",
    "SearchRequest",
    "SearchSession",
    "SearchStatus",
]
