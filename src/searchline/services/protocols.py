"""Protocol definitions for search engines behind the backend adapter."""

from __future__ import annotations

from typing import Protocol

from searchline.models.search import SearchMode, SearchRequest, SearchStatus


class SearchEngine(Protocol):
    """A document search engine holding per-session match state."""

    async def search(self, request: SearchRequest) -> SearchStatus: ...

    async def continue_search(self, session_id: int, mode: SearchMode) -> SearchStatus: ...

    def reset(self, session_id: int) -> None: ...
