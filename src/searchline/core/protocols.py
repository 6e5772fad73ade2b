"""Protocol definitions for the collaborators of the search core."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol

from searchline.core.events import Event
from searchline.models.search import SearchMode, SearchRequest, SearchStatus


class DelayTimer(Protocol):
    """A single-shot, cancellable delayed callback."""

    def start(self, delay_ms: int) -> None: ...

    def stop(self) -> None: ...

    def is_active(self) -> bool: ...


type TimerFactory = Callable[[Callable[[], None]], DelayTimer]


class SearchBackend(Protocol):
    """Interface the coordinator drives.

    Every request eventually reports ``completed(session_id, status)``
    unless a newer request for the same id supersedes it.
    """

    completed: Event[[int, SearchStatus]]

    def search(self, request: SearchRequest) -> None: ...

    def continue_search(self, session_id: int, mode: SearchMode) -> None: ...

    def reset_search(self, session_id: int) -> None: ...

    def cancel_search(self, session_id: int) -> None: ...
