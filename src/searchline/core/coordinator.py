"""Debounced, session-scoped driver of a search backend."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from searchline.config import Config
from searchline.core.events import Event
from searchline.models.search import (
    CaseSensitivity,
    PresentationState,
    SearchMode,
    SearchRequest,
    SearchSession,
    SearchStatus,
)

if TYPE_CHECKING:
    from searchline.core.protocols import SearchBackend, TimerFactory

logger = logging.getLogger(__name__)


class SearchCoordinator:
    """Turns text edits and option changes into backend search requests.

    Keystrokes are debounced through an owned input timer. Completions
    arriving from the backend are matched against the session id, so one
    backend can serve many coordinators.
    """

    def __init__(
        self,
        backend: SearchBackend,
        timer_factory: TimerFactory,
        *,
        session_id: int | None = None,
        config: Config | None = None,
    ) -> None:
        self._config = config or Config()
        self._backend = backend
        self._session = SearchSession(
            session_id=session_id,
            minimum_length=self._config.minimum_length,
            case_sensitivity=self._config.case_sensitivity,
            search_mode=self._config.search_mode,
            move_viewport=self._config.move_viewport,
            from_start=self._config.from_start,
        )
        self._presentation = PresentationState.NORMAL
        self._input_timer = timer_factory(self.start_search)

        self.search_started: Event[[]] = Event()
        self.search_stopped: Event[[]] = Event()
        self.validity_changed: Event[[bool]] = Event()
        self.match_status_changed: Event[[bool]] = Event()
        self.presentation_changed: Event[[PresentationState]] = Event()

        self._backend.completed.connect(self.on_search_completed)

    @property
    def session(self) -> SearchSession:
        return self._session

    @property
    def presentation_state(self) -> PresentationState:
        return self._presentation

    @property
    def is_search_running(self) -> bool:
        return self._session.running

    # ── Options ──

    def set_case_sensitivity(self, case_sensitivity: CaseSensitivity) -> None:
        self._session.case_sensitivity = case_sensitivity
        self._session.dirty = True

    def set_minimum_length(self, length: int) -> None:
        self._session.minimum_length = length
        self._session.dirty = True

    def set_search_mode(self, mode: SearchMode) -> None:
        if mode == self._session.search_mode:
            return
        self._session.search_mode = mode
        self._session.dirty = not mode.is_navigation

    def set_session_id(self, session_id: int | None) -> None:
        self._session.session_id = session_id
        self._session.dirty = True

    def set_highlight_color(self, color: str | None) -> None:
        self._session.highlight_color = color or None
        self._session.dirty = True

    def set_move_viewport(self, move: bool) -> None:
        self._session.move_viewport = move

    def set_from_start(self, from_start: bool) -> None:
        self._session.from_start = from_start

    # ── Input ──

    def on_text_changed(self, text: str) -> None:
        self._session.query_text = text
        self._update_validity()
        self.restart_search()

    def on_submit(self, text: str) -> None:
        """Accept the current text and navigate forward."""
        self._input_timer.stop()
        self._session.query_text = text
        self._update_validity()
        self.find_next()

    def restart_search(self) -> None:
        """(Re)arm the input delay; the search starts once input settles."""
        self._input_timer.stop()
        self._input_timer.start(self._config.input_delay_ms)
        self._session.dirty = True

    # ── Lifecycle ──

    def find_next(self) -> None:
        self._navigate(SearchMode.NEXT_MATCH)

    def find_previous(self) -> None:
        self._navigate(SearchMode.PREVIOUS_MATCH)

    def start_search(self) -> None:
        s = self._session
        session_id, color = s.session_id, s.highlight_color
        if session_id is None or color is None:
            return

        if s.dirty and s.search_mode.is_navigation:
            logger.debug("Resetting search state of session %s", session_id)
            self._backend.reset_search(session_id)
        s.dirty = False

        if len(s.query_text) < max(s.minimum_length, 1):
            self._backend.reset_search(session_id)
            return

        self.search_started.emit()
        s.running = True
        request = SearchRequest(
            session_id=session_id,
            text=s.query_text,
            from_start=s.from_start,
            case_sensitivity=s.case_sensitivity,
            mode=s.search_mode,
            move_viewport=s.move_viewport,
            color=color,
        )
        logger.debug("Searching session %s for %r (%s)", session_id, s.query_text, s.search_mode)
        self._backend.search(request)

    def stop_search(self) -> None:
        s = self._session
        if s.session_id is None or not s.running:
            return
        self._input_timer.stop()
        self._backend.cancel_search(s.session_id)
        # the next search restarts from scratch
        s.dirty = True

    def on_search_completed(self, session_id: int, status: SearchStatus) -> None:
        s = self._session
        if s.session_id is None or session_id != s.session_id:
            logger.debug("Ignoring completion for session %s", session_id)
            return

        if status == SearchStatus.CANCELLED:
            self._set_presentation(self._input_presentation())
        else:
            found = status == SearchStatus.FOUND
            self.match_status_changed.emit(found)
            self._set_presentation(
                PresentationState.NORMAL if found else PresentationState.NO_MATCH
            )

        s.running = False
        self.search_stopped.emit()

    def close(self) -> None:
        """Stop the input timer and stop listening to the backend."""
        self._input_timer.stop()
        self._backend.completed.disconnect(self.on_search_completed)

    # ── Internals ──

    def _navigate(self, mode: SearchMode) -> None:
        s = self._session
        session_id = s.session_id
        if session_id is None or s.highlight_color is None or s.search_mode != mode:
            return

        if s.dirty:
            self.start_search()
            return

        self.search_started.emit()
        s.running = True
        logger.debug("Continuing search of session %s (%s)", session_id, mode)
        self._backend.continue_search(session_id, mode)

    def _update_validity(self) -> None:
        self.validity_changed.emit(self._session.text_is_valid)
        self._set_presentation(self._input_presentation())

    def _input_presentation(self) -> PresentationState:
        if self._session.text_is_valid:
            return PresentationState.NORMAL
        return PresentationState.INVALID

    def _set_presentation(self, state: PresentationState) -> None:
        if state == self._presentation:
            return
        self._presentation = state
        self.presentation_changed.emit(state)
