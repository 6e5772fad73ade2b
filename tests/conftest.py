"""Shared fixtures for searchline tests."""

from __future__ import annotations

import os
from collections.abc import Callable

import pytest

from searchline.config import Config
from searchline.core.coordinator import SearchCoordinator
from searchline.core.events import Event
from searchline.models.search import SearchMode, SearchRequest, SearchStatus

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


class FakeTimer:
    """Manually fired DelayTimer."""

    def __init__(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.delay_ms: int | None = None
        self.start_count = 0

    def start(self, delay_ms: int) -> None:
        self.delay_ms = delay_ms
        self.start_count += 1

    def stop(self) -> None:
        self.delay_ms = None

    def is_active(self) -> bool:
        return self.delay_ms is not None

    def fire(self) -> None:
        assert self.is_active(), "timer is not pending"
        self.delay_ms = None
        self.callback()


class FakeTimerFactory:
    def __init__(self) -> None:
        self.timers: list[FakeTimer] = []

    def __call__(self, callback: Callable[[], None]) -> FakeTimer:
        timer = FakeTimer(callback)
        self.timers.append(timer)
        return timer


class RecordingBackend:
    """SearchBackend that records calls; completions are pushed by the test."""

    def __init__(self) -> None:
        self.completed: Event[[int, SearchStatus]] = Event()
        self.calls: list[tuple[str, object]] = []

    @property
    def call_names(self) -> list[str]:
        return [name for name, _ in self.calls]

    @property
    def requests(self) -> list[SearchRequest]:
        return [args for name, args in self.calls if name == "search"]  # type: ignore[misc]

    def search(self, request: SearchRequest) -> None:
        self.calls.append(("search", request))

    def continue_search(self, session_id: int, mode: SearchMode) -> None:
        self.calls.append(("continue", (session_id, mode)))

    def reset_search(self, session_id: int) -> None:
        self.calls.append(("reset", session_id))

    def cancel_search(self, session_id: int) -> None:
        self.calls.append(("cancel", session_id))

    def finish(self, session_id: int, status: SearchStatus = SearchStatus.FOUND) -> None:
        self.completed.emit(session_id, status)


class EventLog:
    """Collects coordinator emissions in order."""

    def __init__(self, coordinator: SearchCoordinator) -> None:
        self.entries: list[tuple[str, object]] = []
        coordinator.search_started.connect(lambda: self.entries.append(("started", None)))
        coordinator.search_stopped.connect(lambda: self.entries.append(("stopped", None)))
        coordinator.validity_changed.connect(lambda v: self.entries.append(("valid", v)))
        coordinator.match_status_changed.connect(lambda f: self.entries.append(("found", f)))
        coordinator.presentation_changed.connect(
            lambda s: self.entries.append(("presentation", s))
        )

    def names(self) -> list[str]:
        return [name for name, _ in self.entries]

    def count(self, name: str) -> int:
        return self.names().count(name)


@pytest.fixture
def timers() -> FakeTimerFactory:
    return FakeTimerFactory()


@pytest.fixture
def backend() -> RecordingBackend:
    return RecordingBackend()


@pytest.fixture
def coordinator(backend: RecordingBackend, timers: FakeTimerFactory) -> SearchCoordinator:
    """Coordinator with id 1 and a colour, ready to search."""
    coord = SearchCoordinator(backend, timers, session_id=1, config=Config())
    coord.set_highlight_color("#FFFF00")
    return coord


@pytest.fixture
def input_timer(coordinator: SearchCoordinator, timers: FakeTimerFactory) -> FakeTimer:
    return timers.timers[0]


@pytest.fixture
def events(coordinator: SearchCoordinator) -> EventLog:
    return EventLog(coordinator)


@pytest.fixture(scope="session")
def qapp():  # type: ignore[no-untyped-def]
    from PySide6.QtWidgets import QApplication

    app = QApplication.instance() or QApplication([])
    yield app
