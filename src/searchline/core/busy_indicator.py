"""Busy indicator gate driven by coordinator start/stop events."""

from __future__ import annotations

from typing import TYPE_CHECKING

from searchline.core.events import Event

if TYPE_CHECKING:
    from searchline.core.coordinator import SearchCoordinator
    from searchline.core.protocols import TimerFactory


class BusyIndicatorController:
    """Activates a busy indicator only for searches outliving a short delay."""

    def __init__(self, timer_factory: TimerFactory, *, delay_ms: int = 100) -> None:
        self._delay_ms = delay_ms
        self._active = False
        self._activation_timer = timer_factory(self._activate)
        self.active_changed: Event[[bool]] = Event()

    @property
    def active(self) -> bool:
        return self._active

    @property
    def pending_activation(self) -> bool:
        return self._activation_timer.is_active()

    def attach(self, coordinator: SearchCoordinator) -> None:
        coordinator.search_started.connect(self.on_search_started)
        coordinator.search_stopped.connect(self.on_search_stopped)

    def detach(self, coordinator: SearchCoordinator) -> None:
        coordinator.search_started.disconnect(self.on_search_started)
        coordinator.search_stopped.disconnect(self.on_search_stopped)

    def on_search_started(self) -> None:
        self._activation_timer.start(self._delay_ms)

    def on_search_stopped(self) -> None:
        self._activation_timer.stop()
        if self._active:
            self._active = False
            self.active_changed.emit(False)

    def _activate(self) -> None:
        if self._active:
            return
        self._active = True
        self.active_changed.emit(True)
