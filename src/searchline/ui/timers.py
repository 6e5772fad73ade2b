"""QTimer-backed delayed callbacks."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtDelayTimer:
    """Single-shot QTimer satisfying the DelayTimer protocol."""

    def __init__(self, callback: Callable[[], None], parent: QObject | None = None) -> None:
        self._timer = QTimer(parent)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(callback)

    def start(self, delay_ms: int) -> None:
        self._timer.start(delay_ms)

    def stop(self) -> None:
        self._timer.stop()

    def is_active(self) -> bool:
        return self._timer.isActive()


def qt_timer_factory(parent: QObject | None = None) -> Callable[[Callable[[], None]], QtDelayTimer]:
    """Return a timer factory whose QTimers are owned by ``parent``."""

    def factory(callback: Callable[[], None]) -> QtDelayTimer:
        return QtDelayTimer(callback, parent)

    return factory
