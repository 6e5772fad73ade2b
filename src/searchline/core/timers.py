"""asyncio-backed delayed callbacks for hosts without a Qt event loop."""

from __future__ import annotations

import asyncio
from collections.abc import Callable


class LoopTimer:
    """Single-shot timer on top of ``loop.call_later``.

    ``start`` while pending restarts the full delay.
    """

    def __init__(
        self,
        callback: Callable[[], None],
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        self._callback = callback
        self._loop = loop
        self._handle: asyncio.TimerHandle | None = None

    def start(self, delay_ms: int) -> None:
        self.stop()
        loop = self._loop or asyncio.get_running_loop()
        self._handle = loop.call_later(delay_ms / 1000, self._fire)

    def stop(self) -> None:
        if self._handle is not None:
            self._handle.cancel()
            self._handle = None

    def is_active(self) -> bool:
        return self._handle is not None

    def _fire(self) -> None:
        self._handle = None
        self._callback()


def loop_timer_factory(
    loop: asyncio.AbstractEventLoop | None = None,
) -> Callable[[Callable[[], None]], LoopTimer]:
    """Return a timer factory bound to ``loop`` (or the running loop)."""

    def factory(callback: Callable[[], None]) -> LoopTimer:
        return LoopTimer(callback, loop)

    return factory
