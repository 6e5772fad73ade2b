"""Explicit event/listener wiring between the coordinator and its consumers."""

from __future__ import annotations

import contextlib
from collections.abc import Callable


class Event[**P]:
    """A list of listeners called in connection order on ``emit``.

    Listeners connected or disconnected during an emit take effect on the
    next emit. Exceptions raised by a listener propagate to the emitter.
    """

    def __init__(self) -> None:
        self._listeners: list[Callable[P, object]] = []

    def connect(self, listener: Callable[P, object]) -> None:
        self._listeners.append(listener)

    def disconnect(self, listener: Callable[P, object]) -> None:
        with contextlib.suppress(ValueError):
            self._listeners.remove(listener)

    def emit(self, *args: P.args, **kwargs: P.kwargs) -> None:
        for listener in tuple(self._listeners):
            listener(*args, **kwargs)

    @property
    def listener_count(self) -> int:
        return len(self._listeners)
