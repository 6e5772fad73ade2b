"""asyncio search backend wrapping a SearchEngine."""

from __future__ import annotations

import asyncio
import functools
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING

from result import Err, Ok, Result

from searchline.config import Config
from searchline.core.events import Event
from searchline.models.search import SearchMode, SearchRequest, SearchStatus

if TYPE_CHECKING:
    from searchline.services.protocols import SearchEngine

logger = logging.getLogger(__name__)

type EngineCall = Callable[[], Awaitable[SearchStatus]]


class AsyncSearchBackend:
    """Runs engine calls as asyncio tasks, one in flight per session id.

    A new request for a session supersedes its in-flight task without a
    completion. Reset and cancel report ``CANCELLED`` for the interrupted
    task before returning. Engine failures are reported as ``NO_MATCH``.
    """

    def __init__(self, engine: SearchEngine, config: Config | None = None) -> None:
        self._engine = engine
        self._config = config or Config()
        self._tasks: dict[int, asyncio.Task[None]] = {}
        self.completed: Event[[int, SearchStatus]] = Event()

    def is_in_flight(self, session_id: int) -> bool:
        task = self._tasks.get(session_id)
        return task is not None and not task.done()

    def search(self, request: SearchRequest) -> None:
        self._submit(request.session_id, functools.partial(self._engine.search, request))

    def continue_search(self, session_id: int, mode: SearchMode) -> None:
        self._submit(
            session_id, functools.partial(self._engine.continue_search, session_id, mode)
        )

    def reset_search(self, session_id: int) -> None:
        interrupted = self._cancel_task(session_id)
        status = SearchStatus.CANCELLED
        try:
            self._engine.reset(session_id)
        except Exception:
            logger.warning("Reset of session %s failed", session_id, exc_info=True)
            status = SearchStatus.NO_MATCH
        if interrupted:
            self._deliver(session_id, status)

    def cancel_search(self, session_id: int) -> None:
        if self._config.cancel_all_sessions:
            targets = list(self._tasks)
        else:
            targets = [session_id]
        for target in targets:
            if self._cancel_task(target):
                logger.debug("Cancelled search of session %s", target)
                self._deliver(target, SearchStatus.CANCELLED)

    def close(self) -> None:
        """Cancel every in-flight task without reporting completions."""
        for session_id in list(self._tasks):
            self._cancel_task(session_id)

    def _submit(self, session_id: int, call: EngineCall) -> None:
        if self._cancel_task(session_id):
            logger.debug("Superseded in-flight search of session %s", session_id)
        task = asyncio.create_task(self._run(session_id, call))
        self._tasks[session_id] = task
        task.add_done_callback(functools.partial(self._discard, session_id))
        task.add_done_callback(_log_exception)

    async def _run(self, session_id: int, call: EngineCall) -> None:
        result = await _call_engine(call)
        if isinstance(result, Ok):
            status = result.ok_value
        else:
            logger.warning("Search of session %s failed: %s", session_id, result.err_value)
            status = SearchStatus.NO_MATCH
        self._discard(session_id, asyncio.current_task())
        self._deliver(session_id, status)

    def _cancel_task(self, session_id: int) -> bool:
        task = self._tasks.pop(session_id, None)
        if task is None or task.done():
            return False
        task.cancel()
        return True

    def _discard(self, session_id: int, task: asyncio.Future[None] | None) -> None:
        if task is not None and self._tasks.get(session_id) is task:
            del self._tasks[session_id]

    def _deliver(self, session_id: int, status: SearchStatus) -> None:
        self.completed.emit(session_id, status)


async def _call_engine(call: EngineCall) -> Result[SearchStatus, str]:
    try:
        return Ok(await call())
    except Exception as exc:
        return Err(f"Search failed: {exc}")


def _log_exception(future: asyncio.Future[None]) -> None:
    """Log any exception escaping a search task."""
    if future.cancelled():
        return
    exc = future.exception()
    if exc is not None:
        logger.exception("Unhandled exception in search task", exc_info=exc)
