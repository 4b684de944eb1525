"""Cancelable transport call backed by an asyncio task."""

import asyncio
from typing import Any, Coroutine

from ...core.exceptions import TransportError
from ...core.protocols import CancelableRequest


class Cancelable(CancelableRequest):
    """Runs a request coroutine as a task and exposes a one-shot outcome future.

    ``cancel`` fails the future at once with ``TransportError(status)`` and
    asks the task to stop; the task's own outcome is then ignored.
    """

    def __init__(self, coro: Coroutine[Any, Any, Any]):
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            coro.close()
            raise
        self._future: "asyncio.Future[Any]" = loop.create_future()
        self._task = loop.create_task(coro)
        self._task.add_done_callback(self._on_task_done)

    @property
    def future(self) -> "asyncio.Future[Any]":
        return self._future

    @property
    def task(self) -> "asyncio.Task[Any]":
        return self._task

    def cancel(self, status: int = 0) -> bool:
        if self._future.done():
            return False
        self._future.set_exception(TransportError(status=status, message="Request cancelled"))
        self._task.cancel()
        return True

    def _on_task_done(self, task: "asyncio.Task[Any]") -> None:
        # Retrieve the outcome even when it is discarded
        error = None if task.cancelled() else task.exception()

        if self._future.done():
            return
        if task.cancelled():
            self._future.set_exception(TransportError(status=0, message="Request cancelled"))
        elif error is not None:
            self._future.set_exception(error)
        else:
            self._future.set_result(task.result())
