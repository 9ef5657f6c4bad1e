"""Completion-callback adapter for the async API."""

from __future__ import annotations

import asyncio
from typing import Any, Awaitable, Callable, Coroutine

Callback = Callable[[BaseException | None, Any], None]


def with_callback(coro: Coroutine, callback: Callback | None) -> Awaitable:
    """Return *coro* untouched, or schedule it and report through *callback*.

    With a callback the coroutine is started as a task on the running loop
    and ``callback(error, result)`` is called when it finishes; the task is
    returned so callers can still await or cancel it.
    """
    if callback is None:
        return coro
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        coro.close()
        raise
    task = loop.create_task(coro)

    def _done(t: asyncio.Task) -> None:
        if t.cancelled():
            callback(asyncio.CancelledError(), None)
            return
        exc = t.exception()
        callback(exc, None if exc is not None else t.result())

    task.add_done_callback(_done)
    return task
