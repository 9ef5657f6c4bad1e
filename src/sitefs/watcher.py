"""Directory watching on top of ``watchfiles``.

A :class:`Watcher` runs ``watchfiles.watch`` on a daemon thread and fans
each change out to listeners registered with :meth:`Watcher.on`:

- ``add``, ``change``, ``unlink`` -- called with the absolute path
- ``error`` -- called with the exception that stopped the watcher
- ``ready`` -- called once, when the notifier is active

:func:`watch` resolves once the notifier is active, so a write issued after
awaiting it is always observed.
"""

from __future__ import annotations

import asyncio
import logging
import os
import threading
from collections import defaultdict
from dataclasses import dataclass, replace
from typing import Any, Awaitable, Callable, Sequence

import watchfiles

from ._callbacks import Callback, with_callback
from .exceptions import require

logger = logging.getLogger(__name__)

__all__ = ["Watcher", "WatchOptions", "watch", "watch_sync", "EVENTS"]

EVENTS = frozenset({"add", "change", "unlink", "error", "ready"})

_CHANGE_EVENTS = {
    watchfiles.Change.added: "add",
    watchfiles.Change.modified: "change",
    watchfiles.Change.deleted: "unlink",
}

# The notifier yields an empty batch after this many idle milliseconds;
# the first such batch is how we learn it is running.
_IDLE_TICK_MS = 100


@dataclass(frozen=True, slots=True)
class WatchOptions:
    """Settings for :func:`watch`.

    Attributes:
        debounce: Milliseconds to group changes into one batch.
        step: Milliseconds between notifier polls for new changes.
        recursive: Watch subdirectories too.
        force_polling: Force (or forbid, with False) the polling backend.
        ignore_hidden: Drop events for paths with a dot-prefixed component
            below the watched root.
    """

    debounce: int = 1600
    step: int = 50
    recursive: bool = True
    force_polling: bool | None = None
    ignore_hidden: bool = False


def resolve_watch_options(options: WatchOptions | None = None, **overrides) -> WatchOptions:
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if options is None:
        return WatchOptions(**overrides)
    return replace(options, **overrides) if overrides else options


def _as_path_list(paths) -> list[str]:
    if isinstance(paths, (str, os.PathLike)):
        return [os.fspath(paths)]
    return [os.fspath(p) for p in paths]


class Watcher:
    """Handle for a running watch.  Create through :func:`watch`."""

    def __init__(self, paths: Sequence[str], options: WatchOptions | None = None) -> None:
        self._paths = [os.path.abspath(p) for p in paths]
        self._options = options or WatchOptions()
        self._listeners: dict[str, list[Callable[..., Any]]] = defaultdict(list)
        self._lock = threading.Lock()
        self._stop = threading.Event()
        self._ready = threading.Event()
        self._startup_error: BaseException | None = None
        self._thread: threading.Thread | None = None

    def __repr__(self) -> str:
        state = "closed" if self.closed else "running" if self._thread else "idle"
        return f"Watcher(paths={self._paths!r}, {state})"

    def __enter__(self) -> Watcher:
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    @property
    def paths(self) -> list[str]:
        """Absolute watched paths."""
        return list(self._paths)

    @property
    def closed(self) -> bool:
        return self._stop.is_set()

    # ------------------------------------------------------------------
    def on(self, event: str, listener: Callable[..., Any]) -> Watcher:
        """Register *listener* for *event*; returns self for chaining."""
        if event not in EVENTS:
            raise ValueError(f"Unknown watch event {event!r}; expected one of {sorted(EVENTS)}")
        with self._lock:
            self._listeners[event].append(listener)
        return self

    def off(self, event: str, listener: Callable[..., Any]) -> Watcher:
        """Remove a listener added with :meth:`on`."""
        with self._lock:
            if listener in self._listeners.get(event, []):
                self._listeners[event].remove(listener)
        return self

    def _emit(self, event: str, *args: Any) -> None:
        with self._lock:
            listeners = list(self._listeners.get(event, ()))
        for listener in listeners:
            try:
                listener(*args)
            except Exception:
                logger.warning("watch listener for %r failed", event, exc_info=True)

    # ------------------------------------------------------------------
    def _is_hidden(self, path: str) -> bool:
        for root in self._paths:
            if path == root or not path.startswith(root + os.sep):
                continue
            rel = path[len(root) + 1:]
            return any(part.startswith(".") for part in rel.split(os.sep))
        return False

    def _keep(self, _change: watchfiles.Change, path: str) -> bool:
        return not self._is_hidden(path)

    def _run(self) -> None:
        opts = self._options
        try:
            for changes in watchfiles.watch(
                *self._paths,
                watch_filter=self._keep if opts.ignore_hidden else None,
                debounce=opts.debounce,
                step=opts.step,
                stop_event=self._stop,
                rust_timeout=_IDLE_TICK_MS,
                yield_on_timeout=True,
                force_polling=opts.force_polling,
                recursive=opts.recursive,
                raise_interrupt=False,
            ):
                if not self._ready.is_set():
                    self._ready.set()
                    logger.debug("watching %s", ", ".join(self._paths))
                    self._emit("ready")
                for change, path in sorted(changes, key=lambda c: (c[0].value, c[1])):
                    self._emit(_CHANGE_EVENTS[change], path)
        except Exception as exc:
            if not self._ready.is_set():
                self._startup_error = exc
            else:
                logger.debug("watcher on %s stopped: %s", self._paths, exc)
                self._emit("error", exc)
        finally:
            self._ready.set()

    def start(self) -> Watcher:
        if self._thread is not None:
            return self
        self._thread = threading.Thread(
            target=self._run, name=f"sitefs-watch:{self._paths[0]}", daemon=True,
        )
        self._thread.start()
        return self

    def wait_ready(self, timeout: float | None = None) -> bool:
        """Block until the notifier is active.

        Re-raises the error that kept it from starting; returns False if
        *timeout* elapsed first.
        """
        ready = self._ready.wait(timeout)
        if self._startup_error is not None:
            raise self._startup_error
        return ready

    def close(self, timeout: float | None = 5.0) -> None:
        """Stop watching and wait for the background thread to exit."""
        self._stop.set()
        thread = self._thread
        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout)


# ---------------------------------------------------------------------------
# Entry points
# ---------------------------------------------------------------------------

async def _start(watcher: Watcher) -> Watcher:
    watcher.start()
    try:
        await asyncio.to_thread(watcher.wait_ready)
    except BaseException:
        watcher.close()
        raise
    return watcher


def watch(
    paths: str | Sequence[str] | None = None,
    options: WatchOptions | None = None, *,
    callback: Callback | None = None,
    **overrides,
) -> Awaitable[Watcher]:
    """Start watching *paths* and resolve to the :class:`Watcher` once active.

    Keyword *overrides* replace fields of *options*
    (e.g. ``watch(root, debounce=50)``).
    """
    require(paths)
    options = resolve_watch_options(options, **overrides)
    watcher = Watcher(_as_path_list(paths), options)
    return with_callback(_start(watcher), callback)


def watch_sync(
    paths: str | Sequence[str] | None = None,
    options: WatchOptions | None = None,
    **overrides,
) -> Watcher:
    """Blocking form of :func:`watch`."""
    require(paths)
    options = resolve_watch_options(options, **overrides)
    watcher = Watcher(_as_path_list(paths), options).start()
    try:
        watcher.wait_ready()
    except BaseException:
        watcher.close()
        raise
    return watcher
