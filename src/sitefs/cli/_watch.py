"""Watch command: print filesystem events until interrupted."""

from __future__ import annotations

import datetime
import threading

import click

from ..watcher import watch_sync
from ._helpers import main, _fail, _status


def _print_event(event: str):
    def listener(path):
        now = datetime.datetime.now().strftime("%H:%M:%S")
        click.echo(f"[{now}] {event}\t{path}")
    return listener


def _wait_until_closed(watcher, poll: float = 0.5) -> None:
    """Block until *watcher* closes; Ctrl-C propagates as KeyboardInterrupt."""
    idle = threading.Event()
    while not watcher.closed:
        idle.wait(poll)


@main.command()
@click.argument("paths", nargs=-1, required=True, type=click.Path())
@click.option("--debounce", type=int, default=1600, show_default=True,
              envvar="SITEFS_DEBOUNCE",
              help="Milliseconds to group changes (or set SITEFS_DEBOUNCE).")
@click.option("--ignore-hidden", is_flag=True, default=False,
              help="Drop events for dot-prefixed paths.")
@click.pass_context
def watch(ctx, paths, debounce, ignore_hidden):
    """Watch PATHS and print add/change/unlink events."""
    try:
        watcher = watch_sync(list(paths), debounce=debounce, ignore_hidden=ignore_hidden)
    except OSError as exc:
        raise _fail(exc)

    def on_error(exc):
        click.echo(f"ERROR: {exc}", err=True)
        watcher.close()

    for event in ("add", "change", "unlink"):
        watcher.on(event, _print_event(event))
    watcher.on("error", on_error)

    click.echo(f"Watching {', '.join(paths)} (debounce {debounce}ms)")
    try:
        _wait_until_closed(watcher)
    except KeyboardInterrupt:
        click.echo("\nStopped watching.")
    finally:
        watcher.close()
    _status(ctx, "Watcher closed")
