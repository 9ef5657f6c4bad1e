"""Async filesystem operations.

Each function checks its required arguments immediately (raising
:class:`~sitefs.exceptions.MissingArgumentError` before touching the disk)
and returns an awaitable.  Pass ``callback=`` to have the work scheduled on
the running loop and reported as ``callback(error, result)`` instead.

Blocking storage calls run on worker threads; directory traversals fan out
across the entries of each level.  See :mod:`sitefs.fs_sync` for the
blocking mirrors.
"""

from __future__ import annotations

import asyncio
import os
from typing import Awaitable

from . import _io
from ._callbacks import Callback, with_callback
from ._filter import FilterConfig, resolve_filter
from ._walk import copy_tree, empty_tree, list_tree, remove_tree
from .exceptions import require

__all__ = [
    "exists", "mkdirs", "write_file", "append_file", "copy_file",
    "copy_dir", "list_dir", "empty_dir", "rmdir", "read_file",
    "ensure_path", "ensure_write_stream",
    "unlink", "stat", "lstat", "rename", "readdir", "realpath", "chmod", "access",
]


async def _run(func, *args, **kwargs):
    return await asyncio.to_thread(func, *args, **kwargs)


# ---------------------------------------------------------------------------
# Single-path operations
# ---------------------------------------------------------------------------

def exists(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[bool]:
    """Resolve to True if *path* exists.

    "Not found" resolves to False; any other error is raised.
    """
    require(path)
    return with_callback(_run(_io.exists, path), callback)


def mkdirs(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[None]:
    """Create *path* and every missing ancestor; an existing directory is fine."""
    require(path)
    return with_callback(_run(os.makedirs, path, exist_ok=True), callback)


def write_file(
    path: str | None = None, data=None, *,
    encoding: str | None = "utf-8", callback: Callback | None = None,
) -> Awaitable[None]:
    """Write *data* (``str`` or ``bytes``) to *path*, creating ancestors first."""
    require(path)
    return with_callback(_run(_io.write_file, path, data, encoding=encoding), callback)


def append_file(
    path: str | None = None, data=None, *,
    encoding: str | None = "utf-8", callback: Callback | None = None,
) -> Awaitable[None]:
    """Append *data* to *path*, creating ancestors first."""
    require(path)
    return with_callback(
        _run(_io.write_file, path, data, encoding=encoding, append=True), callback,
    )


def copy_file(
    src: str | None = None, dest: str | None = None, *,
    callback: Callback | None = None,
) -> Awaitable[None]:
    """Copy the bytes of *src* to *dest*, creating *dest*'s ancestors first."""
    require(src, "src")
    require(dest, "dest")
    return with_callback(_run(_io.copy_file, src, dest), callback)


def read_file(
    path: str | None = None, *,
    encoding: str | None = "utf-8", escape: bool = True,
    callback: Callback | None = None,
) -> Awaitable[str | bytes]:
    """Read *path* as text with BOM stripped and CRLF folded to LF.

    ``escape=False`` returns the decoded text untouched;
    ``encoding=None`` returns raw bytes.
    """
    require(path)
    return with_callback(
        _run(_io.read_file, path, encoding=encoding, escape=escape), callback,
    )


def ensure_path(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[str]:
    """Resolve to *path* if it is free, else the next unused ``name-N.ext``."""
    require(path)
    return with_callback(_run(_io.ensure_path, path), callback)


def ensure_write_stream(
    path: str | None = None, *,
    mode: str = "w", encoding: str | None = None,
    callback: Callback | None = None,
) -> Awaitable:
    """Create *path*'s ancestors and resolve to a file object open for writing."""
    require(path)
    return with_callback(
        _run(_io.open_write_stream, path, mode=mode, encoding=encoding), callback,
    )


# ---------------------------------------------------------------------------
# Tree operations
# ---------------------------------------------------------------------------

def copy_dir(
    src: str | None = None, dest: str | None = None,
    config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
    callback: Callback | None = None,
) -> Awaitable[list[str]]:
    """Copy the files of *src* kept by the filter into *dest*.

    Resolves to the relative paths copied.
    """
    require(src, "src")
    require(dest, "dest")
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return with_callback(copy_tree(src, dest, config), callback)


def list_dir(
    path: str | None = None, config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
    callback: Callback | None = None,
) -> Awaitable[list[str]]:
    """Resolve to the relative paths of every kept file under *path*."""
    require(path)
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return with_callback(list_tree(path, config), callback)


def empty_dir(
    path: str | None = None, config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
    callback: Callback | None = None,
) -> Awaitable[list[str]]:
    """Delete every kept file under *path* and prune emptied directories.

    *path* itself is never removed.  Resolves to the relative paths deleted.
    """
    require(path)
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return with_callback(empty_tree(path, config), callback)


def rmdir(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[None]:
    """Remove *path* and everything below it, with no filtering."""
    require(path)
    return with_callback(remove_tree(path), callback)


# ---------------------------------------------------------------------------
# Passthroughs
# ---------------------------------------------------------------------------

def unlink(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[None]:
    require(path)
    return with_callback(_run(os.unlink, path), callback)


def stat(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[os.stat_result]:
    require(path)
    return with_callback(_run(os.stat, path), callback)


def lstat(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[os.stat_result]:
    require(path)
    return with_callback(_run(os.lstat, path), callback)


def rename(
    src: str | None = None, dest: str | None = None, *,
    callback: Callback | None = None,
) -> Awaitable[None]:
    require(src, "src")
    require(dest, "dest")
    return with_callback(_run(os.rename, src, dest), callback)


def readdir(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[list[str]]:
    """Raw entry names of *path*, unfiltered and in OS order."""
    require(path)
    return with_callback(_run(os.listdir, path), callback)


def realpath(path: str | None = None, *, callback: Callback | None = None) -> Awaitable[str]:
    require(path)
    return with_callback(_run(os.path.realpath, path, strict=True), callback)


def chmod(path: str | None = None, mode: int = 0o644, *, callback: Callback | None = None) -> Awaitable[None]:
    require(path)
    return with_callback(_run(os.chmod, path, mode), callback)


def access(path: str | None = None, mode: int = os.F_OK, *, callback: Callback | None = None) -> Awaitable[bool]:
    require(path)
    return with_callback(_run(os.access, path, mode), callback)
