"""Recursive traversal shared by list, copy and empty.

One generic walker per execution model: :func:`walk` fans out over the
entries of each directory as tasks, cancelling the siblings on the first
failure, and offloads every storage call to a worker thread;
:func:`walk_sync` is the plain recursive mirror.  Both take a *leaf* action
run on every kept file and an optional *post_dir* action run on every kept
directory once its subtree is done.

Results are built from return values, so a traversal either returns its
full list or raises; there is no shared accumulator to leave half-filled.
"""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Awaitable, Callable

from . import _io
from ._filter import FilterConfig
from ._listing import list_entries, list_entries_sync, scan_dir, scan_dir_async

logger = logging.getLogger(__name__)

LeafAction = Callable[[str, str], Awaitable[str]]
PostDirAction = Callable[[str, str, list[str]], Awaitable[None]]
LeafActionSync = Callable[[str, str], str]
PostDirActionSync = Callable[[str, str, list[str]], None]


# ---------------------------------------------------------------------------
# Fan-out
# ---------------------------------------------------------------------------

async def _fan_out(aws) -> list:
    """Run *aws* concurrently and return their results in order.

    The first failure cancels every sibling still running and is re-raised
    once they have all settled, so nothing keeps touching the tree after the
    caller sees the error.
    """
    tasks = [asyncio.ensure_future(aw) for aw in aws]
    if not tasks:
        return []
    try:
        await asyncio.wait(tasks, return_when=asyncio.FIRST_EXCEPTION)
    except BaseException:
        await _cancel_all(tasks)
        raise
    if not all(t.done() for t in tasks):
        await _cancel_all(tasks)
    errors = [t.exception() for t in tasks if t.done() and not t.cancelled() and t.exception()]
    if errors:
        raise errors[0]
    return [t.result() for t in tasks]


async def _cancel_all(tasks) -> None:
    for t in tasks:
        t.cancel()
    await asyncio.gather(*tasks, return_exceptions=True)


# ---------------------------------------------------------------------------
# Generic walkers
# ---------------------------------------------------------------------------

async def walk(
    path: str,
    config: FilterConfig,
    leaf: LeafAction,
    post_dir: PostDirAction | None = None,
    rel_dir: str = "",
) -> list[str]:
    """Walk *path* and return the leaf results in depth-first name order.

    *rel_dir* is the path of *path* relative to the traversal root; the root
    itself is never filtered.
    """
    entries = await list_entries(path, rel_dir, config)

    async def visit(name: str, is_dir: bool) -> list[str]:
        child = os.path.join(path, name)
        rel = os.path.join(rel_dir, name)
        if is_dir:
            found = await walk(child, config, leaf, post_dir, rel)
            if post_dir is not None:
                await post_dir(child, rel, found)
            return found
        return [await leaf(child, rel)]

    nested = await _fan_out(visit(e.name, e.is_dir) for e in entries)
    return [rel for group in nested for rel in group]


def walk_sync(
    path: str,
    config: FilterConfig,
    leaf: LeafActionSync,
    post_dir: PostDirActionSync | None = None,
    rel_dir: str = "",
) -> list[str]:
    """Blocking mirror of :func:`walk`."""
    results: list[str] = []
    for entry in list_entries_sync(path, rel_dir, config):
        child = os.path.join(path, entry.name)
        rel = os.path.join(rel_dir, entry.name)
        if entry.is_dir:
            found = walk_sync(child, config, leaf, post_dir, rel)
            if post_dir is not None:
                post_dir(child, rel, found)
            results.extend(found)
        else:
            results.append(leaf(child, rel))
    return results


# ---------------------------------------------------------------------------
# list
# ---------------------------------------------------------------------------

async def _collect(_path: str, rel: str) -> str:
    return rel


def _collect_sync(_path: str, rel: str) -> str:
    return rel


async def list_tree(path: str, config: FilterConfig) -> list[str]:
    return await walk(path, config, _collect)


def list_tree_sync(path: str, config: FilterConfig) -> list[str]:
    return walk_sync(path, config, _collect_sync)


# ---------------------------------------------------------------------------
# copy
# ---------------------------------------------------------------------------

async def copy_tree(src: str, dest: str, config: FilterConfig) -> list[str]:
    """Mirror the kept files of *src* under *dest*."""

    async def copy_leaf(child: str, rel: str) -> str:
        await asyncio.to_thread(_io.copy_file, child, os.path.join(dest, rel))
        return rel

    await asyncio.to_thread(_io.ensure_parent, dest)
    copied = await walk(src, config, copy_leaf)
    logger.debug("copied %d file(s) from %s to %s", len(copied), src, dest)
    return copied


def copy_tree_sync(src: str, dest: str, config: FilterConfig) -> list[str]:
    def copy_leaf(child: str, rel: str) -> str:
        _io.copy_file(child, os.path.join(dest, rel))
        return rel

    _io.ensure_parent(dest)
    copied = walk_sync(src, config, copy_leaf)
    logger.debug("copied %d file(s) from %s to %s", len(copied), src, dest)
    return copied


# ---------------------------------------------------------------------------
# empty
# ---------------------------------------------------------------------------
# Files are deleted through the filtered view, but a directory is only
# removed when an *unfiltered* scan finds it empty.  Directories that still
# hold hidden, pattern-matched or excluded entries therefore survive.

async def _unlink_leaf(child: str, rel: str) -> str:
    await asyncio.to_thread(os.unlink, child)
    return rel


async def _prune_if_empty(child: str, rel: str, _found: list[str]) -> None:
    if not await scan_dir_async(child):
        await asyncio.to_thread(os.rmdir, child)
        logger.debug("pruned empty directory %s", rel)


def _unlink_leaf_sync(child: str, rel: str) -> str:
    os.unlink(child)
    return rel


def _prune_if_empty_sync(child: str, rel: str, _found: list[str]) -> None:
    if not scan_dir(child):
        os.rmdir(child)
        logger.debug("pruned empty directory %s", rel)


async def empty_tree(path: str, config: FilterConfig) -> list[str]:
    deleted = await walk(path, config, _unlink_leaf, _prune_if_empty)
    logger.debug("emptied %s: %d file(s) deleted", path, len(deleted))
    return deleted


def empty_tree_sync(path: str, config: FilterConfig) -> list[str]:
    deleted = walk_sync(path, config, _unlink_leaf_sync, _prune_if_empty_sync)
    logger.debug("emptied %s: %d file(s) deleted", path, len(deleted))
    return deleted


# ---------------------------------------------------------------------------
# Unconditional removal
# ---------------------------------------------------------------------------

async def remove_tree(path: str) -> None:
    """Delete *path* and everything under it, children first."""
    entries = await scan_dir_async(path)

    async def remove(name: str, is_dir: bool) -> None:
        child = os.path.join(path, name)
        if is_dir:
            await remove_tree(child)
        else:
            await asyncio.to_thread(os.unlink, child)

    await _fan_out(remove(e.name, e.is_dir) for e in entries)
    await asyncio.to_thread(os.rmdir, path)


def remove_tree_sync(path: str) -> None:
    for entry in scan_dir(path):
        child = os.path.join(path, entry.name)
        if entry.is_dir:
            remove_tree_sync(child)
        else:
            os.unlink(child)
    os.rmdir(path)
