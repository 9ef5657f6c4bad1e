"""Single-directory listing: one scan, optional filtering, no recursion."""

from __future__ import annotations

import asyncio
import os
from dataclasses import dataclass

from ._filter import FilterConfig, should_include


@dataclass(frozen=True, slots=True)
class DirEntry:
    """One immediate child of a directory.

    Attributes:
        name: Entry name (no directory part).
        is_dir: True for directories. Symlinks are never directories here.
    """

    name: str
    is_dir: bool


def scan_dir(path: str) -> list[DirEntry]:
    """Return every entry of *path*, sorted by name.

    Raises ``FileNotFoundError``, ``NotADirectoryError`` or
    ``PermissionError`` straight from the OS.  A failure to read an entry's
    type is raised too, never skipped.
    """
    with os.scandir(path) as it:
        entries = [DirEntry(e.name, e.is_dir(follow_symlinks=False)) for e in it]
    entries.sort(key=lambda e: e.name)
    return entries


def filter_entries(
    entries: list[DirEntry], rel_dir: str, config: FilterConfig,
) -> list[DirEntry]:
    """Keep the entries of the directory at *rel_dir* that pass *config*."""
    return [
        e for e in entries
        if should_include(e.name, os.path.join(rel_dir, e.name), config)
    ]


def list_entries_sync(path: str, rel_dir: str, config: FilterConfig) -> list[DirEntry]:
    return filter_entries(scan_dir(path), rel_dir, config)


async def list_entries(path: str, rel_dir: str, config: FilterConfig) -> list[DirEntry]:
    entries = await asyncio.to_thread(scan_dir, path)
    return filter_entries(entries, rel_dir, config)


async def scan_dir_async(path: str) -> list[DirEntry]:
    """Unfiltered listing on a worker thread."""
    return await asyncio.to_thread(scan_dir, path)
