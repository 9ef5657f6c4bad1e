"""Blocking mirrors of :mod:`sitefs.fs`.

Same names with a ``_sync`` suffix, same argument checks, same error kinds.
Tree operations use their own recursive walkers rather than driving the
async ones to completion.
"""

from __future__ import annotations

import os

from . import _io
from ._filter import FilterConfig, resolve_filter
from ._walk import copy_tree_sync, empty_tree_sync, list_tree_sync, remove_tree_sync
from .exceptions import require

__all__ = [
    "exists_sync", "mkdirs_sync", "write_file_sync", "append_file_sync",
    "copy_file_sync", "copy_dir_sync", "list_dir_sync", "empty_dir_sync",
    "rmdir_sync", "read_file_sync", "ensure_path_sync", "ensure_write_stream_sync",
    "unlink_sync", "stat_sync", "lstat_sync", "rename_sync", "readdir_sync",
    "realpath_sync", "chmod_sync", "access_sync",
]


def exists_sync(path: str | None = None) -> bool:
    require(path)
    return _io.exists(path)


def mkdirs_sync(path: str | None = None) -> None:
    require(path)
    os.makedirs(path, exist_ok=True)


def write_file_sync(path: str | None = None, data=None, *, encoding: str | None = "utf-8") -> None:
    require(path)
    _io.write_file(path, data, encoding=encoding)


def append_file_sync(path: str | None = None, data=None, *, encoding: str | None = "utf-8") -> None:
    require(path)
    _io.write_file(path, data, encoding=encoding, append=True)


def copy_file_sync(src: str | None = None, dest: str | None = None) -> None:
    require(src, "src")
    require(dest, "dest")
    _io.copy_file(src, dest)


def read_file_sync(
    path: str | None = None, *, encoding: str | None = "utf-8", escape: bool = True,
) -> str | bytes:
    require(path)
    return _io.read_file(path, encoding=encoding, escape=escape)


def ensure_path_sync(path: str | None = None) -> str:
    require(path)
    return _io.ensure_path(path)


def ensure_write_stream_sync(path: str | None = None, *, mode: str = "w", encoding: str | None = None):
    require(path)
    return _io.open_write_stream(path, mode=mode, encoding=encoding)


def copy_dir_sync(
    src: str | None = None, dest: str | None = None,
    config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
) -> list[str]:
    require(src, "src")
    require(dest, "dest")
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return copy_tree_sync(src, dest, config)


def list_dir_sync(
    path: str | None = None, config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
) -> list[str]:
    require(path)
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return list_tree_sync(path, config)


def empty_dir_sync(
    path: str | None = None, config: FilterConfig | None = None, *,
    ignore_hidden: bool | None = None, ignore_pattern=None, exclude=None,
) -> list[str]:
    require(path)
    config = resolve_filter(
        config, ignore_hidden=ignore_hidden, ignore_pattern=ignore_pattern, exclude=exclude,
    )
    return empty_tree_sync(path, config)


def rmdir_sync(path: str | None = None) -> None:
    require(path)
    remove_tree_sync(path)


def unlink_sync(path: str | None = None) -> None:
    require(path)
    os.unlink(path)


def stat_sync(path: str | None = None) -> os.stat_result:
    require(path)
    return os.stat(path)


def lstat_sync(path: str | None = None) -> os.stat_result:
    require(path)
    return os.lstat(path)


def rename_sync(src: str | None = None, dest: str | None = None) -> None:
    require(src, "src")
    require(dest, "dest")
    os.rename(src, dest)


def readdir_sync(path: str | None = None) -> list[str]:
    require(path)
    return os.listdir(path)


def realpath_sync(path: str | None = None) -> str:
    require(path)
    return os.path.realpath(path, strict=True)


def chmod_sync(path: str | None = None, mode: int = 0o644) -> None:
    require(path)
    os.chmod(path, mode)


def access_sync(path: str | None = None, mode: int = os.F_OK) -> bool:
    require(path)
    return os.access(path, mode)
