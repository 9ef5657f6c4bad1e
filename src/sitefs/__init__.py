"""sitefs -- filesystem helpers for static site generation.

Recursive list/copy/empty with hidden-file, pattern and exclude filtering,
unconditional tree removal, normalizing reads, collision-free path
allocation and directory watching.  Every operation comes as an awaitable
(``list_dir``) and a blocking mirror (``list_dir_sync``).
"""

import os as _os

from ._content import escape_bom, escape_eol, escape_file_content
from ._filter import FilterConfig
from ._listing import DirEntry
from .exceptions import (
    AlreadyExistsError,
    MissingArgumentError,
    NotFoundError,
    UnderlyingIOError,
)
from .fs import (
    access,
    append_file,
    chmod,
    copy_dir,
    copy_file,
    empty_dir,
    ensure_path,
    ensure_write_stream,
    exists,
    list_dir,
    lstat,
    mkdirs,
    read_file,
    readdir,
    realpath,
    rename,
    rmdir,
    stat,
    unlink,
    write_file,
)
from .fs_sync import (
    access_sync,
    append_file_sync,
    chmod_sync,
    copy_dir_sync,
    copy_file_sync,
    empty_dir_sync,
    ensure_path_sync,
    ensure_write_stream_sync,
    exists_sync,
    list_dir_sync,
    lstat_sync,
    mkdirs_sync,
    read_file_sync,
    readdir_sync,
    realpath_sync,
    rename_sync,
    rmdir_sync,
    stat_sync,
    unlink_sync,
    write_file_sync,
)
from .watcher import Watcher, WatchOptions, watch, watch_sync

F_OK = _os.F_OK
R_OK = _os.R_OK
W_OK = _os.W_OK
X_OK = _os.X_OK

__all__ = [
    "FilterConfig", "DirEntry", "Watcher", "WatchOptions",
    "MissingArgumentError", "NotFoundError", "AlreadyExistsError", "UnderlyingIOError",
    "escape_bom", "escape_eol", "escape_file_content",
    "exists", "mkdirs", "write_file", "append_file", "copy_file", "copy_dir",
    "list_dir", "empty_dir", "rmdir", "read_file", "ensure_path",
    "ensure_write_stream", "watch",
    "exists_sync", "mkdirs_sync", "write_file_sync", "append_file_sync",
    "copy_file_sync", "copy_dir_sync", "list_dir_sync", "empty_dir_sync",
    "rmdir_sync", "read_file_sync", "ensure_path_sync",
    "ensure_write_stream_sync", "watch_sync",
    "unlink", "stat", "lstat", "rename", "readdir", "realpath", "chmod", "access",
    "unlink_sync", "stat_sync", "lstat_sync", "rename_sync", "readdir_sync",
    "realpath_sync", "chmod_sync", "access_sync",
    "F_OK", "R_OK", "W_OK", "X_OK",
]
