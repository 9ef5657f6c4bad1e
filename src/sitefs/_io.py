"""Blocking file primitives shared by the sync API and the async offloads."""

from __future__ import annotations

import os
import shutil

from ._content import escape_file_content
from ._unused import find_unused_path


def ensure_parent(path: str) -> None:
    """Create every missing ancestor directory of *path*."""
    parent = os.path.dirname(path)
    if parent:
        os.makedirs(parent, exist_ok=True)


def exists(path: str) -> bool:
    """True if *path* exists; only "not found" maps to False."""
    try:
        os.stat(path)
    except FileNotFoundError:
        return False
    return True


def write_file(path: str, data, *, encoding: str | None = "utf-8", append: bool = False) -> None:
    ensure_parent(path)
    if not data:
        data = b"" if isinstance(data, (bytes, bytearray)) else ""
    if isinstance(data, (bytes, bytearray, memoryview)):
        with open(path, "ab" if append else "wb") as f:
            f.write(data)
    else:
        with open(path, "a" if append else "w", encoding=encoding or "utf-8", newline="") as f:
            f.write(str(data))


def copy_file(src: str, dest: str) -> None:
    ensure_parent(dest)
    shutil.copyfile(src, dest)


def read_file(path: str, *, encoding: str | None = "utf-8", escape: bool = True):
    """Read *path*; text is normalized unless *escape* is false.

    ``encoding=None`` returns the raw bytes.
    """
    if encoding is None:
        with open(path, "rb") as f:
            return f.read()
    with open(path, encoding=encoding, newline="") as f:
        content = f.read()
    return escape_file_content(content) if escape else content


def ensure_path(path: str) -> str:
    if not exists(path):
        return path
    return find_unused_path(path, os.listdir(os.path.dirname(path) or "."))


def open_write_stream(path: str, *, mode: str = "w", encoding: str | None = None):
    ensure_parent(path)
    if "b" in mode:
        return open(path, mode)
    return open(path, mode, encoding=encoding or "utf-8")
