"""Collision-free path allocation (``foo.txt`` -> ``foo-1.txt`` -> ...)."""

from __future__ import annotations

import os
import re
from typing import Iterable


def split_name(path: str) -> tuple[str, str]:
    """Return ``(base, ext)`` for the file name of *path*.

    Leading-dot names have no extension (``.bashrc`` -> ``(".bashrc", "")``).
    """
    base, ext = os.path.splitext(os.path.basename(path))
    return base, ext


def find_unused_path(path: str, siblings: Iterable[str]) -> str:
    """Return the next free ``base-N.ext`` next to *path*.

    *siblings* are the names already present in the parent directory.
    Only names of the exact form ``base.ext`` or ``base-N.ext`` count; the
    unsuffixed name is number 0, so the first collision yields ``base-1.ext``.
    """
    base, ext = split_name(path)
    regex = re.compile(rf"^{re.escape(base)}(?:-(\d+))?{re.escape(ext)}$")
    highest = -1
    for name in siblings:
        m = regex.match(name)
        if m is None:
            continue
        num = int(m.group(1)) if m.group(1) else 0
        if num > highest:
            highest = num
    return os.path.join(os.path.dirname(path), f"{base}-{highest + 1}{ext}")
