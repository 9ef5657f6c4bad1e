"""Entry filtering shared by list, copy and empty traversals.

Hidden and pattern rules look at the entry *name*; the exclude rule looks
at the entry's path relative to the traversal root.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass, field, replace
from typing import Iterable

__all__ = ["FilterConfig", "should_include", "resolve_filter"]


def _compile(pattern) -> re.Pattern | None:
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern)


def _normalize_exclude(paths: Iterable[str] | None) -> frozenset[str]:
    if not paths:
        return frozenset()
    if isinstance(paths, str):
        paths = [paths]
    return frozenset(os.path.normpath(p) for p in paths)


@dataclass(frozen=True, slots=True)
class FilterConfig:
    """Which directory entries a traversal keeps.

    Attributes:
        ignore_hidden: Skip entries whose name starts with ``.``.
        ignore_pattern: Skip entries whose name matches (``re.search``).
            A string is compiled on construction.
        exclude: Relative paths (from the traversal root) to skip.
    """

    ignore_hidden: bool = True
    ignore_pattern: re.Pattern | None = None
    exclude: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "ignore_pattern", _compile(self.ignore_pattern))
        object.__setattr__(self, "exclude", _normalize_exclude(self.exclude))


def should_include(name: str, rel_path: str, config: FilterConfig) -> bool:
    """Return True if the entry *name* at *rel_path* passes every rule."""
    if config.ignore_hidden and name.startswith("."):
        return False
    if config.ignore_pattern is not None and config.ignore_pattern.search(name):
        return False
    if config.exclude and rel_path in config.exclude:
        return False
    return True


def resolve_filter(config: FilterConfig | None = None, **overrides) -> FilterConfig:
    """Build a :class:`FilterConfig` from an optional base plus keyword overrides.

    ``None`` overrides are ignored so callers can forward optional CLI or
    keyword values without checking them first.
    """
    overrides = {k: v for k, v in overrides.items() if v is not None}
    unknown = set(overrides) - {"ignore_hidden", "ignore_pattern", "exclude"}
    if unknown:
        raise TypeError(f"Unknown filter option(s): {', '.join(sorted(unknown))}")
    if config is None:
        return FilterConfig(**overrides)
    if overrides:
        return replace(config, **overrides)
    return config
