"""File discovery — find PHP files respecting the exclude list."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, Iterator

# Version-control metadata is never scanned.
_DEFAULT_IGNORE_DIRS = frozenset({".git", ".hg", ".svn"})


@dataclass(frozen=True)
class DiscoverConfig:
    """Configuration for file discovery.

    ``exclude`` holds paths relative to ``root`` (files or directories);
    an excluded directory prunes its whole subtree.
    """

    root: Path = field(default_factory=lambda: Path("."))
    include_exts: tuple[str, ...] = (".php",)
    exclude: frozenset[str] = frozenset()
    ignore_dirs: frozenset[str] = _DEFAULT_IGNORE_DIRS


def normalize_excludes(entries: Iterable[str]) -> frozenset[str]:
    """Trim entries, drop empties and trailing slashes, use ``/`` separators."""
    cleaned = set()
    for entry in entries:
        entry = entry.strip().replace("\\", "/").rstrip("/")
        if entry.startswith("./"):
            entry = entry[2:]
        if entry:
            cleaned.add(entry)
    return frozenset(cleaned)


def iter_source_files(cfg: DiscoverConfig) -> Iterator[str]:
    """Yield posix paths relative to *cfg.root*, in sorted walk order."""
    root = cfg.root
    if not root.is_dir():
        return
    for dirpath, dirnames, filenames in os.walk(root):
        rel_dir = Path(dirpath).relative_to(root).as_posix()
        prefix = "" if rel_dir == "." else rel_dir + "/"
        dirnames[:] = sorted(
            d
            for d in dirnames
            if d not in cfg.ignore_dirs and prefix + d not in cfg.exclude
        )
        for filename in sorted(filenames):
            rel = prefix + filename
            if rel in cfg.exclude:
                continue
            if os.path.splitext(filename)[1] not in cfg.include_exts:
                continue
            yield rel


def discover_php_files(root: Path, *, exclude: Iterable[str] = ()) -> list[str]:
    """Recursively find ``*.php`` files under *root*.

    Returns relative posix paths, sorted directory by directory so the
    output is deterministic.
    """
    cfg = DiscoverConfig(root=root, exclude=normalize_excludes(exclude))
    return list(iter_source_files(cfg))
