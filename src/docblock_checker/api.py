"""
docblock_checker.api
====================

Programmatic entrypoints for using the checker as a library.

Goals:
  - No argparse / CLI dependencies
  - Each call returns its own results; nothing accumulates in module state
  - Deterministic ordering (directory walk sorted, explicit files in order)

Usage::

    from docblock_checker.api import scan_project, scan_source

    run = scan_project("src", exclude=["vendor"])
    report = scan_source("<?php class A {}", "a.php")
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, Optional, Union

from docblock_checker.core.config import ScanConfig
from docblock_checker.core.discover import discover_php_files
from docblock_checker.core.runner import check_source, run_scan
from docblock_checker.model.run_result import FileReport, ScanRun


def _to_path(p: str | Path) -> Path:
    return p if isinstance(p, Path) else Path(p)


def scan_source(
    source: Union[str, bytes],
    path: str = "<source>",
    config: Optional[ScanConfig] = None,
) -> FileReport:
    """Scan a single file's content without touching the filesystem."""
    return check_source(source, path, config)


def scan_project(
    directory: str | Path | None = None,
    files: Iterable[str] = (),
    *,
    exclude: Iterable[str] = (),
    config: Optional[ScanConfig] = None,
) -> ScanRun:
    """Scan a directory tree and/or explicit files.

    Parameters
    ----------
    directory:
        Root to walk recursively for ``*.php`` files.  Explicit *files* are
        resolved relative to it; without it they are relative to the
        working directory.
    files:
        Individual files to scan after the directory walk.
    exclude:
        Paths relative to *directory* to leave out of the walk.
    config:
        Skip flags; defaults to checking everything.

    Returns
    -------
    ``ScanRun`` with one ``FileReport`` per scanned file.

    Raises
    ------
    FileNotFoundError
        If *directory* is given but is not a directory.
    """
    run = ScanRun()
    base = Path(".")
    if directory is not None:
        base = _to_path(directory)
        if not base.is_dir():
            raise FileNotFoundError(f"scan_project: directory does not exist: {base}")
        run_scan(base, discover_php_files(base, exclude=exclude), config, run=run)
    run_scan(base, list(files), config, run=run)
    return run
