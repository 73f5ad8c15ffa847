"""Runner — scans files one at a time and collects per-file reports."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, Union

from docblock_checker.analyzers.docblocks import DeclarationScanner
from docblock_checker.core.config import ScanConfig
from docblock_checker.core.tokenizer import ParseError, tokenize
from docblock_checker.model.run_result import FileReport, ScanRun

_logger = logging.getLogger(__name__)


def check_source(
    source: Union[str, bytes],
    path: str,
    config: ScanConfig | None = None,
) -> FileReport:
    """Scan one file's content.

    A ``ParseError`` is recovered here: the file is reported with its error
    and no findings, so partial results never leak out.
    """
    if isinstance(source, bytes):
        source = source.decode("utf-8", errors="replace")
    try:
        outcome = DeclarationScanner(config).scan(tokenize(source), path)
    except ParseError as exc:
        _logger.warning("Skipping %s: %s", path, exc)
        return FileReport(path=path, error=str(exc))
    return FileReport(
        path=path,
        findings=tuple(outcome.findings),
        classes=tuple(outcome.classes),
    )


def check_file(base: Path, rel_path: str, config: ScanConfig | None = None) -> FileReport:
    """Read ``base / rel_path`` and scan it; read failures become file errors."""
    _logger.debug("Scanning %s", rel_path)
    try:
        source = (base / rel_path).read_bytes()
    except OSError as exc:
        _logger.warning("Skipping %s: %s", rel_path, exc)
        return FileReport(path=rel_path, error=str(exc))
    return check_source(source, rel_path, config)


def run_scan(
    base: Path,
    rel_paths: Iterable[str],
    config: ScanConfig | None = None,
    *,
    run: ScanRun | None = None,
) -> ScanRun:
    """Scan every path in order, appending to *run* (a new one by default).

    One file failing never stops the batch.
    """
    run = run if run is not None else ScanRun()
    for rel_path in rel_paths:
        run.add(check_file(base, rel_path, config))
    return run
