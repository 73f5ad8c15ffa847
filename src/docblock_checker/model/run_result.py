"""FileReport / ScanRun — per-file and per-run scan artifacts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from docblock_checker.model.finding import ClassSummary, Finding
from docblock_checker.utils.exit_codes import ExitCode


@dataclass(frozen=True, slots=True)
class FileReport:
    """Outcome of scanning one file.

    A file that failed to read or tokenize carries ``error`` and contributes
    no findings.
    """

    path: str
    findings: tuple[Finding, ...] = ()
    classes: tuple[ClassSummary, ...] = ()
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


@dataclass(slots=True)
class ScanRun:
    """Ordered file reports of one scan session."""

    files: list[FileReport] = field(default_factory=list)

    def add(self, report: FileReport) -> None:
        self.files.append(report)

    @property
    def findings(self) -> list[Finding]:
        """All findings, grouped by file, in source order within a file."""
        return [f for report in self.files for f in report.findings]

    @property
    def errors(self) -> list[FileReport]:
        return [r for r in self.files if not r.ok]

    def report(self) -> list[dict[str, Any]]:
        """Flat report records, one per finding."""
        return [f.to_dict() for f in self.findings]

    def summary(self) -> dict[str, Any]:
        by_type: dict[str, int] = {}
        for f in self.findings:
            by_type[f.kind.value] = by_type.get(f.kind.value, 0) + 1
        return {
            "files_scanned": len(self.files),
            "files_failed": len(self.errors),
            "findings_total": len(self.findings),
            "by_type": by_type,
            "clean_classes": sum(
                1 for r in self.files for c in r.classes if c.clean
            ),
        }

    def exit_code(self) -> ExitCode:
        """1 when anything is undocumented, else 2 when a file failed."""
        if self.findings:
            return ExitCode.VIOLATION
        if self.errors:
            return ExitCode.ERROR
        return ExitCode.SUCCESS
