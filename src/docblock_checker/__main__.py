"""CLI entry-point for docblock_checker.

Usage:
    python -m docblock_checker -d <dir> [-x vendor,tests/fixtures] [--json]
    python -m docblock_checker [-d <dir>] <file.php> [<file.php> ...]
    python -m docblock_checker -d <dir> --skip-classes --skip-anonymous-functions
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from docblock_checker import __version__
from docblock_checker.api import scan_project
from docblock_checker.contracts.load import validate_instance
from docblock_checker.core.config import ScanConfig
from docblock_checker.model.run_result import ScanRun
from docblock_checker.utils.exit_codes import ExitCode
from docblock_checker.utils.json_norm import stable_json_dumps


def _print_log(run: ScanRun) -> None:
    """Print one line per missing docblock and ``<Class> OK`` for clean classes."""
    for report in run.files:
        lines = [(f.line, f.message) for f in report.findings]
        lines += [(c.line, f"{c.name} OK") for c in report.classes if c.clean]
        for _, text in sorted(lines, key=lambda item: item[0]):
            print(text)


def _build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="docblock-checker",
        description="Check PHP files within a directory for appropriate use of Docblocks.",
    )
    p.add_argument(
        "files",
        nargs="*",
        default=[],
        help="Files to scan (relative to --directory when given).",
    )
    p.add_argument(
        "-d",
        "--directory",
        type=Path,
        default=None,
        help="Directory to scan.",
    )
    p.add_argument(
        "-x",
        "--exclude",
        default=None,
        help="Comma-separated files and directories to exclude.",
    )
    p.add_argument(
        "--skip-classes",
        action="store_true",
        default=False,
        help="Don't check classes for docblocks.",
    )
    p.add_argument(
        "--skip-methods",
        action="store_true",
        default=False,
        help="Don't check methods (or anonymous functions) for docblocks.",
    )
    p.add_argument(
        "--skip-anonymous-functions",
        action="store_true",
        default=False,
        help="Don't check anonymous functions for docblocks.",
    )
    p.add_argument(
        "-j",
        "--json",
        dest="json_out",
        action="store_true",
        default=False,
        help="Output JSON instead of a log.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        default=False,
        help="Log every scanned file to stderr.",
    )
    p.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return p


def main(argv: list[str] | None = None) -> int:
    """Entry-point — returns an exit code (0 = clean, 1 = violations, 2 = error)."""
    args = _build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    if args.directory is None and not args.files:
        print("error: nothing to scan; pass --directory and/or files", file=sys.stderr)
        return ExitCode.ERROR

    exclude = args.exclude.split(",") if args.exclude else []
    config = ScanConfig(
        skip_classes=args.skip_classes,
        skip_methods=args.skip_methods,
        skip_anonymous_functions=args.skip_anonymous_functions,
    )

    try:
        run = scan_project(args.directory, args.files, exclude=exclude, config=config)
    except FileNotFoundError as e:
        print(f"error: {e}", file=sys.stderr)
        return ExitCode.ERROR

    if args.json_out:
        report = run.report()
        validate_instance(report, "report.schema.json")
        sys.stdout.write(stable_json_dumps(report))
    else:
        _print_log(run)

    return run.exit_code()


if __name__ == "__main__":
    raise SystemExit(main())
