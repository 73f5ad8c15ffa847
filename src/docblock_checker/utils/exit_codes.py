"""Centralized exit-code contract for the CLI.

Code  Meaning
----  -------
  0   Success — every checked declaration has a docblock
  1   Violation — at least one missing docblock was reported
  2   Error — usage error, missing directory, or files that could not be scanned
"""

from __future__ import annotations

from enum import IntEnum


class ExitCode(IntEnum):
    SUCCESS = 0
    VIOLATION = 1
    ERROR = 2
