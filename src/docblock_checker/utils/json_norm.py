"""Canonical JSON serialization — single dump path for the JSON report.

Guarantees:
  - Stable key ordering (``sort_keys=True``)
  - Trailing newline at EOF
  - Non-ASCII file and class names written as-is
"""

from __future__ import annotations

import json
from typing import Any


def stable_json_dumps(obj: Any, *, indent: int | None = 2) -> str:
    """Serialize *obj* with sorted keys and a trailing newline."""
    s = json.dumps(
        obj,
        indent=indent,
        sort_keys=True,
        ensure_ascii=False,
    )
    return s + "\n"
