"""Load and validate JSON instances against the bundled schemas.

Usage::

    from docblock_checker.contracts.load import validate_instance

    validate_instance(run.report(), "report.schema.json")
"""

from __future__ import annotations

import json
from importlib import resources
from pathlib import Path
from typing import Any

import jsonschema

SCHEMA_DIR = "data/schemas"


def _schema_path(name: str) -> Path:
    """Resolve a bundled schema.

    Priority:
    1. ``data/schemas/`` relative to the package root (source checkout)
    2. package data via importlib.resources (wheel / zip installs)
    """
    canonical = Path(__file__).resolve().parents[1] / SCHEMA_DIR / name
    if canonical.exists():
        return canonical
    with resources.as_file(
        resources.files("docblock_checker") / SCHEMA_DIR / name
    ) as p:
        if p.exists():
            return p
    raise FileNotFoundError(f"schema not found: {name}")


def load_schema(name: str) -> dict[str, Any]:
    """Load a JSON schema by filename."""
    return json.loads(_schema_path(name).read_text(encoding="utf-8"))


def validate_instance(instance: Any, schema_name: str) -> None:
    """Validate *instance* against the named schema.

    Raises ``jsonschema.ValidationError`` on failure.
    """
    jsonschema.validate(instance=instance, schema=load_schema(schema_name))
