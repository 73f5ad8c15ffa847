"""Analyzers turn token streams into findings.

Available analyzers:
    - DeclarationScanner: classes, methods and closures missing a docblock
"""

from __future__ import annotations

from .docblocks import DeclarationScanner, ScanOutcome

__all__ = ["DeclarationScanner", "ScanOutcome"]
