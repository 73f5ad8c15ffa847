"""Scan configuration dataclass."""

from __future__ import annotations

from dataclasses import dataclass

from docblock_checker.model import DeclarationKind


@dataclass(frozen=True)
class ScanConfig:
    """Immutable scan configuration, fixed for the duration of a scan.

    ``skip_methods`` also silences anonymous functions: closures are a
    function-level check, gated by the method check.
    """

    skip_classes: bool = False
    skip_methods: bool = False
    skip_anonymous_functions: bool = False

    def checks(self, kind: DeclarationKind) -> bool:
        """Return True when declarations of *kind* must carry a docblock."""
        if kind is DeclarationKind.CLASS:
            return not self.skip_classes
        if kind is DeclarationKind.METHOD:
            return not self.skip_methods
        return not (self.skip_methods or self.skip_anonymous_functions)
