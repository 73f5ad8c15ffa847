"""Finding — the normalized scanner output for a single missing docblock."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from . import DeclarationKind
from .token import Token

ANONYMOUS_FUNCTION = "anonymous function"
ANONYMOUS_CLASS = "class@anonymous"


@dataclass(frozen=True, slots=True)
class Declaration:
    """A class, method or closure whose docblock is being checked.

    Only lives for the duration of a scan; ``docblock`` is the associated
    doc comment token, or ``None`` when the declaration is undocumented.
    """

    kind: DeclarationKind
    name: str
    line: int
    class_name: Optional[str]
    docblock: Optional[Token] = None

    @property
    def documented(self) -> bool:
        return self.docblock is not None


@dataclass(frozen=True, slots=True)
class Finding:
    """Immutable record of one declaration lacking a docblock.

    ``class_name`` is the enclosing class: the owning class for methods and
    closures, the outer class (usually ``None``) for classes.
    """

    kind: DeclarationKind
    path: str
    class_name: Optional[str]
    name: str
    line: int

    @classmethod
    def from_declaration(cls, decl: Declaration, path: str) -> "Finding":
        return cls(
            kind=decl.kind,
            path=path,
            class_name=decl.class_name,
            name=decl.name,
            line=decl.line,
        )

    @property
    def message(self) -> str:
        if self.kind is DeclarationKind.CLASS:
            what = f"Class {self.name}"
        else:
            what = f"Method {self.class_name}::{self.name}"
        return f"{self.path}: {self.line} - {what} is missing a docblock."

    # ── serialisation ───────────────────────────────────────────────

    def to_dict(self) -> dict:
        """Report record: ``{type, file, class, method?, line}``."""
        if self.kind is DeclarationKind.CLASS:
            return {
                "type": self.kind.report_type,
                "file": self.path,
                "class": self.name,
                "line": self.line,
            }
        return {
            "type": self.kind.report_type,
            "file": self.path,
            "class": self.class_name,
            "method": self.name,
            "line": self.line,
        }


@dataclass(frozen=True, slots=True)
class ClassSummary:
    """Per-class status once its body has been fully scanned."""

    name: str
    line: int
    clean: bool
