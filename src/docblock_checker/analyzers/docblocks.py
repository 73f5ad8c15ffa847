"""Docblocks analyzer — finds classes and methods without a preceding docblock."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, Optional

from docblock_checker.core.config import ScanConfig
from docblock_checker.model import DeclarationKind, TokenKind
from docblock_checker.model.finding import (
    ANONYMOUS_CLASS,
    ANONYMOUS_FUNCTION,
    ClassSummary,
    Declaration,
    Finding,
)
from docblock_checker.model.token import COMMENT_KINDS, Token

# Tokens allowed between a docblock and its declaration keyword.
_MODIFIERS = frozenset(
    {"abstract", "final", "public", "protected", "private", "static", "readonly", "var"}
)
_DECLARATION_KEYWORDS = frozenset({"class", "function"})
_LABEL_KINDS = (TokenKind.IDENTIFIER, TokenKind.KEYWORD)
_BRACES = (TokenKind.OPEN_BRACE, TokenKind.CLOSE_BRACE)


def _attribute_start(history: list[Token], close_index: int) -> Optional[int]:
    """Index of the ``#[`` opening the attribute group closed at *close_index*."""
    depth = 0
    for i in range(close_index, -1, -1):
        text = history[i].text
        if text == "]":
            depth += 1
        elif text in ("[", "#["):
            depth -= 1
            if depth == 0:
                return i if text == "#[" else None
    return None


def _is_anonymous_class(history: list[Token], index: int) -> bool:
    """True when the ``class`` at *index* follows ``new``.

    Modifiers and attribute groups may sit in between, as in
    ``new readonly class`` or ``new #[Attr] class``.
    """
    i = index - 1
    while i >= 0:
        tok = history[i]
        if tok.is_trivia or (tok.kind is TokenKind.KEYWORD and tok.lower in _MODIFIERS):
            i -= 1
            continue
        if tok.text == "]":
            opener = _attribute_start(history, i)
            if opener is not None:
                i = opener - 1
                continue
        return tok.kind is TokenKind.KEYWORD and tok.lower == "new"
    return False


def find_docblock(history: list[Token], index: int) -> Optional[Token]:
    """Return the doc comment documenting the keyword at ``history[index]``.

    Walks backwards over whitespace, modifiers, ``#[...]`` attributes and
    whatever shares the keyword's line.  The first comment reached decides:
    only a doc comment counts.  Any other statement boundary means there is
    no docblock.
    """
    keyword = history[index]
    i = index - 1
    while i >= 0:
        tok = history[i]
        if tok.kind is TokenKind.WHITESPACE:
            i -= 1
            continue
        if tok.kind in COMMENT_KINDS:
            return tok if tok.kind is TokenKind.DOC_COMMENT else None
        if tok.kind in _BRACES or tok.text == ";":
            return None
        if tok.kind is TokenKind.KEYWORD:
            if tok.lower in _DECLARATION_KEYWORDS:
                return None
            if tok.lower in _MODIFIERS:
                i -= 1
                continue
        if tok.text == "]":
            opener = _attribute_start(history, i)
            if opener is not None:
                i = opener - 1
                continue
        if tok.end_line == keyword.line:
            i -= 1
            continue
        return None
    return None


@dataclass
class _ClassScope:
    name: str
    line: int
    anonymous: bool = False
    findings: int = 0


@dataclass
class _Pending:
    """A ``class`` or ``function`` keyword still waiting for its name."""

    keyword: Token
    docblock: Optional[Token]


@dataclass
class ScanOutcome:
    """Findings in source order plus one summary per named class."""

    findings: list[Finding] = field(default_factory=list)
    classes: list[ClassSummary] = field(default_factory=list)


class DeclarationScanner:
    """Single pass over a token stream tracking brace nesting.

    Every ``{`` pushes a frame: the body of a class pushes its class scope,
    any other brace pushes ``None``.  The innermost class scope on the
    stack owns methods and closures declared below it.  Functions outside
    every class body are never checked.
    """

    def __init__(self, config: ScanConfig | None = None):
        self.config = config or ScanConfig()

    def scan(self, tokens: Iterable[Token], path: str) -> ScanOutcome:
        outcome = ScanOutcome()
        history: list[Token] = []
        frames: list[Optional[_ClassScope]] = []
        scopes: list[_ClassScope] = []
        body_owner: Optional[_ClassScope] = None
        pending: Optional[_Pending] = None
        previous: Optional[Token] = None

        for tok in tokens:
            index = len(history)
            history.append(tok)
            if tok.is_trivia:
                continue
            before, previous = previous, tok

            if pending is not None:
                is_label = tok.kind in _LABEL_KINDS
                if pending.keyword.lower == "function":
                    if tok.text == "&":
                        continue
                    pending_function, pending = pending, None
                    if is_label:
                        self._declare_function(
                            outcome, frames, pending_function, tok.text, path
                        )
                        continue
                    # Only ``function (`` is a closure; ``function:`` is a named argument.
                    if tok.text == "(":
                        self._declare_function(
                            outcome, frames, pending_function, ANONYMOUS_FUNCTION, path
                        )
                else:
                    pending_class, pending = pending, None
                    if is_label:
                        body_owner = self._declare_class(
                            outcome, frames, pending_class, tok.text, path
                        )
                        scopes.append(body_owner)
                        continue

            if tok.kind is TokenKind.OPEN_BRACE:
                frames.append(body_owner)
                body_owner = None
            elif tok.kind is TokenKind.CLOSE_BRACE:
                if frames:
                    frames.pop()
            elif tok.kind is TokenKind.KEYWORD:
                word = tok.lower
                after = before.lower if before is not None else ""
                if word == "class":
                    if _is_anonymous_class(history, index):
                        body_owner = _ClassScope(ANONYMOUS_CLASS, tok.line, anonymous=True)
                    else:
                        pending = _Pending(tok, find_docblock(history, index))
                elif word == "function" and after != "use" and _innermost(frames):
                    pending = _Pending(tok, find_docblock(history, index))

        outcome.classes = [
            ClassSummary(name=s.name, line=s.line, clean=s.findings == 0)
            for s in scopes
        ]
        return outcome

    # ── declarations ────────────────────────────────────────────────

    def _declare_class(
        self,
        outcome: ScanOutcome,
        frames: list[Optional[_ClassScope]],
        pending: _Pending,
        name: str,
        path: str,
    ) -> _ClassScope:
        outer = _innermost(frames)
        scope = _ClassScope(name, pending.keyword.line)
        decl = Declaration(
            kind=DeclarationKind.CLASS,
            name=name,
            line=pending.keyword.line,
            class_name=outer.name if outer else None,
            docblock=pending.docblock,
        )
        if self._evaluate(outcome, decl, path):
            scope.findings += 1
        return scope

    def _declare_function(
        self,
        outcome: ScanOutcome,
        frames: list[Optional[_ClassScope]],
        pending: _Pending,
        name: str,
        path: str,
    ) -> None:
        owner = _innermost(frames)
        if owner is None:
            return
        kind = (
            DeclarationKind.ANONYMOUS_FUNCTION
            if name == ANONYMOUS_FUNCTION
            else DeclarationKind.METHOD
        )
        decl = Declaration(
            kind=kind,
            name=name,
            line=pending.keyword.line,
            class_name=owner.name,
            docblock=pending.docblock,
        )
        if self._evaluate(outcome, decl, path):
            owner.findings += 1

    def _evaluate(self, outcome: ScanOutcome, decl: Declaration, path: str) -> bool:
        """Append a finding for *decl* if it is checked and undocumented."""
        if decl.documented or not self.config.checks(decl.kind):
            return False
        outcome.findings.append(Finding.from_declaration(decl, path))
        return True


def _innermost(frames: list[Optional[_ClassScope]]) -> Optional[_ClassScope]:
    for frame in reversed(frames):
        if frame is not None:
            return frame
    return None
