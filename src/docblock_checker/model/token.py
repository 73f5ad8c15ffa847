"""Token — one lexical unit of a PHP source file."""

from __future__ import annotations

from dataclasses import dataclass

from . import TokenKind

# Comment kinds; only DOC_COMMENT satisfies a docblock requirement.
COMMENT_KINDS = frozenset(
    {TokenKind.DOC_COMMENT, TokenKind.LINE_COMMENT, TokenKind.BLOCK_COMMENT}
)


@dataclass(frozen=True, slots=True)
class Token:
    kind: TokenKind
    text: str
    line: int

    @property
    def lower(self) -> str:
        return self.text.lower()

    @property
    def is_trivia(self) -> bool:
        """Whitespace or any comment."""
        return self.kind is TokenKind.WHITESPACE or self.kind in COMMENT_KINDS

    @property
    def end_line(self) -> int:
        return self.line + self.text.count("\n")
