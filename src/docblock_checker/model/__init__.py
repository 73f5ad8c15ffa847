"""Enums shared across the tokenizer, scanner and report layers."""

from __future__ import annotations

from enum import Enum


class TokenKind(str, Enum):
    """Lexical categories the declaration scanner cares about."""

    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    OPEN_BRACE = "open_brace"
    CLOSE_BRACE = "close_brace"
    DOC_COMMENT = "doc_comment"
    LINE_COMMENT = "line_comment"
    BLOCK_COMMENT = "block_comment"
    WHITESPACE = "whitespace"
    OTHER = "other"


class DeclarationKind(str, Enum):
    """What kind of construct a docblock is expected on."""

    CLASS = "class"
    METHOD = "method"
    ANONYMOUS_FUNCTION = "anonymous_function"

    @property
    def report_type(self) -> str:
        """Value of the ``type`` field in a report record."""
        return "class" if self is DeclarationKind.CLASS else "method"
