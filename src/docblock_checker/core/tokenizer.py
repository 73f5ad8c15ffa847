"""PHP tokenizer — lazy, single-pass lexing with line tracking.

Only the distinctions the declaration scanner needs are made: keywords,
identifiers, braces, the three comment flavours and whitespace.  Everything
else (variables, strings, numbers, operators, inline HTML) is ``OTHER``.
Strings, heredocs and comments are consumed whole so braces inside them
never affect nesting.
"""

from __future__ import annotations

import re
from typing import Iterator

from docblock_checker.model import TokenKind
from docblock_checker.model.token import Token


class ParseError(ValueError):
    """Raised when source text cannot be tokenized."""

    def __init__(self, reason: str, line: int) -> None:
        super().__init__(f"{reason} starting on line {line}")
        self.reason = reason
        self.line = line


# PHP reserved words (matched case-insensitively).
KEYWORDS = frozenset(
    {
        "__halt_compiler", "abstract", "and", "array", "as", "break",
        "callable", "case", "catch", "class", "clone", "const", "continue",
        "declare", "default", "die", "do", "echo", "else", "elseif", "empty",
        "enddeclare", "endfor", "endforeach", "endif", "endswitch",
        "endwhile", "eval", "exit", "extends", "final", "finally", "fn",
        "for", "foreach", "function", "global", "goto", "if", "implements",
        "include", "include_once", "instanceof", "insteadof", "interface",
        "isset", "list", "match", "namespace", "new", "or", "print",
        "private", "protected", "public", "readonly", "require",
        "require_once", "return", "static", "switch", "throw", "trait", "try",
        "unset", "use", "var", "while", "xor", "yield",
    }
)

# A label directly after one of these is a name, never a keyword.
_NAME_CONTEXT = frozenset({"->", "?->", "::", "const"})

_OPEN_TAG = re.compile(r"<\?(?:php(?=\s|\Z)|=)", re.IGNORECASE)
_WHITESPACE = re.compile(r"[ \t\r\n]+")
_LABEL = re.compile(r"[A-Za-z_\x80-\U0010ffff][A-Za-z0-9_\x80-\U0010ffff]*")
_VARIABLE = re.compile(r"\$[A-Za-z_\x80-\U0010ffff][A-Za-z0-9_\x80-\U0010ffff]*")
_NUMBER = re.compile(r"\d[0-9A-Za-z_.]*")
_LINE_COMMENT = re.compile(r"(?://|#)[^\r\n]*?(?=\?>|\r|\n|\Z)")
_QUOTED = {
    "'": re.compile(r"'[^'\\]*(?:\\.[^'\\]*)*'", re.DOTALL),
    '"': re.compile(r'"[^"\\]*(?:\\.[^"\\]*)*"', re.DOTALL),
    "`": re.compile(r"`[^`\\]*(?:\\.[^`\\]*)*`", re.DOTALL),
}
_HEREDOC_START = re.compile(
    r"<<<[ \t]*(?:\"(?P<dq>[A-Za-z_]\w*)\"|'(?P<sq>[A-Za-z_]\w*)'|(?P<bare>[A-Za-z_]\w*))\r?\n"
)
_OPERATORS = ("?->", "->", "::", "#[")


def _heredoc_end(text: str, pos: int, line: int) -> int:
    """Return the offset just past the heredoc/nowdoc starting at *pos*, or -1."""
    m = _HEREDOC_START.match(text, pos)
    if m is None:
        return -1
    label = m.group("dq") or m.group("sq") or m.group("bare")
    closing = re.compile(
        r"^[ \t]*" + re.escape(label) + r"(?![A-Za-z0-9_\x80-\U0010ffff])",
        re.MULTILINE,
    )
    end = closing.search(text, m.end())
    if end is None:
        raise ParseError("unterminated heredoc", line)
    return end.end()


def tokenize(text: str) -> Iterator[Token]:
    """Yield the tokens of *text* in source order.

    Raises ``ParseError`` lazily, when the unterminated construct is reached.
    """
    pos = 0
    line = 1
    length = len(text)
    in_code = False
    prev_significant = ""
    halting = False

    while pos < length:
        if not in_code:
            m = _OPEN_TAG.search(text, pos)
            if m is None:
                yield Token(TokenKind.OTHER, text[pos:], line)
                return
            if m.start() > pos:
                chunk = text[pos:m.start()]
                yield Token(TokenKind.OTHER, chunk, line)
                line += chunk.count("\n")
            yield Token(TokenKind.OTHER, m.group(0), line)
            pos = m.end()
            in_code = True
            continue

        ch = text[pos]
        kind = TokenKind.OTHER
        end = pos + 1

        if ch in " \t\r\n":
            kind = TokenKind.WHITESPACE
            end = _WHITESPACE.match(text, pos).end()
        elif text.startswith("?>", pos):
            end = pos + 2
            in_code = False
        elif text.startswith("/*", pos):
            close = text.find("*/", pos + 2)
            if close == -1:
                raise ParseError("unterminated comment", line)
            end = close + 2
            is_doc = (
                text.startswith("/**", pos)
                and pos + 3 < end
                and text[pos + 3] in " \t\r\n"
            )
            kind = TokenKind.DOC_COMMENT if is_doc else TokenKind.BLOCK_COMMENT
        elif text.startswith("//", pos) or (ch == "#" and not text.startswith("#[", pos)):
            kind = TokenKind.LINE_COMMENT
            end = _LINE_COMMENT.match(text, pos).end()
        elif ch in _QUOTED:
            m = _QUOTED[ch].match(text, pos)
            if m is None:
                raise ParseError("unterminated string", line)
            end = m.end()
        elif text.startswith("<<<", pos) and _HEREDOC_START.match(text, pos):
            end = _heredoc_end(text, pos, line)
        elif ch == "{":
            kind = TokenKind.OPEN_BRACE
        elif ch == "}":
            kind = TokenKind.CLOSE_BRACE
        elif ch == "$":
            m = _VARIABLE.match(text, pos)
            if m is not None:
                end = m.end()
        elif _LABEL.match(text, pos):
            end = _LABEL.match(text, pos).end()
            word = text[pos:end].lower()
            if word in KEYWORDS and prev_significant.lower() not in _NAME_CONTEXT:
                kind = TokenKind.KEYWORD
                halting = halting or word == "__halt_compiler"
            else:
                kind = TokenKind.IDENTIFIER
        elif ch.isdigit():
            end = _NUMBER.match(text, pos).end()
        else:
            for op in _OPERATORS:
                if text.startswith(op, pos):
                    end = pos + len(op)
                    break

        token = Token(kind, text[pos:end], line)
        yield token
        line += token.text.count("\n")
        pos = end
        if not token.is_trivia:
            prev_significant = token.text

        # Everything after ``__halt_compiler();`` is raw data.
        if halting and token.text == ";" and pos < length:
            yield Token(TokenKind.OTHER, text[pos:], line)
            return
