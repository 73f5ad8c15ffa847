"""Tests for the PHP tokenizer."""

from __future__ import annotations

import textwrap

import pytest

from docblock_checker.core.tokenizer import ParseError, tokenize
from docblock_checker.model import TokenKind


def _significant(src: str) -> list[tuple[TokenKind, str, int]]:
    return [
        (t.kind, t.text, t.line)
        for t in tokenize(src)
        if t.kind is not TokenKind.WHITESPACE
    ]


class TestCodeRegions:
    """Inline HTML outside PHP tags is inert."""

    def test_inline_html_is_one_other_token(self):
        src = "<html>\n<p>class Foo {}</p>\n<?php\nclass Bar {}\n"
        tokens = _significant(src)

        assert tokens[0] == (TokenKind.OTHER, "<html>\n<p>class Foo {}</p>\n", 1)
        assert tokens[1] == (TokenKind.OTHER, "<?php", 3)
        assert tokens[2] == (TokenKind.KEYWORD, "class", 4)
        assert tokens[3] == (TokenKind.IDENTIFIER, "Bar", 4)

    def test_close_tag_returns_to_html(self):
        src = "<?php echo 1; ?>\n<div>{</div>\n<?php }"
        kinds = [k for k, _, _ in _significant(src)]

        assert kinds.count(TokenKind.OPEN_BRACE) == 0
        assert kinds.count(TokenKind.CLOSE_BRACE) == 1

    def test_short_echo_tag_opens_code(self):
        tokens = _significant("<?= $name ?>")
        assert tokens[0] == (TokenKind.OTHER, "<?=", 1)
        assert tokens[1] == (TokenKind.OTHER, "$name", 1)

    def test_file_without_open_tag_has_no_code(self):
        tokens = list(tokenize("class A {}\n"))
        assert len(tokens) == 1
        assert tokens[0].kind is TokenKind.OTHER


class TestComments:
    """Doc comments are told apart from ordinary comments."""

    def test_doc_comment(self):
        tokens = _significant("<?php\n/**\n * Doc.\n */\n")
        assert tokens[1][0] is TokenKind.DOC_COMMENT

    def test_block_comment(self):
        tokens = _significant("<?php /* plain */")
        assert tokens[1] == (TokenKind.BLOCK_COMMENT, "/* plain */", 1)

    def test_empty_double_star_comment_is_not_a_docblock(self):
        tokens = _significant("<?php /**/ /***/")
        assert tokens[1][0] is TokenKind.BLOCK_COMMENT
        assert tokens[2][0] is TokenKind.BLOCK_COMMENT

    def test_doc_comment_needs_ascii_whitespace(self):
        tokens = _significant("<?php /**\u00a0x */ /**\tx */")
        assert tokens[1][0] is TokenKind.BLOCK_COMMENT
        assert tokens[2][0] is TokenKind.DOC_COMMENT

    def test_line_comments(self):
        tokens = _significant("<?php\n// slash\n# hash\n")
        assert tokens[1] == (TokenKind.LINE_COMMENT, "// slash", 2)
        assert tokens[2] == (TokenKind.LINE_COMMENT, "# hash", 3)

    def test_line_comment_stops_at_close_tag(self):
        tokens = _significant("<?php // note ?>html")
        assert tokens[1] == (TokenKind.LINE_COMMENT, "// note ", 1)
        assert tokens[2] == (TokenKind.OTHER, "?>", 1)
        assert tokens[3] == (TokenKind.OTHER, "html", 1)

    def test_attribute_is_not_a_comment(self):
        tokens = _significant("<?php #[Route('/')]")
        assert tokens[1] == (TokenKind.OTHER, "#[", 1)


class TestLabels:
    """Keywords, identifiers and variables."""

    def test_keywords_are_case_insensitive(self):
        tokens = _significant("<?php CLASS Foo {}")
        assert tokens[1] == (TokenKind.KEYWORD, "CLASS", 1)

    def test_class_constant_is_an_identifier(self):
        tokens = _significant("<?php Foo::class;")
        assert (TokenKind.IDENTIFIER, "class", 1) in tokens
        assert not any(k is TokenKind.KEYWORD for k, _, _ in tokens)

    def test_member_named_like_keyword_is_an_identifier(self):
        tokens = _significant("<?php $obj->function; $obj?->class;")
        labels = [(k, text) for k, text, _ in tokens if text in ("function", "class")]
        assert labels == [
            (TokenKind.IDENTIFIER, "function"),
            (TokenKind.IDENTIFIER, "class"),
        ]

    def test_constant_named_like_keyword_is_an_identifier(self):
        tokens = _significant("<?php class C { const FUNCTION = 'f'; }")
        assert (TokenKind.IDENTIFIER, "FUNCTION", 1) in tokens

    def test_non_ascii_space_is_part_of_a_label(self):
        tokens = _significant("<?php foo\u00a0bar();")
        assert tokens[1] == (TokenKind.IDENTIFIER, "foo\u00a0bar", 1)

    def test_variables_are_other(self):
        tokens = _significant("<?php $class = 1;")
        assert tokens[1] == (TokenKind.OTHER, "$class", 1)


class TestStrings:
    """Braces inside strings and heredocs never count."""

    @pytest.mark.parametrize(
        "literal",
        ["'{ it\\'s }'", '"{$a} \\" }"', "`ls {}`"],
    )
    def test_quoted_strings_are_single_tokens(self, literal: str):
        tokens = _significant(f"<?php $x = {literal};")
        assert (TokenKind.OTHER, literal, 1) in tokens
        assert not any(k in (TokenKind.OPEN_BRACE, TokenKind.CLOSE_BRACE) for k, _, _ in tokens)

    def test_heredoc_and_line_numbers(self):
        src = "<?php\n$x = <<<EOT\n{ not a brace }\nEOT;\nclass A {}\n"
        tokens = _significant(src)

        heredoc = [t for t in tokens if t[1].startswith("<<<")]
        assert heredoc == [(TokenKind.OTHER, "<<<EOT\n{ not a brace }\nEOT", 2)]
        assert (TokenKind.KEYWORD, "class", 5) in tokens
        assert [k for k, _, _ in tokens].count(TokenKind.OPEN_BRACE) == 1

    def test_nowdoc_with_indented_closing_marker(self):
        src = textwrap.dedent(
            """\
            <?php
            $x = <<<'TXT'
                }
                TXT;
            function f() {}
            """
        )
        tokens = _significant(src)
        assert (TokenKind.KEYWORD, "function", 5) in tokens
        assert [k for k, _, _ in tokens].count(TokenKind.CLOSE_BRACE) == 1


class TestLineNumbers:
    """Newlines inside multi-line tokens are counted."""

    def test_lines_after_multiline_comment_and_string(self):
        src = "<?php\n/*\n\n*/\n$s = 'a\nb';\nclass A {}\n"
        tokens = _significant(src)
        assert (TokenKind.KEYWORD, "class", 7) in tokens

    def test_crlf_line_endings(self):
        src = "<?php\r\n// one\r\n\r\nclass A {}\r\n"
        tokens = _significant(src)
        assert (TokenKind.LINE_COMMENT, "// one", 2) in tokens
        assert (TokenKind.KEYWORD, "class", 4) in tokens


class TestParseErrors:
    """Unterminated constructs raise ParseError with the starting line."""

    def test_unterminated_block_comment(self):
        with pytest.raises(ParseError) as exc:
            list(tokenize("<?php\n\n/* never closed\nclass A {}\n"))
        assert exc.value.line == 3
        assert exc.value.reason == "unterminated comment"

    def test_unterminated_string(self):
        with pytest.raises(ParseError) as exc:
            list(tokenize("<?php\n$x = 'abc"))
        assert exc.value.line == 2
        assert exc.value.reason == "unterminated string"

    def test_unterminated_heredoc(self):
        with pytest.raises(ParseError) as exc:
            list(tokenize("<?php\n$x = <<<EOT\nabc\n"))
        assert exc.value.reason == "unterminated heredoc"

    def test_tokens_are_produced_lazily(self):
        gen = tokenize("<?php class A {} /* open")
        assert next(gen).text == "<?php"
        with pytest.raises(ParseError):
            list(gen)

    def test_halt_compiler_data_is_not_tokenized(self):
        src = "<?php\n__halt_compiler();\n/* binary junk 'unterminated"
        tokens = list(tokenize(src))
        assert tokens[-1].kind is TokenKind.OTHER
        assert tokens[-1].text.endswith("'unterminated")
