"""
Test suite for the Lox lexer.

Tests cover:
- Punctuation and maximal-munch operators
- Comments, whitespace and line counting
- String, number and identifier/keyword literals
- Error recovery and reporting

Author: xwest
"""

import os
import tempfile
import unittest
from typing import List

from lox.diagnostics import ErrorReporter
from lox.lexer import KEYWORDS, Lexer, Token, TokenType, scan_tokens, tokenize_file


class TestLexer(unittest.TestCase):
    """Test cases for the lexer."""

    def setUp(self):
        """Set up test fixtures."""
        self.reporter = ErrorReporter()

    def _scan(self, source: str) -> List[Token]:
        return Lexer(source, self.reporter).scan_tokens()

    def _types(self, source: str) -> List[TokenType]:
        return [token.type for token in self._scan(source)]

    def test_empty_source_yields_only_eof(self):
        tokens = self._scan("")
        self.assertEqual(len(tokens), 1)
        self.assertEqual(tokens[0].type, TokenType.EOF)
        self.assertEqual(tokens[0].lexeme, "")
        self.assertIsNone(tokens[0].literal)
        self.assertEqual(tokens[0].line, 1)

    def test_single_character_tokens(self):
        self.assertEqual(
            self._types("(){},.-+;*"),
            [
                TokenType.LEFT_PAREN, TokenType.RIGHT_PAREN,
                TokenType.LEFT_BRACE, TokenType.RIGHT_BRACE,
                TokenType.COMMA, TokenType.DOT, TokenType.MINUS,
                TokenType.PLUS, TokenType.SEMICOLON, TokenType.STAR,
                TokenType.EOF,
            ],
        )

    def test_two_character_operators(self):
        """Test maximal munch for ! = < > followed by '='."""
        cases = {
            "!=": TokenType.BANG_EQUAL,
            "!": TokenType.BANG,
            "==": TokenType.EQUAL_EQUAL,
            "=": TokenType.EQUAL,
            "<=": TokenType.LESS_EQUAL,
            "<": TokenType.LESS,
            ">=": TokenType.GREATER_EQUAL,
            ">": TokenType.GREATER,
        }
        for source, expected in cases.items():
            with self.subTest(source=source):
                tokens = self._scan(source)
                self.assertEqual([t.type for t in tokens], [expected, TokenType.EOF])
                self.assertEqual(tokens[0].lexeme, source)

    def test_triple_equals_splits(self):
        self.assertEqual(
            self._types("==="),
            [TokenType.EQUAL_EQUAL, TokenType.EQUAL, TokenType.EOF],
        )

    def test_slash_and_comment(self):
        self.assertEqual(self._types("4 / 2"),
                         [TokenType.NUMBER, TokenType.SLASH, TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(self._types("// nothing here"), [TokenType.EOF])

    def test_comment_then_number_on_next_line(self):
        tokens = self._scan("//comment\n1")
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.EOF])
        self.assertEqual(tokens[0].literal, 1.0)
        self.assertEqual(tokens[0].line, 2)

    def test_whitespace_and_newlines(self):
        tokens = self._scan(" \t\r1\n\n2")
        self.assertEqual(tokens[0].line, 1)
        self.assertEqual(tokens[1].line, 3)
        self.assertEqual(tokens[2].type, TokenType.EOF)
        self.assertEqual(tokens[2].line, 3)

    def test_integer_and_fraction_numbers(self):
        tokens = self._scan("123 1.5 0.25")
        self.assertEqual([t.literal for t in tokens[:-1]], [123.0, 1.5, 0.25])
        self.assertTrue(all(isinstance(t.literal, float) for t in tokens[:-1]))
        self.assertEqual(tokens[1].lexeme, "1.5")

    def test_trailing_dot_is_not_part_of_number(self):
        tokens = self._scan("1.")
        self.assertEqual([t.type for t in tokens], [TokenType.NUMBER, TokenType.DOT, TokenType.EOF])
        self.assertEqual(tokens[0].literal, 1.0)
        self.assertEqual(tokens[0].lexeme, "1")

    def test_method_style_dot_after_number(self):
        self.assertEqual(
            self._types("1.abs"),
            [TokenType.NUMBER, TokenType.DOT, TokenType.IDENTIFIER, TokenType.EOF],
        )

    def test_leading_dot_is_not_a_number(self):
        self.assertEqual(self._types(".5"), [TokenType.DOT, TokenType.NUMBER, TokenType.EOF])

    def test_string_literal(self):
        tokens = self._scan('"hello world"')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].lexeme, '"hello world"')
        self.assertEqual(tokens[0].literal, "hello world")

    def test_empty_string_literal(self):
        tokens = self._scan('""')
        self.assertEqual(tokens[0].type, TokenType.STRING)
        self.assertEqual(tokens[0].literal, "")

    def test_string_has_no_escape_processing(self):
        tokens = self._scan(r'"a\nb"')
        self.assertEqual(tokens[0].literal, "a\\nb")

    def test_multiline_string_counts_lines(self):
        tokens = self._scan('"one\ntwo"\nx')
        self.assertEqual(tokens[0].literal, "one\ntwo")
        self.assertEqual(tokens[0].line, 2)
        self.assertEqual(tokens[1].type, TokenType.IDENTIFIER)
        self.assertEqual(tokens[1].line, 3)

    def test_unterminated_string_is_reported(self):
        tokens = self._scan('"abc')
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])
        self.assertTrue(self.reporter.had_error)
        self.assertEqual(len(self.reporter.diagnostics), 1)
        self.assertEqual(self.reporter.diagnostics[0].code, "L002")
        self.assertEqual(self.reporter.diagnostics[0].message, "Unterminated string.")

    def test_unterminated_multiline_string_reports_last_line(self):
        self._scan('1 "abc\ndef\n')
        self.assertEqual(self.reporter.diagnostics[0].line, 3)

    def test_keywords(self):
        for lexeme, expected in KEYWORDS.items():
            with self.subTest(keyword=lexeme):
                tokens = self._scan(lexeme)
                self.assertEqual(tokens[0].type, expected)
                self.assertIsNone(tokens[0].literal)
                self.assertTrue(tokens[0].is_keyword)
        self.assertEqual(len(KEYWORDS), 16)

    def test_keyword_match_is_exact(self):
        tokens = self._scan("forward For orchid _if nil2")
        self.assertTrue(all(t.type == TokenType.IDENTIFIER for t in tokens[:-1]))
        self.assertEqual([t.lexeme for t in tokens[:-1]],
                         ["forward", "For", "orchid", "_if", "nil2"])

    def test_identifier_has_no_literal(self):
        token = self._scan("snake_case42")[0]
        self.assertEqual(token.type, TokenType.IDENTIFIER)
        self.assertIsNone(token.literal)
        self.assertTrue(token.is_identifier)

    def test_literal_iff_number_or_string(self):
        tokens = self._scan('var x = 1 + "s"; if (x != nil) print x;')
        for token in tokens:
            with self.subTest(token=token):
                self.assertEqual(token.literal is not None, token.is_literal)

    def test_unexpected_character_recovers(self):
        tokens = self._scan("1 @ 2 # 3")
        self.assertEqual([t.literal for t in tokens if t.type == TokenType.NUMBER], [1.0, 2.0, 3.0])
        self.assertEqual(len(self.reporter.diagnostics), 2)
        self.assertTrue(all(d.code == "L001" for d in self.reporter.diagnostics))
        self.assertEqual(self.reporter.diagnostics[0].message, "Unexpected character.")

    def test_unexpected_character_reports_line(self):
        self._scan("1\n\n  $")
        self.assertEqual(self.reporter.diagnostics[0].line, 3)

    def test_non_ascii_letters_are_unexpected(self):
        tokens = self._scan("é")
        self.assertEqual([t.type for t in tokens], [TokenType.EOF])
        self.assertTrue(self.reporter.had_error)

    def test_exactly_one_eof_at_end(self):
        for source in ["", "1 + 2", '"open', "@@@", "// c", "a\nb\n"]:
            with self.subTest(source=source):
                tokens = scan_tokens(source)
                eofs = [t for t in tokens if t.type == TokenType.EOF]
                self.assertEqual(len(eofs), 1)
                self.assertIs(tokens[-1], eofs[0])

    def test_lexer_can_scan_twice(self):
        lexer = Lexer("a\nb", self.reporter)
        first = lexer.scan_tokens()
        second = lexer.scan_tokens()
        self.assertEqual(first, second)
        self.assertIsNot(first, second)
        self.assertEqual(second[-1].line, 2)

    def test_tokens_are_immutable(self):
        token = self._scan("x")[0]
        with self.assertRaises(AttributeError):
            token.lexeme = "y"

    def test_keyword_table_is_read_only(self):
        with self.assertRaises(TypeError):
            KEYWORDS["let"] = TokenType.VAR

    def test_token_str(self):
        self.assertEqual(str(self._scan("1.5")[0]), "NUMBER 1.5 1.5")
        self.assertEqual(str(self._scan("foo")[0]), "IDENTIFIER foo null")

    def test_small_program(self):
        source = 'var greeting = "hi";\nprint greeting + "!"; // shout\n'
        self.assertEqual(
            self._types(source),
            [
                TokenType.VAR, TokenType.IDENTIFIER, TokenType.EQUAL,
                TokenType.STRING, TokenType.SEMICOLON,
                TokenType.PRINT, TokenType.IDENTIFIER, TokenType.PLUS,
                TokenType.STRING, TokenType.SEMICOLON,
                TokenType.EOF,
            ],
        )
        self.assertFalse(self.reporter.had_error)


class TestTokenizeFile(unittest.TestCase):
    """Test the file convenience wrapper."""

    def test_tokenize_file(self):
        with tempfile.NamedTemporaryFile("w", suffix=".lox", delete=False, encoding="utf-8") as f:
            f.write("print 1;\n")
            path = f.name
        try:
            tokens = tokenize_file(path)
        finally:
            os.unlink(path)

        self.assertEqual(
            [t.type for t in tokens],
            [TokenType.PRINT, TokenType.NUMBER, TokenType.SEMICOLON, TokenType.EOF],
        )
        self.assertEqual(tokens[-1].line, 2)


if __name__ == "__main__":
    unittest.main()
