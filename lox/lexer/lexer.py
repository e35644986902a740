"""
Lox Lexer - turns source text into tokens

Hand-written single pass scanner. Every call to scan_tokens gets its own
_ScanState, so the Lexer itself holds nothing that changes while scanning.

Errors don't stop the scan: they're raised as LexerError inside the loop,
handed to the reporter, and scanning resumes at the next character.

xwest
"""

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .tokens import (
    Token, TokenType, LiteralValue, KEYWORDS, SINGLE_CHAR_TOKENS,
    EQUAL_SUFFIXED_TOKENS, WHITESPACE
)
from .errors import (
    LexerError, create_unexpected_character_error,
    create_unterminated_string_error
)
from ..diagnostics import ErrorReporter

logger = logging.getLogger(__name__)


def is_digit(char: str) -> bool:
    return "0" <= char <= "9"


def is_alpha(char: str) -> bool:
    return ("a" <= char <= "z") or ("A" <= char <= "Z") or char == "_"


def is_alphanumeric(char: str) -> bool:
    return is_alpha(char) or is_digit(char)


@dataclass
class _ScanState:
    """Cursor state for one scan of one source string."""
    source: str
    start: int = 0      # first character of the lexeme being scanned
    current: int = 0    # next unread character
    line: int = 1
    tokens: List[Token] = field(default_factory=list)

    def is_at_end(self) -> bool:
        return self.current >= len(self.source)

    def advance(self) -> str:
        char = self.source[self.current]
        self.current += 1
        return char

    def match(self, expected: str) -> bool:
        """Consume the next character only if it is ``expected``."""
        if self.is_at_end() or self.source[self.current] != expected:
            return False
        self.current += 1
        return True

    def peek(self) -> str:
        if self.is_at_end():
            return "\0"
        return self.source[self.current]

    def peek_next(self) -> str:
        if self.current + 1 >= len(self.source):
            return "\0"
        return self.source[self.current + 1]

    @property
    def lexeme(self) -> str:
        return self.source[self.start:self.current]

    def add_token(self, token_type: TokenType, literal: Optional[LiteralValue] = None):
        self.tokens.append(Token(token_type, self.lexeme, literal, self.line))


class Lexer:
    """
    Lox lexical analyzer.

    Converts source code text into a list of tokens terminated by a single
    EOF token. Never raises for bad input; problems go to the reporter.
    """

    def __init__(self, source: str, reporter: Optional[ErrorReporter] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            reporter: Sink for lexical errors (a private one if omitted)
        """
        self.source = source
        self.reporter = reporter if reporter is not None else ErrorReporter()

    def scan_tokens(self) -> List[Token]:
        """
        Scan the entire source.

        Returns:
            List of tokens ending with exactly one EOF token
        """
        state = _ScanState(self.source)
        error_count = 0

        while not state.is_at_end():
            # Beginning of the next lexeme
            state.start = state.current
            try:
                self._scan_token(state)
            except LexerError as e:
                error_count += 1
                self.reporter.error(e.line, e.message, e.diagnostic)

        state.tokens.append(Token(TokenType.EOF, "", None, state.line))
        logger.debug("scanned %d tokens over %d lines (%d errors)",
                     len(state.tokens), state.line, error_count)
        return state.tokens

    def _scan_token(self, state: _ScanState):
        char = state.advance()

        if char in SINGLE_CHAR_TOKENS:
            state.add_token(SINGLE_CHAR_TOKENS[char])
        elif char in EQUAL_SUFFIXED_TOKENS:
            simple, compound = EQUAL_SUFFIXED_TOKENS[char]
            state.add_token(compound if state.match("=") else simple)
        elif char == "/":
            if state.match("/"):
                # Comment runs to end of line; the newline itself is left for
                # the main loop so the line count stays right
                while state.peek() != "\n" and not state.is_at_end():
                    state.advance()
            else:
                state.add_token(TokenType.SLASH)
        elif char in WHITESPACE:
            pass
        elif char == "\n":
            state.line += 1
        elif char == '"':
            self._string(state)
        elif is_digit(char):
            self._number(state)
        elif is_alpha(char):
            self._identifier(state)
        else:
            raise create_unexpected_character_error(char, state.line)

    def _string(self, state: _ScanState):
        """Scan a string literal; multi-line strings are allowed."""
        while state.peek() != '"' and not state.is_at_end():
            if state.peek() == "\n":
                state.line += 1
            state.advance()

        if state.is_at_end():
            raise create_unterminated_string_error(state.line)

        state.advance()  # closing quote

        # Trim the surrounding quotes, no escape processing
        value = state.source[state.start + 1:state.current - 1]
        state.add_token(TokenType.STRING, value)

    def _number(self, state: _ScanState):
        while is_digit(state.peek()):
            state.advance()

        # A '.' only belongs to the number if a digit follows it, so "1." is
        # NUMBER then DOT
        if state.peek() == "." and is_digit(state.peek_next()):
            state.advance()
            while is_digit(state.peek()):
                state.advance()

        state.add_token(TokenType.NUMBER, float(state.lexeme))

    def _identifier(self, state: _ScanState):
        while is_alphanumeric(state.peek()):
            state.advance()

        token_type = KEYWORDS.get(state.lexeme, TokenType.IDENTIFIER)
        state.add_token(token_type)


def scan_tokens(source: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source string.

    Args:
        source: Source code string
        reporter: Sink for lexical errors

    Returns:
        List of tokens
    """
    return Lexer(source, reporter).scan_tokens()


def tokenize_file(filepath: str, reporter: Optional[ErrorReporter] = None) -> List[Token]:
    """
    Convenience function to scan a source file.

    Args:
        filepath: Path to source file
        reporter: Sink for lexical errors

    Returns:
        List of tokens

    Raises:
        IOError: If file cannot be read
    """
    with open(filepath, "r", encoding="utf-8") as f:
        source = f.read()

    return scan_tokens(source, reporter)
