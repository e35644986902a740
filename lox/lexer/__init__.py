"""
Lox Lexer Package

Implements a from-scratch lexical analyzer (scanner) for the Lox language.

Key Features:
- Maximal munch for the two-character comparison operators
- Line comments, multi-line string literals, double-precision numbers
- Exact, case-sensitive keyword recognition
- Error recovery: bad input is reported and scanning continues
- Line tracking for diagnostics

Author: xwest
"""

from .tokens import Token, TokenType, KEYWORDS
from .lexer import Lexer, scan_tokens, tokenize_file
from .errors import Diagnostic, LexerError

__all__ = [
    "Lexer",
    "Token",
    "TokenType",
    "KEYWORDS",
    "Diagnostic",
    "LexerError",
    "scan_tokens",
    "tokenize_file",
]
