"""
Lox Package

A from-scratch implementation of the front end and evaluation core of the
Lox scripting language.

Architecture:
    lox/
    ├── lexer/           # Tokenization and lexical analysis
    ├── syntax/          # Expression tree nodes and AST printer
    ├── interpreter/     # Tree-walking evaluation and runtime errors
    ├── diagnostics.py   # Error reporter shared by all stages
    └── cli.py           # `lox` command line driver

Author: xwest
License: MIT
"""

from .__version__ import __version__, __author__, __email__, __license__

# lexer first: diagnostics depends on lexer.errors
from .lexer import Lexer, Token, TokenType, scan_tokens
from .diagnostics import ErrorReporter
from .syntax import AstPrinter
from .interpreter import Interpreter, LoxRuntimeError

__all__ = [
    # Core classes
    "Lexer",
    "Token",
    "TokenType",
    "AstPrinter",
    "Interpreter",
    "ErrorReporter",
    "LoxRuntimeError",
    "scan_tokens",

    # Version info
    "__version__",
    "__author__",
    "__email__",
    "__license__",
]
