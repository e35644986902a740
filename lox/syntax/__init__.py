"""
Lox Syntax Package

Expression tree node types and a debugging printer. Trees are built by a
parser or directly in code; the interpreter evaluates them.

Author: xwest
"""

from .ast_nodes import Binary, Expr, Grouping, Literal, RuntimeValue, Unary
from .printer import AstPrinter

__all__ = [
    "Expr", "Literal", "Grouping", "Unary", "Binary",
    "RuntimeValue",
    "AstPrinter",
]
