"""
Lox Interpreter Package

Tree-walking evaluation of expression trees over the dynamic value domain
(nil, boolean, number, string).

Key Features:
- Strict left-to-right operand evaluation
- Type-checked arithmetic and comparison, '+' overloaded for strings
- Type-strict equality and Ruby-style truthiness
- Runtime errors carry the operator token and are reported, not fatal

Author: xwest
"""

from .interpreter import Interpreter
from .errors import LoxRuntimeError
from .values import is_equal, is_truthy, stringify

__all__ = [
    "Interpreter",
    "LoxRuntimeError",
    "is_equal",
    "is_truthy",
    "stringify",
]
