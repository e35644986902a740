"""
Expression tree node definitions for Lox.

A closed set of immutable expression variants. Consumers dispatch on the
concrete class (see ``Interpreter.evaluate`` and ``AstPrinter.print``) rather
than through visitor double dispatch.

Author: xwest
"""

from dataclasses import dataclass
from typing import Union

from ..lexer.tokens import Token

# The dynamic value domain: nil, boolean, double, string
RuntimeValue = Union[None, bool, float, str]


@dataclass(frozen=True)
class Literal:
    """A constant value. Plain ints are stored as floats; Lox numbers are doubles."""
    value: RuntimeValue

    def __post_init__(self):
        if isinstance(self.value, int) and not isinstance(self.value, bool):
            object.__setattr__(self, "value", float(self.value))


@dataclass(frozen=True)
class Grouping:
    """A parenthesised expression."""
    expression: "Expr"


@dataclass(frozen=True)
class Unary:
    """Prefix operator applied to one operand."""
    operator: Token
    right: "Expr"


@dataclass(frozen=True)
class Binary:
    """Infix operator applied to two operands."""
    left: "Expr"
    operator: Token
    right: "Expr"


Expr = Union[Literal, Grouping, Unary, Binary]

EXPRESSION_TYPES = (Literal, Grouping, Unary, Binary)
