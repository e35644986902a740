"""
Runtime errors raised while evaluating Lox expressions.

Author: xwest
"""

from typing import Optional, List

from ..lexer.tokens import Token
from ..lexer.errors import Diagnostic


class LoxRuntimeError(Exception):
    """
    Exception raised when an operator is applied to values it can't handle.

    Carries the operator token so the report can point at its line. It
    unwinds the whole evaluation and is reported once by
    ``Interpreter.interpret``.
    """

    def __init__(
        self,
        token: Token,
        message: str,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.token = token
        self.message = message
        self.diagnostic = Diagnostic(
            message=message,
            line=token.line,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common runtime error codes for categorization
RUNTIME_ERROR_CODES = {
    "R001": "Operand must be a number",
    "R002": "Operands must be two numbers or two strings",
    "R003": "Unsupported operator",
}


def create_number_operand_error(operator: Token) -> LoxRuntimeError:
    """Create an error for a non-number operand of a unary operator."""
    return LoxRuntimeError(
        operator,
        "Operand must be a number.",
        code="R001",
        help_text=f"'{operator.lexeme}' only applies to numbers.",
    )


def create_number_operands_error(operator: Token) -> LoxRuntimeError:
    """Create an error for non-number operands of a binary operator."""
    return LoxRuntimeError(
        operator,
        "Operands must be numbers.",
        code="R001",
        help_text=f"Both sides of '{operator.lexeme}' must be numbers.",
    )


def create_plus_operands_error(operator: Token) -> LoxRuntimeError:
    """Create an error for a '+' applied to a mixed or unsupported pair."""
    return LoxRuntimeError(
        operator,
        "Operands must be two numbers or two strings.",
        code="R002",
        help_text="'+' adds two numbers or concatenates two strings; "
                  "values are never converted implicitly.",
    )


def create_unsupported_operator_error(operator: Token, arity: str) -> LoxRuntimeError:
    """Create an error for an operator token with no evaluation rule."""
    return LoxRuntimeError(
        operator,
        f"Unsupported {arity} operator '{operator.lexeme}'.",
        code="R003",
    )
