"""
Tree-walking evaluator for Lox expressions.

Dispatches on the concrete expression class and recurses into children.
Binary operands are always evaluated left then right, both of them, since
Lox has no short-circuit operators at this level.

Arithmetic follows IEEE-754 doubles: dividing by zero gives an infinity or
NaN instead of an error.

Author: xwest
"""

import logging
import math
import operator
from typing import Callable, Dict, Optional

from ..lexer.tokens import Token, TokenType
from ..syntax.ast_nodes import Binary, Expr, Grouping, Literal, RuntimeValue, Unary
from ..diagnostics import ErrorReporter
from .errors import (
    LoxRuntimeError, create_number_operand_error, create_number_operands_error,
    create_plus_operands_error, create_unsupported_operator_error
)
from .values import is_equal, is_number, is_truthy, stringify

logger = logging.getLogger(__name__)


def _divide(left: float, right: float) -> float:
    # Python raises on x / 0.0; Lox wants the IEEE result
    if right == 0.0:
        if left == 0.0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


# Operators that need two numbers
NUMERIC_BINARY_OPERATORS: Dict[TokenType, Callable[[float, float], RuntimeValue]] = {
    TokenType.MINUS: operator.sub,
    TokenType.SLASH: _divide,
    TokenType.STAR: operator.mul,
    TokenType.GREATER: operator.gt,
    TokenType.GREATER_EQUAL: operator.ge,
    TokenType.LESS: operator.lt,
    TokenType.LESS_EQUAL: operator.le,
}

# Operators defined over every pair of values
EQUALITY_OPERATORS: Dict[TokenType, Callable[[RuntimeValue, RuntimeValue], bool]] = {
    TokenType.EQUAL_EQUAL: is_equal,
    TokenType.BANG_EQUAL: lambda a, b: not is_equal(a, b),
}


class Interpreter:
    """
    Evaluates expression trees.

    The interpreter holds no evaluation state, so one instance can evaluate
    any number of trees.
    """

    def __init__(self, reporter: Optional[ErrorReporter] = None,
                 output: Callable[[str], None] = print):
        """
        Args:
            reporter: Sink for runtime errors (a private one if omitted)
            output: Called with the display text of each interpreted value
        """
        self.reporter = reporter if reporter is not None else ErrorReporter()
        self.output = output

    def interpret(self, expr: Expr) -> Optional[str]:
        """
        Evaluate ``expr`` and write its display text to the output.

        A runtime error is reported instead of raised.

        Returns:
            The display text, or None if evaluation failed
        """
        try:
            value = self.evaluate(expr)
        except LoxRuntimeError as error:
            self.reporter.runtime_error(error)
            return None

        text = stringify(value)
        logger.debug("interpreted %r -> %s", expr, text)
        self.output(text)
        return text

    def evaluate(self, expr: Expr) -> RuntimeValue:
        """
        Compute the value of an expression.

        Raises:
            LoxRuntimeError: If an operator gets operands it doesn't support
            TypeError: If ``expr`` is not an expression node
        """
        if isinstance(expr, Literal):
            return expr.value

        if isinstance(expr, Grouping):
            return self.evaluate(expr.expression)

        if isinstance(expr, Unary):
            return self._evaluate_unary(expr)

        if isinstance(expr, Binary):
            return self._evaluate_binary(expr)

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def _evaluate_unary(self, expr: Unary) -> RuntimeValue:
        right = self.evaluate(expr.right)
        op_type = expr.operator.type

        if op_type == TokenType.BANG:
            return not is_truthy(right)

        if op_type == TokenType.MINUS:
            check_number_operand(expr.operator, right)
            return -right

        raise create_unsupported_operator_error(expr.operator, "unary")

    def _evaluate_binary(self, expr: Binary) -> RuntimeValue:
        # Left before right, unconditionally
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op_type = expr.operator.type

        if op_type in NUMERIC_BINARY_OPERATORS:
            check_number_operands(expr.operator, left, right)
            return NUMERIC_BINARY_OPERATORS[op_type](left, right)

        if op_type == TokenType.PLUS:
            if is_number(left) and is_number(right):
                return left + right
            if isinstance(left, str) and isinstance(right, str):
                return left + right
            raise create_plus_operands_error(expr.operator)

        if op_type in EQUALITY_OPERATORS:
            return EQUALITY_OPERATORS[op_type](left, right)

        raise create_unsupported_operator_error(expr.operator, "binary")


def check_number_operand(operator_token: Token, operand: RuntimeValue):
    if is_number(operand):
        return
    raise create_number_operand_error(operator_token)


def check_number_operands(operator_token: Token, left: RuntimeValue, right: RuntimeValue):
    if is_number(left) and is_number(right):
        return
    raise create_number_operands_error(operator_token)
