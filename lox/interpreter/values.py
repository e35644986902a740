"""
Semantics of Lox runtime values: truthiness, equality and display.

Values are plain Python objects: None (nil), bool, float and str.
"""

import math

from ..syntax.ast_nodes import RuntimeValue


def is_number(value: RuntimeValue) -> bool:
    # bool is not a float subclass, so True never passes as a number
    return isinstance(value, float)


def is_truthy(value: RuntimeValue) -> bool:
    """nil and false are falsy; everything else, including 0 and "", is truthy."""
    if value is None:
        return False
    if isinstance(value, bool):
        return value
    return True


def is_equal(a: RuntimeValue, b: RuntimeValue) -> bool:
    """Value equality with no cross-type conversion."""
    if a is None and b is None:
        return True
    if a is None or b is None:
        return False
    if type(a) is not type(b):
        return False
    return a == b


def stringify(value: RuntimeValue) -> str:
    """Convert a value to the text shown to the user."""
    if value is None:
        return "nil"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _format_number(value)
    return value


def _format_number(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"

    text = repr(value)
    if text.endswith(".0"):
        text = text[:-2]
    return text
