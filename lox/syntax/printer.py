"""
Prefix (Lisp-style) rendering of expression trees, for debugging.

    (* (- 123.0) (group (+ 69.0 0.0)))
"""

from .ast_nodes import Binary, Expr, Grouping, Literal, Unary


class AstPrinter:
    """Render an expression tree as a fully parenthesised string."""

    def print(self, expr: Expr) -> str:
        if isinstance(expr, Literal):
            return self._literal(expr.value)
        if isinstance(expr, Grouping):
            return self._parenthesize("group", expr.expression)
        if isinstance(expr, Unary):
            return self._parenthesize(expr.operator.lexeme, expr.right)
        if isinstance(expr, Binary):
            return self._parenthesize(expr.operator.lexeme, expr.left, expr.right)

        raise TypeError(f"Unknown expression type: {type(expr).__name__}")

    def _parenthesize(self, name: str, *exprs: Expr) -> str:
        parts = [name] + [self.print(expr) for expr in exprs]
        return "(" + " ".join(parts) + ")"

    @staticmethod
    def _literal(value) -> str:
        if value is None:
            return "nil"
        if isinstance(value, bool):
            return "true" if value else "false"
        return str(value)
