"""
Diagnostic sink shared by the lexer and the interpreter.

The lexer and interpreter never print errors themselves. They hand them to an
ErrorReporter, which records them, logs them and optionally echoes the
formatted message (the CLI echoes to stderr).

Author: xwest
"""

import logging
from typing import Callable, List, Optional, TYPE_CHECKING

from .lexer.errors import Diagnostic

if TYPE_CHECKING:
    from .interpreter.errors import LoxRuntimeError

logger = logging.getLogger(__name__)


class ErrorReporter:
    """
    Collects lexical and runtime errors.

    ``had_error`` is set by lexical errors, ``had_runtime_error`` by runtime
    errors; drivers use them to pick an exit code. ``reset`` clears both so an
    interactive prompt can keep going after a bad line.
    """

    def __init__(self, echo: Optional[Callable[[str], None]] = None):
        self.echo = echo
        self.diagnostics: List[Diagnostic] = []
        self.had_error = False
        self.had_runtime_error = False

    def error(self, line: int, message: str, diagnostic: Optional[Diagnostic] = None):
        """Report a lexical error found on ``line``."""
        self.report(line, "", message, diagnostic)

    def report(self, line: int, where: str, message: str,
               diagnostic: Optional[Diagnostic] = None):
        text = f"[line {line}] Error{where}: {message}"
        if diagnostic is None:
            diagnostic = Diagnostic(message=message, line=line, severity="error")
        self._record(diagnostic, text)
        self.had_error = True

    def runtime_error(self, error: "LoxRuntimeError"):
        """Report a runtime error raised while evaluating an expression."""
        text = f"{error.message}\n[line {error.token.line}]"
        self._record(error.diagnostic, text)
        self.had_runtime_error = True

    def reset(self):
        self.had_error = False
        self.had_runtime_error = False

    def has_errors(self) -> bool:
        return self.had_error or self.had_runtime_error

    def _record(self, diagnostic: Diagnostic, text: str):
        self.diagnostics.append(diagnostic)
        logger.info("%s (%s)", text.replace("\n", " "), diagnostic.code or "-")
        if self.echo is not None:
            self.echo(text)
