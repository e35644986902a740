"""
Error handling for the Lox lexer.

Provides error reporting with source line information and a shared
diagnostic record used by every stage of the interpreter.

Author: xwest
"""

from typing import Optional, List
from dataclasses import dataclass


@dataclass
class Diagnostic:
    """Base record for diagnostics (errors, warnings)."""
    message: str
    line: int
    severity: str  # "error", "warning"
    code: Optional[str] = None
    help_text: Optional[str] = None
    suggestions: Optional[List[str]] = None

    def __str__(self) -> str:
        severity_prefix = self.severity.upper()
        result = f"{severity_prefix}: {self.message}\n"
        result += f"  --> line {self.line}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        if self.suggestions:
            result += "  suggestions:\n"
            for suggestion in self.suggestions:
                result += f"    - {suggestion}\n"

        return result


class LexerError(Exception):
    """
    Exception raised when the lexer meets a character sequence it can't scan.

    The scan loop catches it, hands it to the error reporter and keeps going,
    so it never escapes ``Lexer.scan_tokens``.
    """

    def __init__(
        self,
        message: str,
        line: int,
        code: Optional[str] = None,
        help_text: Optional[str] = None,
        suggestions: Optional[List[str]] = None
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.diagnostic = Diagnostic(
            message=message,
            line=line,
            severity="error",
            code=code,
            help_text=help_text,
            suggestions=suggestions
        )

    def __str__(self) -> str:
        return str(self.diagnostic)


# Common error codes for categorization
ERROR_CODES = {
    "L001": "Unexpected character",
    "L002": "Unterminated string literal",
}


# Helper functions for creating common errors
def create_unexpected_character_error(char: str, line: int) -> LexerError:
    """Create an error for a character that starts no token."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in Lox source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        message="Unexpected character.",
        line=line,
        code="L001",
        help_text=help_text,
    )


def create_unterminated_string_error(line: int) -> LexerError:
    """Create an error for a string literal that runs into end of input."""
    return LexerError(
        message="Unterminated string.",
        line=line,
        code="L002",
        help_text='String literals must be closed with a matching " quote.',
        suggestions=['Add a closing " quote'],
    )
