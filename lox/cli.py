"""
Command line driver for the Lox front end.

    lox scan program.lox      # print the token stream of a file
    lox scan -                # ... of stdin
    lox scan                  # interactive prompt, one line at a time
    lox demo                  # print and evaluate a sample expression

Exit codes follow sysexits: 65 for lexical errors, 70 for runtime errors.
"""

import logging
import sys
from typing import List, Optional, TextIO

import click
from rich.console import Console
from rich.table import Table

from .__version__ import __version__
from .diagnostics import ErrorReporter
from .interpreter import Interpreter
from .lexer import Lexer, Token, TokenType
from .syntax import AstPrinter, Binary, Expr, Grouping, Literal, Unary

EXIT_DATA_ERROR = 65
EXIT_SOFTWARE = 70

logger = logging.getLogger(__name__)


def _echo_error(message: str):
    click.echo(message, err=True)


def _print_tokens(tokens: List[Token], plain: bool):
    if plain:
        for token in tokens:
            click.echo(str(token))
        return

    table = Table(title="Tokens")
    table.add_column("Line", justify="right")
    table.add_column("Type")
    table.add_column("Lexeme")
    table.add_column("Literal")
    for token in tokens:
        literal = "" if token.literal is None else repr(token.literal)
        table.add_row(str(token.line), token.type.name, token.lexeme, literal)
    Console().print(table)


def _run(source: str, reporter: ErrorReporter, plain: bool):
    tokens = Lexer(source, reporter).scan_tokens()
    _print_tokens(tokens, plain)


def _run_prompt(reporter: ErrorReporter, plain: bool):
    stdin = click.get_text_stream("stdin")
    while True:
        click.echo("> ", nl=False)
        line = stdin.readline()
        if not line:
            click.echo()
            break
        _run(line, reporter, plain)
        # A bad line shouldn't end the session
        reporter.reset()


def sample_expression() -> Expr:
    """-123 * (69 + 0)"""
    return Binary(
        Unary(Token(TokenType.MINUS, "-", None, 1), Literal(123.0)),
        Token(TokenType.STAR, "*", None, 1),
        Grouping(
            Binary(
                Literal(69.0),
                Token(TokenType.PLUS, "+", None, 1),
                Literal(0.0),
            )
        ),
    )


@click.group()
@click.version_option(__version__, prog_name="lox")
@click.option(
    "--log-level",
    envvar="LOX_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default="WARNING",
    show_default=True,
    help="Logging level (env: LOX_LOG_LEVEL)",
)
def main(log_level: str) -> None:
    """Lox language front end."""
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


@main.command("scan")
@click.argument("source", type=click.File("r", encoding="utf-8"), required=False)
@click.option("--plain", is_flag=True, help="One token per line instead of a table")
def scan_cmd(source: Optional[TextIO], plain: bool) -> None:
    """Scan SOURCE (a file, or - for stdin) and print its tokens.

    Without SOURCE, start an interactive prompt that scans each line.
    """
    reporter = ErrorReporter(echo=_echo_error)

    if source is None:
        _run_prompt(reporter, plain)
        return

    logger.info("scanning %s", source.name)
    _run(source.read(), reporter, plain)
    if reporter.had_error:
        sys.exit(EXIT_DATA_ERROR)


@main.command("demo")
def demo_cmd() -> None:
    """Print and evaluate the expression -123 * (69 + 0)."""
    expression = sample_expression()
    click.echo(AstPrinter().print(expression))

    reporter = ErrorReporter(echo=_echo_error)
    Interpreter(reporter, output=click.echo).interpret(expression)
    if reporter.had_runtime_error:
        sys.exit(EXIT_SOFTWARE)


if __name__ == "__main__":
    main()
