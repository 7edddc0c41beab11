"""Script runner.

The single entry point hosts use to execute Indy-lang source text. Parsing
always finishes before execution starts, so a structural error never
leaves partial output behind.


File: runner.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from indylang.diagnostics import Diagnostics
from indylang.interpreter import Interpreter
from indylang.lexer import tokenize
from indylang.parser import Parser


def parse_script(code: str, file: str = "<script>") -> tuple[tuple, Parser]:
    """
    Tokenize and parse ``code``.

    Returns:
        tuple: The script tree and the parser that built it.
    """
    parser = Parser(tokenize(code), file)
    return parser.parse(), parser


def report_ignored(parser: Parser, diagnostics: Diagnostics) -> None:
    """Flag lines the parser skipped because they sit outside start...end."""
    for tok in parser.ignored:
        kind = tok.type.lower().replace("_", " ")
        diagnostics.report(f"Ignoring '{kind}' line outside start...end", tok.line)


def run_source(code: str, file: str = "<script>", verbose: bool = False,
               stdin=None, stdout=None, sleep=None,
               diagnostics: Diagnostics | None = None, on_parsed=None) -> bool:
    """
    Parse and execute a script.

    Parameters:
        code (str): The script source.
        file (str): Name used in error messages.
        verbose (bool): Print engine diagnostics.
        stdin: Line source for ``prompt``; defaults to ``sys.stdin``.
        stdout: Console sink; defaults to ``sys.stdout``.
        sleep: Blocking sleep primitive; defaults to ``time.sleep``.
        diagnostics (Diagnostics): Sink to use instead of a new one.
        on_parsed: Called with the tokens and tree before execution starts.

    Returns:
        bool: ``True`` when the script ran to completion.

    Raises:
        SyntaxError: For structural errors or malformed arguments.
    """
    if diagnostics is None:
        diagnostics = Diagnostics(verbose)

    script, parser = parse_script(code, file)
    if on_parsed is not None:
        on_parsed(parser.tokens, script)
    report_ignored(parser, diagnostics)

    interpreter = Interpreter(file, diagnostics, stdin=stdin, stdout=stdout, sleep=sleep)
    return interpreter.run(script)

