"""
Utility functions shared across Indy-lang tests.
"""
from io import StringIO
from pathlib import Path
import sys

from indylang.diagnostics import Diagnostics
from indylang.interpreter import Interpreter
from indylang.lexer import tokenize
from indylang.parser import Parser

# Ensure the project root is on the Python path
PROJECT_ROOT = Path(__file__).resolve().parents[2]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.append(str(PROJECT_ROOT))


def parse_source(source: str):
    """
    Parse source code and return the script tree.
    """
    parser = Parser(tokenize(source), "<test>")
    return parser.parse()


def wrap(*lines: str) -> str:
    """
    Wrap script lines in a start...end block.
    """
    return "\n".join(("start",) + lines + ("end",)) + "\n"


class RecordingSleep:
    """
    Sleep primitive that records requested durations instead of sleeping.
    """
    def __init__(self):
        self.calls: list[float] = []

    def __call__(self, seconds: float) -> None:
        self.calls.append(seconds)


def make_interpreter(stdin: str = "", verbose: bool = False):
    """
    Build an interpreter wired to in-memory I/O and a recording sleep.
    """
    out = StringIO()
    interpreter = Interpreter(
        "<test>",
        Diagnostics(verbose, stream=out),
        stdin=StringIO(stdin),
        stdout=out,
        sleep=RecordingSleep(),
    )
    return interpreter, out


def run(source: str, stdin: str = "", verbose: bool = False):
    """
    Parse and run ``source``; return the interpreter and everything it printed.
    """
    interpreter, out = make_interpreter(stdin, verbose)
    interpreter.run(parse_source(source))
    return interpreter, out.getvalue()
