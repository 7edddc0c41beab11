"""Interpreter.

This is a tree-walk interpreter for the block trees produced by the parser.
It supports assignments, console output, user prompts, timed waits and
single-comparison conditionals.

1. Execution Model
The interpreter walks the tree top-down. `run()` executes the top-level
``script`` node and `execute()` walks a body of nodes in order. Nested
blocks run to completion before control returns to the enclosing body.
There is one thread of control; `wait` and `prompt` block it.

2. Environment
All variables live in one flat :class:`Environment` of strings. Reading an
unset variable yields an empty string.

3. Control Flow
- `if`/`else`: the interpolated left side is compared with the right-hand
  literal by exact string equality or inequality.
- `loop`: simulated. The body has been parsed but is skipped; execution
  continues with the next sibling.

4. Collaborators
Output, input, the sleep primitive and the diagnostics sink are injected so
hosts and tests can replace them.


File: interpreter.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys
import time

from indylang.diagnostics import Diagnostics
from indylang.environment import Environment
from indylang.exceptions import UnknownNodeException
from indylang.interpolation import interpolate
from indylang.operations import FOREVER, Op

PROMPT_SEPARATOR = ": "


class Interpreter:
    """Tree-walk interpreter for Indy-lang."""

    def __init__(self, file: str, diagnostics: Diagnostics | None = None,
                 stdin=None, stdout=None, sleep=None):
        """Initialize the interpreter."""
        self.file = file
        self.env = Environment()
        self.diagnostics = diagnostics if diagnostics is not None else Diagnostics()
        self.stdin = stdin if stdin is not None else sys.stdin
        self.stdout = stdout if stdout is not None else sys.stdout
        self.sleep = sleep if sleep is not None else time.sleep

    @property
    def vars(self) -> dict[str, str]:
        """Snapshot of the current variables."""
        return self.env.as_dict()

    def run(self, script: tuple) -> bool:
        """
        Execute a parsed ``script`` node.

        Returns:
            bool: ``True`` once the script has run to its ``end``.
        """
        kind, body, line = script
        if kind != 'script':
            raise UnknownNodeException(kind, line, self.file)
        self.diagnostics.report("Script started.", line)
        self.execute(body)
        self.diagnostics.report("Script finished.")
        return True

    def evaluate_condition(self, condition: tuple) -> bool:
        """
        Evaluate an ``if`` condition.

        Parameters:
            condition (tuple): (Op, left_template, right_literal, line)

        Returns:
            bool: The comparison result.
        """
        op, left, right, line = condition
        value = interpolate(left, self.env)
        if op == Op.EQ:
            return value == right
        if op == Op.NE:
            return value != right
        raise UnknownNodeException(op, line, self.file)

    def read_line(self) -> str:
        """
        Read one line of user input without its line terminator.

        End of input yields an empty string.
        """
        text = self.stdin.readline()
        if text.endswith('\r\n'):
            return text[:-2]
        if text.endswith('\n') or text.endswith('\r'):
            return text[:-1]
        return text

    def execute(self, statements):
        """
        Executes a sequence of nodes.

        Parameters:
            statements (Sequence[tuple]):
                ('assign' | 'say' | 'wait' | 'prompt' | 'if' | 'loop' |
                 'comment' | 'blank' | 'unknown', ...) tuples.

        Raises:
            UnknownNodeException: For unknown node types.
        """
        for stmt in statements:
            kind = stmt[0]
            line = stmt[-1]

            if kind == 'assign':
                _, name, literal, _ = stmt
                self.env.set(name, interpolate(literal, self.env))

            elif kind == 'say':
                _, template, _ = stmt
                print(interpolate(template, self.env), file=self.stdout)

            elif kind == 'wait':
                _, seconds, _ = stmt
                self.diagnostics.report(f"Waiting for {seconds:g} seconds...", line)
                self.stdout.flush()
                self.sleep(seconds)

            elif kind == 'prompt':
                _, name, message, _ = stmt
                self.stdout.write(interpolate(message, self.env) + PROMPT_SEPARATOR)
                self.stdout.flush()
                self.env.set(name, self.read_line())

            elif kind == 'if':
                _, condition, then_body, else_body, _ = stmt
                if self.evaluate_condition(condition):
                    self.execute(then_body)
                elif else_body:
                    self.execute(else_body)

            elif kind == 'loop':
                _, count, body, _ = stmt
                label = "forever" if count == FOREVER else f"{count} time(s)"
                self.diagnostics.report(
                    f"Loop encountered ({label}, {len(body)} line(s)). "
                    f"Simulation: skipping block to continue execution.",
                    line,
                )

            elif kind in ('comment', 'blank'):
                continue

            elif kind == 'unknown':
                _, raw, _ = stmt
                self.diagnostics.report(f"Unknown command or bad syntax: '{raw}'", line)

            else:
                raise UnknownNodeException(kind, line, self.file)
