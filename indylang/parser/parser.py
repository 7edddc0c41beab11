"""
Main parser entry point for Indy-lang.

This module defines the `Parser` class, which turns the classified lines
produced by the lexer into a tree of nested blocks. Instead of recursive
descent it keeps an explicit stack of open blocks, pushing on ``start``,
``if`` and ``loop`` and popping on the matching terminator, so arbitrarily
deep nesting never grows the Python call stack.

Argument parsing for individual keyword lines lives in
`indylang.parser.statements`.


File: parser.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from indylang.exceptions import (
    DuplicateElseException,
    MismatchedTerminatorException,
    MissingScriptException,
    NestedScriptException,
    UnterminatedBlockException,
    terminator_for,
)
from indylang.lexer import Token

from . import statements as _stmt


class OpenBlock:
    """A block whose terminator has not been seen yet."""

    def __init__(self, kind: str, line: int, header=None):
        self.kind = kind
        self.line = line
        self.header = header
        self.body: list = []
        self.else_body: list | None = None

    @property
    def target(self) -> list:
        """The body new nodes are appended to."""
        return self.else_body if self.else_body is not None else self.body

    def close(self) -> tuple:
        """Build the finished node for this block."""
        if self.kind == 'start':
            return ('script', tuple(self.body), self.line)
        if self.kind == 'if':
            return ('if', self.header, tuple(self.body), tuple(self.else_body or ()), self.line)
        return ('loop', self.header, tuple(self.body), self.line)


class Parser:
    """Indy-lang block parser."""

    # Token types that close a block, mapped to the block kind they close.
    CLOSERS = {
        'END': 'start',
        'END_IF': 'if',
        'END_LOOP': 'loop',
    }

    def __init__(self, tokens: list[Token], file: str):
        """
        Initialize the parser with a list of tokens.

        Parameters:
            tokens (list): A list of Token instances, one per source line.
            file (str): The name of the script.
        """
        self.tokens = tokens
        self.source_file = file
        self.stack: list[OpenBlock] = []
        self.script: tuple | None = None
        # Tokens outside start…end, kept for verbose diagnostics.
        self.ignored: list[Token] = []

    def parse(self) -> tuple:
        """
        Parse the token stream into a script tree.

        Returns:
            tuple: ('script', body, line_number)

        Raises:
            IndyStructureException: On unterminated, mismatched or duplicated blocks.
            InvalidArgumentException: On malformed keyword arguments.
        """
        self.stack = []
        self.script = None
        self.ignored = []

        for tok in self.tokens:
            if not self.stack:
                self._outside_script(tok)
            else:
                self._inside_script(tok)

        if self.stack:
            innermost = self.stack[-1]
            raise UnterminatedBlockException(innermost.kind, innermost.line, self.source_file)
        if self.script is None:
            raise MissingScriptException(self.source_file)
        return self.script

    def _outside_script(self, tok: Token) -> None:
        if tok.type == 'START' and self.script is None:
            self.stack.append(OpenBlock('start', tok.line))
        elif tok.type not in ('COMMENT', 'BLANK'):
            self.ignored.append(tok)

    def _inside_script(self, tok: Token) -> None:
        top = self.stack[-1]
        kind = tok.type

        if kind == 'START':
            raise NestedScriptException(tok.line, self.stack[0].line, self.source_file)
        elif kind == 'IF':
            self.stack.append(OpenBlock('if', tok.line, _stmt.parse_condition(self, tok)))
        elif kind == 'LOOP':
            self.stack.append(OpenBlock('loop', tok.line, _stmt.parse_loop_count(self, tok)))
        elif kind == 'ELSE':
            if top.kind != 'if':
                raise MismatchedTerminatorException(
                    terminator_for(top.kind), 'else', tok.line, top.line, self.source_file
                )
            if top.else_body is not None:
                raise DuplicateElseException(tok.line, top.line, self.source_file)
            top.else_body = []
        elif kind in self.CLOSERS:
            found = 'end' if kind == 'END' else terminator_for(self.CLOSERS[kind])
            if top.kind != self.CLOSERS[kind]:
                raise MismatchedTerminatorException(
                    terminator_for(top.kind), found, tok.line, top.line, self.source_file
                )
            node = self.stack.pop().close()
            if self.stack:
                self.stack[-1].target.append(node)
            else:
                self.script = node
        else:
            top.target.append(self.command(tok))

    def command(self, tok: Token) -> tuple:
        """
        Build the leaf node for a single non-block line.
        """
        kind = tok.type
        if kind == 'ASSIGN':
            return _stmt.parse_assign(self, tok)
        elif kind == 'SAY':
            return _stmt.parse_say(self, tok)
        elif kind == 'WAIT':
            return _stmt.parse_wait(self, tok)
        elif kind == 'PROMPT':
            return _stmt.parse_prompt(self, tok)
        elif kind == 'COMMENT':
            return ('comment', tok.value, tok.line)
        elif kind == 'BLANK':
            return ('blank', tok.line)
        return ('unknown', tok.value, tok.line)
