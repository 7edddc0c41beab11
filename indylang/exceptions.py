"""Errors.

Parse-time errors derive from :class:`SyntaxError` so hosts can handle every
fatal script problem with a single ``except SyntaxError``.


File: exceptions.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


def _located(message, line=None, file=None):
    if line is not None:
        message += f" on line {line}"
    if file is not None:
        message += f" in {file}"
    return message


class IndyStructureException(SyntaxError):
    """
    Base error for malformed block structure.
    """
    def __init__(self, message, line=None, file=None):
        self.line = line
        self.file = file
        super().__init__(_located(message, line, file))


class UnterminatedBlockException(IndyStructureException):
    """
    Error for a block still open at the end of the script.
    """
    def __init__(self, kind, opened_on, file=None):
        self.kind = kind
        self.opened_on = opened_on
        super().__init__(
            f"Unterminated '{kind}' block (expected '{terminator_for(kind)}'), "
            f"opened",
            opened_on,
            file,
        )


class MismatchedTerminatorException(IndyStructureException):
    """
    Error for a terminator that does not close the innermost open block.
    """
    def __init__(self, expected, found, line=None, opened_on=None, file=None):
        self.expected = expected
        self.found = found
        self.opened_on = opened_on
        message = f"Expected '{expected}' but found '{found}'"
        if opened_on is not None:
            message += f" (block opened on line {opened_on})"
        super().__init__(message, line, file)


class DuplicateElseException(IndyStructureException):
    """
    Error for a second ``else`` inside the same ``if``.
    """
    def __init__(self, line=None, opened_on=None, file=None):
        self.opened_on = opened_on
        super().__init__(
            f"Duplicate 'else' for 'if' opened on line {opened_on}",
            line,
            file,
        )


class MissingScriptException(IndyStructureException):
    """
    Error for a script without a ``start`` line.
    """
    def __init__(self, file=None):
        super().__init__("Script has no 'start' block", None, file)


class NestedScriptException(IndyStructureException):
    """
    Error for a ``start`` inside an already started script.
    """
    def __init__(self, line=None, opened_on=None, file=None):
        self.opened_on = opened_on
        super().__init__(
            f"Unexpected 'start', script already started on line {opened_on}",
            line,
            file,
        )


class InvalidArgumentException(SyntaxError):
    """
    Error for a malformed command argument such as ``wait soon``.
    """
    def __init__(self, command, raw, reason, line=None, file=None):
        self.command = command
        self.raw = raw
        self.line = line
        message = f"Invalid '{command}' argument '{raw}': {reason}"
        super().__init__(_located(message, line, file))


class UnknownNodeException(Exception):
    """
    Error for a node the interpreter does not know how to execute.
    """
    def __init__(self, kind, line=None, file=None):
        self.kind = kind
        self.line = line
        super().__init__(_located(f"Unknown node type '{kind}'", line, file))


TERMINATORS = {
    "start": "end",
    "if": "end if",
    "loop": "end loop",
}


def terminator_for(kind: str) -> str:
    """
    Return the keyword line that closes a block of ``kind``.
    """
    return TERMINATORS[kind]
