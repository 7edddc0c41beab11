"""Statement argument parsing utilities for Indy-lang.

These functions operate on a `indylang.parser.parser.Parser` instance and
turn the remainder of a keyword line into the arguments of its node:
assignment values, ``say`` templates, ``wait`` durations, ``prompt``
targets, ``if`` conditions and ``loop`` counts.


File: statements.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import math
import re
from typing import TYPE_CHECKING

from indylang.exceptions import InvalidArgumentException
from indylang.lexer import IDENTIFIER, Token
from indylang.operations import FOREVER, Op

if TYPE_CHECKING:
    from indylang.parser import Parser


IDENTIFIER_RE = re.compile(rf'^{IDENTIFIER}$')


def clean_literal(value: str) -> str:
    """
    Strip surrounding whitespace and one pair of surrounding double quotes.

    Quotes are only removed when the value both starts and ends with one,
    so ``"say hi`` keeps its stray quote.
    """
    value = value.strip()
    if len(value) >= 2 and value.startswith('"') and value.endswith('"'):
        value = value[1:-1]
    return value


def _invalid(parser: 'Parser', tok: Token, command: str, reason: str):
    return InvalidArgumentException(command, tok.value, reason, tok.line, parser.source_file)


def parse_assign(parser: 'Parser', tok: Token) -> tuple:
    """
    Parse a variable assignment.

    Syntax:
        <identifier>="<literal>" | <identifier>=<literal>

    Returns:
        tuple: ('assign', name, literal, line_number)
    """
    name, raw_value = tok.value
    return ('assign', name, clean_literal(raw_value), tok.line)


def parse_say(parser: 'Parser', tok: Token) -> tuple:
    """
    Parse a ``say`` line.

    Syntax:
        say "<template>"

    Returns:
        tuple: ('say', template, line_number)
    """
    return ('say', clean_literal(tok.value), tok.line)


def parse_wait(parser: 'Parser', tok: Token) -> tuple:
    """
    Parse a ``wait`` line. Negative durations clamp to zero.

    Syntax:
        wait <number>

    Returns:
        tuple: ('wait', seconds, line_number)

    Raises:
        InvalidArgumentException: If the duration is missing or not a finite number.
    """
    raw = tok.value.split()
    if not raw:
        raise _invalid(parser, tok, 'wait', "missing duration")
    try:
        seconds = float(raw[0])
    except ValueError:
        raise _invalid(parser, tok, 'wait', "duration must be a number") from None
    if not math.isfinite(seconds):
        raise _invalid(parser, tok, 'wait', "duration must be finite")
    return ('wait', max(seconds, 0.0), tok.line)


def parse_prompt(parser: 'Parser', tok: Token) -> tuple:
    """
    Parse a ``prompt`` line.

    Syntax:
        prompt <identifier>="<message>"

    Returns:
        tuple: ('prompt', name, message, line_number)

    Raises:
        InvalidArgumentException: If the target variable is missing or invalid.
    """
    name, sep, message = tok.value.partition('=')
    name = name.strip()
    if not sep:
        raise _invalid(parser, tok, 'prompt', 'expected <name>="<message>"')
    if not IDENTIFIER_RE.match(name):
        raise _invalid(parser, tok, 'prompt', f"'{name}' is not a valid variable name")
    return ('prompt', name, clean_literal(message), tok.line)


def parse_condition(parser: 'Parser', tok: Token) -> tuple:
    """
    Parse the condition of an ``if`` line.

    A bare identifier on the left is a variable reference; anything else is
    a template. The right-hand side is always a literal.

    Syntax:
        if <identifier|template> (==|!=) "<literal>"

    Returns:
        tuple: (Op.EQ | Op.NE, left_template, right_literal, line_number)

    Raises:
        InvalidArgumentException: If no comparison operator is present.
    """
    text = tok.value
    for op in (Op.EQ, Op.NE):
        left, sep, right = text.partition(op.value)
        if sep:
            break
    else:
        raise _invalid(parser, tok, 'if', "expected <variable> == <value> or <variable> != <value>")

    left = left.strip()
    if IDENTIFIER_RE.match(left):
        left = '{' + left + '}'
    else:
        left = clean_literal(left)
    return (op, left, clean_literal(right), tok.line)


def parse_loop_count(parser: 'Parser', tok: Token):
    """
    Parse the count of a ``loop`` line.

    Syntax:
        loop <integer> | loop forever

    Returns:
        int | str: A non-negative integer or ``FOREVER``.

    Raises:
        InvalidArgumentException: If the count is missing, negative or not an integer.
    """
    raw = tok.value.strip()
    if raw == FOREVER:
        return FOREVER
    if not raw.isdecimal():
        raise _invalid(parser, tok, 'loop', "count must be a non-negative integer or 'forever'")
    return int(raw)
