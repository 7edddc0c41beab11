"""Lexer for Indy-lang.

Indy-lang is line oriented, so the lexer does not scan characters across
the whole source. Each raw line is classified on its own into exactly one
:class:`Token`: a comment, a blank line, an assignment, a keyword line, or
an unknown line. Keyword tokens carry the rest of the line as their value;
the parser interprets that remainder according to the keyword.

Classification order matters: ``say="hi"`` is an assignment to a variable
named ``say``, not a ``say`` command.


File: lexer.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.1
License: MIT
"""

import re


IDENTIFIER = r'[A-Za-z_][A-Za-z0-9_]*'

ASSIGN_RE = re.compile(rf'^({IDENTIFIER})\s*=(?!=)(.*)$')

# Keywords that must be the whole line.
STANDALONE_KEYWORDS = {
    'start': 'START',
    'end': 'END',
    'else': 'ELSE',
    'end if': 'END_IF',
    'end loop': 'END_LOOP',
}

# Keywords followed by arguments.
ARGUMENT_KEYWORDS = {
    'say': 'SAY',
    'wait': 'WAIT',
    'prompt': 'PROMPT',
    'if': 'IF',
    'loop': 'LOOP',
}


class Token:
    """
    Represents one classified source line.
    """
    def __init__(self, type_, value, line):
        """
        Initialize a new token.

        Parameters:
            type_ (str): The token type.
            value (Any): The token value.
            line (int): The 1-based source line.
        """
        self.type = type_
        self.value = value
        self.line = line

    def __eq__(self, other) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (self.type, self.value, self.line) == (other.type, other.value, other.line)

    def __repr__(self) -> str:
        """
        Return a string representation of the token.
        """
        return f"Token({self.type}, {self.value!r}, line={self.line})"


def classify_line(raw: str, line_num: int) -> Token:
    """
    Classify a single line of source code.

    Parameters:
        raw (str): The line, with or without its line terminator.
        line_num (int): The 1-based line number.

    Returns:
        Token: The classified line. Never raises; lines that match nothing
        become ``UNKNOWN`` tokens.
    """
    text = raw.strip()

    if text.startswith('#'):
        return Token('COMMENT', text[1:].strip(), line_num)
    if text == '':
        return Token('BLANK', None, line_num)

    match = ASSIGN_RE.match(text)
    if match:
        return Token('ASSIGN', (match.group(1), match.group(2)), line_num)

    # Collapse inner whitespace so ``end   if`` still closes an ``if``.
    normalized = ' '.join(text.split())
    if normalized in STANDALONE_KEYWORDS:
        return Token(STANDALONE_KEYWORDS[normalized], None, line_num)

    keyword, _, rest = text.partition(' ')
    if keyword not in ARGUMENT_KEYWORDS:
        keyword, _, rest = text.partition('\t')
    if keyword in ARGUMENT_KEYWORDS:
        return Token(ARGUMENT_KEYWORDS[keyword], rest.strip(), line_num)

    return Token('UNKNOWN', text, line_num)


def tokenize(code: str) -> list[Token]:
    """
    Convert a string of source code into a list of tokens, one per line.

    Parameters:
        code (str): The source code to tokenize.

    Returns:
        list[Token]: A list of Token instances.
    """
    return [classify_line(line, num) for num, line in enumerate(code.splitlines(), start=1)]
