"""String interpolation.

Expands ``{Name}`` placeholders in a template against an
:class:`~indylang.environment.Environment`. Substitution is a single
left-to-right pass: substituted values are never re-scanned, so a value
containing ``{Other}`` is printed as-is. Braces that do not wrap an
identifier are kept as literal text.


File: interpolation.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import re

from indylang.environment import Environment
from indylang.lexer import IDENTIFIER


PLACEHOLDER_RE = re.compile(rf'\{{({IDENTIFIER})\}}')


def interpolate(template: str, env: Environment) -> str:
    """
    Substitute every ``{Name}`` placeholder in ``template``.

    Parameters:
        template (str): Text possibly containing placeholders.
        env (Environment): Source of variable values; unknown names give ``""``.

    Returns:
        str: The substituted text.
    """
    if '{' not in template:
        return template
    return PLACEHOLDER_RE.sub(lambda m: env.get(m.group(1)), template)
