"""Shared definitions for comparison operators.

The parser labels every ``if`` condition with one of these identifiers and
the interpreter dispatches on them. Keeping them in one place prevents the
two components from drifting apart.


File: operations.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

from enum import Enum


class Op(str, Enum):
    """
    Enumeration of supported condition operators.
    """

    EQ = "=="
    NE = "!="

    def __str__(self) -> str:  # pragma: no cover - trivial
        """
        Return the underlying string value for nicer debug output.
        """
        return self.value


# Sentinel loop count for ``loop forever``.
FOREVER = "forever"


__all__ = ["Op", "FOREVER"]
