"""Variable environment.

Indy-lang has exactly one runtime value kind, the string, and one flat scope
covering the whole script. Reading a name that was never assigned yields an
empty string instead of an error so interactive scripts stay forgiving.


File: environment.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""


class Environment:
    """Mapping of variable names to string values."""

    def __init__(self, initial: dict[str, str] | None = None):
        self.vars: dict[str, str] = {}
        for name, value in (initial or {}).items():
            self.set(name, value)

    def get(self, name: str) -> str:
        """
        Return the value of ``name``, or ``""`` if it was never set.
        """
        return self.vars.get(name, "")

    def set(self, name: str, value: str) -> None:
        """
        Create or overwrite ``name``.
        """
        self.vars[name] = str(value)

    def as_dict(self) -> dict[str, str]:
        """Return a copy of all variables."""
        return dict(self.vars)

    def __contains__(self, name) -> bool:
        return name in self.vars

    def __len__(self) -> int:
        return len(self.vars)

    def __repr__(self) -> str:
        return f"Environment({self.vars!r})"
