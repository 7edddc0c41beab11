"""Verbose diagnostics sink.

The interpreter never prints debug chatter on its own. It reports through
a :class:`Diagnostics` instance handed to it by the host, which writes
``[Indy Engine]`` lines only when verbose mode is on. Every report is also
kept in :attr:`Diagnostics.messages` so callers can inspect it afterwards.


File: diagnostics.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.1.0
License: MIT
"""

import sys

PREFIX = "[Indy Engine]"


class Diagnostics:
    """Destination for verbose engine messages."""

    def __init__(self, verbose: bool = False, stream=None):
        self.verbose = verbose
        self.stream = stream
        self.messages: list[str] = []

    def report(self, message: str, line: int | None = None) -> None:
        """
        Record ``message`` and print it when verbose.

        Parameters:
            message (str): The diagnostic text.
            line (int | None): Source line the message refers to.
        """
        if line is not None:
            message = f"{message} (line {line})"
        self.messages.append(message)
        if self.verbose:
            stream = self.stream if self.stream is not None else sys.stdout
            print(f"{PREFIX} {message}", file=stream)
