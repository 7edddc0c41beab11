"""Indy-lang.

A line-oriented interpreter for small interactive console scripts.


File: __init__.py
Author: Chris Rowles <christopher.rowles@outlook.com>
Copyright: © 2025 Chris Rowles. All rights reserved.
Version: 0.5.2
License: MIT
"""

__version__ = "0.5.2"
