"""
locator.py - recover an argument's source text for error messages.

``must(order.total)`` should report ``order.total`` without the caller having
to spell it out.  The entry point looks at the calling frame, reads that
source line and takes the text of the first argument passed to the entry
point.  When the source is unavailable (REPL, ``exec``, frozen apps) or the
call spans lines in a way the line doesn't show, the caller-supplied default
is returned.
"""

from __future__ import annotations

import linecache
import logging
import os
import re
import sys

log = logging.getLogger(__name__)

__all__ = ["get_name_or_default", "caller_argument_name"]

_OPENERS = {"(": ")", "[": "]", "{": "}"}
_CLOSERS = frozenset(_OPENERS.values())


def _first_argument(line: str, start: int) -> str:
    """Text from *start* up to the first top-level ``,`` or ``)``."""
    depth = 0
    quote = ""
    i = start
    while i < len(line):
        ch = line[i]
        if quote:
            if ch == "\\":
                i += 2
                continue
            if ch == quote:
                quote = ""
        elif ch in "'\"":
            quote = ch
        elif ch in _OPENERS:
            depth += 1
        elif ch in _CLOSERS:
            if depth == 0:
                return line[start:i].strip()
            depth -= 1
        elif ch == "," and depth == 0:
            return line[start:i].strip()
        i += 1
    return ""


def get_name_or_default(filename: str, lineno: int, entry_point: str, default: str) -> str:
    """Read *filename* at *lineno* and return the first argument of *entry_point*."""
    if not os.path.isfile(filename):
        return default

    line = linecache.getline(filename, lineno)
    if not line.strip():
        return default

    matches = list(re.finditer(rf"(?<![\w]){re.escape(entry_point)}\(", line))
    # several calls on one line: the frame cannot tell which one is running
    if len(matches) != 1:
        return default
    match = matches[0]

    name = _first_argument(line, match.end())
    return name or default


def caller_argument_name(entry_point: str, default: str, depth: int = 2) -> str:
    """Resolve the argument text at the call site *depth* frames up."""
    try:
        frame = sys._getframe(depth)
    except ValueError:
        return default
    try:
        name = get_name_or_default(frame.f_code.co_filename, frame.f_lineno, entry_point, default)
    finally:
        del frame
    if name == default:
        log.debug("Could not resolve argument name for %s(); using %r", entry_point, default)
    return name
