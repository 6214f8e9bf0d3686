"""The echo builtin and expansion of the last exit status."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

_STATUS_PATTERN = "$?"


def expand_exit_status(text: str, exit_status: int) -> str:
    """Replace every $? in the text with the given exit status."""
    if _STATUS_PATTERN not in text:
        return text
    return text.replace(_STATUS_PATTERN, str(exit_status))


def echo(
    args: Sequence[str],
    exit_status: int = 0,
    out: Optional[TextIO] = None,
) -> int:
    """Write the arguments after the command name, separated by spaces.

    A first argument of exactly -n suppresses the trailing newline. Every
    $? is replaced with the last exit status; any other $ is written as is.
    Returns 0, or 1 when writing fails.
    """
    stream = sys.stdout if out is None else out
    words = list(args[1:])
    newline = True
    if words and words[0] == "-n":
        newline = False
        words = words[1:]
    text = " ".join(expand_exit_status(word, exit_status) for word in words)
    if newline:
        text += "\n"
    try:
        stream.write(text)
        stream.flush()
    except OSError:
        return 1
    return 0