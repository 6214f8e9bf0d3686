"""The cd, pwd and exit builtins."""

from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from .environment import get_env_variable

_NO_SUCH_FILE = " Aucun fichier ou dossier de ce nom"
_TOO_MANY_ARGUMENTS = " trop d'arguments\n"
_NUMERIC_REQUIRED = " argument numérique nécessaire\n"
_QUOTES = "\"'"


class ShellExit(Exception):
    """Raised by the exit builtin; carries the status the shell ends with."""

    def __init__(self, status: int) -> None:
        super().__init__(status)
        self.status = status & 0xFF


def trim_path(path: str) -> str:
    """Drop the leading spaces of a path."""
    return path.lstrip(" ")


def home_path(path: str, relative: bool) -> Optional[str]:
    """Return HOME, or HOME joined with what follows the leading ~ of path.

    Returns None when HOME is not set.
    """
    home = os.environ.get("HOME")
    if home is None:
        return None
    if relative:
        return home + path[1:]
    return home


def _check_arguments(arguments: Sequence[str]) -> int:
    count = len(arguments)
    if count >= 2:
        return 0
    if count == 1 and arguments[0].startswith("$PWD"):
        return 2
    if count == 1:
        return 1
    return 0


def cd(args: Sequence[str]) -> int:
    """Change the working directory to the single argument.

    A leading ~ stands for HOME. Exactly one argument is required.
    Returns 0 on success and 1 on error, with a message on standard error.
    """
    check = _check_arguments(list(args[1:]))
    if check == 2:
        return 0
    if check == 0:
        sys.stderr.write(_TOO_MANY_ARGUMENTS)
        return 1
    path: Optional[str] = trim_path(args[1])
    if path.startswith("~"):
        path = home_path(path, True)
    try:
        if path is None:
            raise FileNotFoundError(path)
        os.chdir(path)
    except OSError:
        sys.stderr.write(_NO_SUCH_FILE)
        return 1
    return 0


def pwd(args: Optional[Sequence[str]], out: Optional[TextIO] = None) -> int:
    """Write the working directory followed by a newline."""
    stream = sys.stdout if out is None else out
    if args is None:
        return 1
    try:
        cwd = os.getcwd()
    except OSError:
        stream.write("error get path\n")
        return 1
    stream.write(cwd + "\n")
    stream.flush()
    return 0


def is_numeric(text: Optional[str]) -> bool:
    """Tell whether the text is an optional sign followed by digits only."""
    if not text:
        return False
    body = text[1:] if text[0] in "+-" else text
    return all(char in "0123456789" for char in body)


def strip_exit_argument(text: Optional[str]) -> Optional[str]:
    """Extract the first word of an exit argument with its quotes removed."""
    if text is None:
        return None
    stripped = text.lstrip(" ")
    limit = len(stripped)
    start = len(text) - limit
    if text[start : start + 1] == '"':
        start += 1
    word = text[start:limit].split(" ", 1)[0]
    return "".join(char for char in word if char not in _QUOTES)


def digits_only(text: str) -> str:
    """Keep only the decimal digits of the text."""
    return "".join(char for char in text if char in "0123456789")


def _atoi(text: Optional[str]) -> int:
    if not text:
        return 0
    body = text.lstrip(" \t\n\v\f\r")
    sign = 1
    if body[:1] in ("+", "-"):
        sign = -1 if body[0] == "-" else 1
        body = body[1:]
    digits = ""
    for char in body:
        if char not in "0123456789":
            break
        digits += char
    return sign * int(digits) if digits else 0


def exit_builtin(args: Optional[Sequence[str]], env: Sequence[str]) -> None:
    """End the shell by raising ShellExit with the status the arguments give.

    Without an argument the status is the value of the ? entry of env.
    A non-numeric argument gives 2 and too many arguments give 1.
    """
    if args is None:
        raise ShellExit(0)
    if len(args) > 1:
        first = args[1]
        word = strip_exit_argument(first)
        if not is_numeric(word):
            sys.stderr.write(_NUMERIC_REQUIRED)
            raise ShellExit(2)
        if len(args) > 2:
            if first.startswith(("+", "-")):
                if first.startswith("+"):
                    raise ShellExit(_atoi(digits_only(args[2])))
                raise ShellExit(156)
            sys.stderr.write(_TOO_MANY_ARGUMENTS)
            raise ShellExit(1)
        raise ShellExit(_atoi(word))
    entry = get_env_variable(env, "$?")
    value = entry.partition("=")[2] if entry is not None else ""
    raise ShellExit(_atoi(value))