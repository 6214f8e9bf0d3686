"""Turning command nodes into argument lists and running builtins."""

from __future__ import annotations

from typing import Callable, Dict, List, MutableSequence, Optional, Sequence

from .builtins import cd, exit_builtin, pwd
from .echo import echo
from .env_builtins import env_builtin, export, unset
from .tokens import Token

_QUOTES = ("'", '"')
_STATE_MODIFYING = frozenset({"cd", "export", "unset", "exit"})

_BUILTIN_NOT_FOUND = 127


def remove_surrounding_quotes(word: str) -> str:
    """Drop one pair of matching quotes around the word, if there is one."""
    if len(word) >= 2 and word[0] in _QUOTES and word[-1] == word[0]:
        return word[1:-1]
    return word


def build_argv(node: Optional[Token]) -> List[str]:
    """Return the command name followed by the WORD chain to its right.

    Raises ValueError when there is no command or it has no name.
    """
    if node is None or node.string is None:
        raise ValueError("cannot execute empty command")
    return [node.string] + [arg.string or "" for arg in node.iter_arguments()]


def is_state_modifying_builtin(name: Optional[str]) -> bool:
    """Tell whether the builtin changes the state of the shell itself."""
    return name in _STATE_MODIFYING


def run_builtin(
    node: Optional[Token],
    env: MutableSequence[str],
    exit_status: int = 0,
) -> int:
    """Run the builtin the node names and return its status.

    Arguments have their surrounding quotes removed first. The exit
    builtin raises ShellExit. An unknown name gives 127.
    """
    try:
        argv = build_argv(node)
    except ValueError:
        return 1
    args = [argv[0]] + [remove_surrounding_quotes(arg) for arg in argv[1:]]

    def run_exit(arguments: Sequence[str]) -> int:
        exit_builtin(arguments, env)
        return 0

    handlers: Dict[str, Callable[[Sequence[str]], int]] = {
        "echo": lambda arguments: echo(arguments, exit_status),
        "pwd": pwd,
        "env": lambda arguments: env_builtin(arguments, list(env)),
        "cd": cd,
        "export": lambda arguments: export(arguments, env),
        "unset": lambda arguments: unset(arguments, env),
        "exit": run_exit,
    }
    handler = handlers.get(args[0])
    if handler is None:
        return _BUILTIN_NOT_FOUND
    return handler(args)