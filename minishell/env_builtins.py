"""The env, export and unset builtins."""

from __future__ import annotations

import string
import sys
from typing import List, MutableSequence, Optional, Sequence, TextIO

from .environment import (
    add_variables_to_env,
    count_valid_variables,
    get_env_variable,
)
from .envsort import sort_env

_DECLARE = "declare -x "
_ALNUM = frozenset(string.ascii_letters + string.digits)


def _stream(out: Optional[TextIO]) -> TextIO:
    return sys.stdout if out is None else out


def _write_entries(entries: Sequence[str], out: TextIO) -> None:
    out.write("".join(f"{entry}\n" for entry in entries))
    out.flush()


def _check_variable_reference(env: Sequence[str], reference: str, out: TextIO) -> int:
    found = get_env_variable(env, reference)
    if found is None:
        return 0
    value = found.partition("=")[2]
    if value and "=" not in value and found:
        out.write(f"env: «{value}»: No such file or directory\n")
        return 127
    return 0


def _check_env_arguments(arguments: Sequence[str], env: Sequence[str], out: TextIO) -> int:
    for argument in arguments:
        if "=" in argument:
            continue
        if not argument.startswith("$"):
            out.write(f"env: '{argument}': No such file or directory\n")
            return 1
        status = _check_variable_reference(env, argument, out)
        if status:
            return status
    return 0


def env_builtin(
    args: Optional[Sequence[str]],
    env: Optional[Sequence[str]],
    out: Optional[TextIO] = None,
) -> int:
    """Print the environment, with any NAME=value arguments added.

    The given environment is not changed. A plain word that is not an
    assignment gives 1; a $NAME whose value is a bare word gives 127.
    """
    stream = _stream(out)
    if env is None or args is None:
        return 1
    if len(args) < 2 or args[1] == "":
        _write_entries(list(env), stream)
        return 0
    arguments = list(args[1:])
    status = _check_env_arguments(arguments, env, stream)
    if status:
        return status
    _write_entries(add_variables_to_env(env, arguments), stream)
    return 0


def quote_value(entry: Optional[str]) -> Optional[str]:
    """Put the value of NAME=value between double quotes; leave NAME alone."""
    if entry is None:
        return None
    name, equal, value = entry.partition("=")
    if not equal:
        return entry
    return f'{name}="{value}"'


def format_export_entry(entry: Optional[str]) -> Optional[str]:
    """Return the entry quoted and prefixed with 'declare -x '.

    Returns None for None and for an entry that already has the prefix.
    """
    quoted = quote_value(entry)
    if quoted is None or quoted.startswith(_DECLARE):
        return None
    return _DECLARE + quoted


def display_export(env: Optional[Sequence[str]], out: Optional[TextIO] = None) -> int:
    """Print every entry, sorted by name, as declare -x "entry"."""
    if env is None:
        return 1
    stream = _stream(out)
    stream.write("".join(f'{_DECLARE}"{entry}"\n' for entry in sort_env(env)))
    stream.flush()
    return 0


def export(
    args: Optional[Sequence[str]],
    env: Optional[MutableSequence[str]],
    out: Optional[TextIO] = None,
) -> int:
    """Add or replace variables in env, or list them when there is no argument.

    The list env is updated in place. Returns 1 when no argument is valid.
    """
    if env is None or args is None:
        return 1
    if len(args) < 2 or args[1] == "":
        return display_export(env, out)
    arguments = list(args[1:])
    valid, _errors = count_valid_variables(arguments, env)
    if not valid:
        return 1
    env[:] = add_variables_to_env(env, arguments)
    return 0


def is_valid_unset_name(name: str, out: Optional[TextIO] = None) -> bool:
    """Tell whether a name holds only letters and digits; report it if not."""
    if all(char in _ALNUM for char in name):
        return True
    _stream(out).write(f"unset: {name}: invalid parameter name\n")
    return False


def unset(
    args: Sequence[str],
    env: MutableSequence[str],
    out: Optional[TextIO] = None,
) -> int:
    """Remove every entry that starts with one of the names, then sort env.

    The list env is updated in place. Invalid names are reported but still
    used for matching.
    """
    names = list(args[1:])
    for name in names:
        is_valid_unset_name(name, out)
    kept: List[str] = [
        entry for entry in env if not any(entry.startswith(name) for name in names)
    ]
    env[:] = sort_env(kept)
    return 0