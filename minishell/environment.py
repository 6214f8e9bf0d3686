"""Lookup and update of environment entries of the form NAME=value."""

from __future__ import annotations

import string
import sys
from typing import Iterable, List, Optional, Sequence, Tuple

from .envsort import env_compare, env_name

_ALPHA = frozenset(string.ascii_letters)
_ALNUM = frozenset(string.ascii_letters + string.digits)


def parse_env_variable(entry: Optional[str]) -> Optional[str]:
    """Return the name of an entry, or None for None."""
    if entry is None:
        return None
    return env_name(entry)


def is_variable(text: Optional[str]) -> bool:
    """Tell whether the text is a variable reference such as $NAME."""
    return bool(text) and text.startswith("$")


def variable_index(env: Sequence[str], name: str) -> Optional[int]:
    """Return the position of the entry with exactly this name, or None."""
    for index, entry in enumerate(env):
        if parse_env_variable(entry) == name:
            return index
    return None


def get_env_variable(env: Sequence[str], reference: Optional[str]) -> Optional[str]:
    """Return the whole entry a $NAME reference points to, or None."""
    if not is_variable(reference):
        return None
    index = variable_index(env, reference[1:])
    return None if index is None else env[index]


def is_variable_on_env(env: Sequence[str], entry: str) -> Optional[int]:
    """Return the position of the entry whose name matches that of entry.

    An environment entry starting with '=' has an empty name and matches
    anything.
    """
    for index, current in enumerate(env):
        if current.find("=") == 0 or env_compare(current, entry) == 0:
            return index
    return None


def check_variable_export(var: Optional[str], env: Sequence[str]) -> bool:
    """Tell whether an export argument is acceptable.

    Accepts ?=..., a bare alphabetic name, NAME=... whose name is letters
    then letters or digits, and a $NAME reference to an existing entry.
    A name broken by another character is reported on standard error.
    """
    if var is None:
        return False
    if var.startswith("?="):
        return True
    i = 0
    while i < len(var) and var[i] in _ALPHA:
        i += 1
    following = var[i] if i < len(var) else ""
    if i > 0 and following == "":
        return True
    if i == 0 and following != "$":
        return False
    if i > 0 and following not in _ALNUM and following != "=":
        sys.stderr.write(" identifiant non valable\n")
        return False
    if i == 0 and following == "$":
        return get_env_variable(env, var) is not None
    return True


def count_valid_variables(
    variables: Optional[Iterable[str]], env: Sequence[str]
) -> Tuple[int, int]:
    """Return how many export arguments are valid and how many are not."""
    if variables is None:
        return 0, 0
    valid = errors = 0
    for var in variables:
        if check_variable_export(var, env):
            valid += 1
        else:
            errors += 1
    return valid, errors


def _resolve_new_variable(env: Sequence[str], new_var: str) -> Optional[str]:
    equal = new_var.find("=")
    if equal != -1 and equal + 1 < len(new_var):
        return new_var
    if not new_var.startswith("$"):
        return new_var
    found = get_env_variable(env, new_var)
    if not found:
        return None
    value = found.partition("=")[2]
    if "=" in value:
        return value
    if value and value[0] in _ALPHA:
        return value
    print(f"bash: export: `{value}': not a valid identifier")
    return None


def add_variables_to_env(env: Sequence[str], new_vars: Iterable[str]) -> List[str]:
    """Return a new environment with the export arguments added.

    A $NAME argument stands for the value of NAME. An entry with a value
    replaces the entry of the same name; anything else valid is appended.
    Invalid arguments are skipped. The given environment is not changed.
    """
    new_env = list(env)
    for new_var in new_vars:
        resolved = _resolve_new_variable(env, new_var)
        if not resolved:
            continue
        if not check_variable_export(resolved, env):
            continue
        position = is_variable_on_env(new_env, resolved)
        if position is not None and "=" in resolved:
            new_env[position] = resolved
        else:
            new_env.append(resolved)
    return new_env