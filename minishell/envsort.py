"""Ordering and copying of environment entries of the form NAME=value."""

from __future__ import annotations

from functools import cmp_to_key
from typing import Iterable, List, Mapping, Union


def env_name(entry: str) -> str:
    """Return the name part of an entry: everything before the first '='."""
    name, _, _ = entry.partition("=")
    return name


def env_compare(first: str, second: str) -> int:
    """Compare two entries by name only; return -1, 0 or 1."""
    a, b = env_name(first), env_name(second)
    if a == b:
        return 0
    return 1 if a > b else -1


def sort_env(entries: Iterable[str]) -> List[str]:
    """Return the entries sorted by name."""
    return sorted(entries, key=cmp_to_key(env_compare))


def is_env_sorted(entries: Iterable[str]) -> bool:
    """Tell whether the entries are already in name order."""
    items = list(entries)
    return all(env_compare(a, b) <= 0 for a, b in zip(items, items[1:]))


def duplicate_env(env: Union[Mapping[str, str], Iterable[str]]) -> List[str]:
    """Return a fresh list of NAME=value entries from a mapping or a sequence."""
    if isinstance(env, Mapping):
        return [f"{name}={value}" for name, value in env.items()]
    return [str(entry) for entry in env]