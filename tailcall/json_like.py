"""Path lookups and grouping over plain JSON values."""

from __future__ import annotations

import re
from collections.abc import Sequence
from decimal import Decimal
from typing import Any

_INDEX = re.compile(r"\+?[0-9]+")


def get_path(value: Any, path: Sequence[str]) -> Any:
    """Follow ``path`` through objects and arrays.

    Array steps must be non-negative integer indices. Returns None when the
    path does not resolve.
    """
    current = value
    for token in path:
        if isinstance(current, list):
            if not _INDEX.fullmatch(token):
                return None
            index = int(token)
            if index >= len(current):
                return None
            current = current[index]
        elif isinstance(current, dict):
            if token not in current:
                return None
            current = current[token]
        else:
            return None
    return current


def get_key(value: Any, key: str) -> Any:
    """Return the member ``key`` of an object, or None."""
    if isinstance(value, dict):
        return value.get(key)
    return None


def _gather(root: Any, path: Sequence[str], out: list[tuple[Any, Any]]) -> None:
    if isinstance(root, list):
        for item in root:
            _gather(item, path, out)
    elif path and isinstance(root, dict) and path[0] in root:
        value = root[path[0]]
        tail = path[1:]
        if tail:
            _gather(value, tail, out)
        else:
            out.append((value, root))


def gather_path_matches(root: Any, path: Sequence[str]) -> list[tuple[Any, Any]]:
    """Collect ``(value, parent)`` pairs for every match of ``path``, flattening arrays."""
    out: list[tuple[Any, Any]] = []
    _gather(root, list(path), out)
    return out


def _number_key(number: int | float) -> str:
    f = float(number)
    if f.is_integer():
        return str(int(f))
    return format(Decimal(repr(f)), "f")


def group_by_key(pairs: Sequence[tuple[Any, Any]]) -> dict[str, list[Any]]:
    """Group values by their key; keys must be strings or numbers, others are dropped."""
    groups: dict[str, list[Any]] = {}
    for key, value in pairs:
        if isinstance(key, str):
            name = key
        elif isinstance(key, (int, float)) and not isinstance(key, bool):
            name = _number_key(key)
        else:
            continue
        groups.setdefault(name, []).append(value)
    return groups


def group_by(value: Any, path: Sequence[str]) -> dict[str, list[Any]]:
    """Group the objects found along ``path`` by the value at its last step."""
    return group_by_key(gather_path_matches(value, path))