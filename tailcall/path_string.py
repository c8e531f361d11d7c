"""Rendering values found at a path as plain strings."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import Any

from tailcall.json_like import get_path


class PathString(ABC):
    """Something that can turn a dotted path into a string value."""

    @abstractmethod
    def path_string(self, path: Sequence[str]) -> str | None:
        """Return the string at ``path``, or None when there is none."""


def _number_text(number: int | float) -> str:
    if isinstance(number, int):
        return str(number)
    text = repr(number)
    if "e" in text:
        mantissa, exponent = text.split("e")
        return f"{mantissa}e{int(exponent)}"
    return text


def json_path_string(value: Any, path: Sequence[str]) -> str | None:
    """Return the string, number or boolean at ``path`` inside ``value`` as text."""
    found = get_path(value, path)
    if isinstance(found, str):
        return found
    if isinstance(found, bool):
        return "true" if found else "false"
    if isinstance(found, (int, float)):
        return _number_text(found)
    return None


class JsonPathString(PathString):
    """A plain JSON value looked up by path."""

    def __init__(self, value: Any) -> None:
        self.value = value

    def path_string(self, path: Sequence[str]) -> str | None:
        return json_path_string(self.value, path)