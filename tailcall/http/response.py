"""Upstream responses and the caching hints they carry."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any


@dataclass
class Response:
    """A decoded upstream response; header names are kept in lower case."""

    status: int = 200
    headers: dict[str, str] = field(default_factory=dict)
    body: Any = None

    def __post_init__(self) -> None:
        self.headers = {name.lower(): value for name, value in self.headers.items()}


def _visible_ascii(text: str) -> bool:
    return all(c == "\t" or 32 <= ord(c) < 127 for c in text)


def max_age(response: Response) -> timedelta | None:
    """Return the ``max-age`` of the response's Cache-Control header, if any."""
    header = response.headers.get("cache-control")
    if header is None or not _visible_ascii(header):
        return None
    for directive in header.split(","):
        name, sep, value = directive.strip().partition("=")
        if name.strip().lower() != "max-age" or not sep:
            continue
        value = value.strip().strip('"')
        if not value.isdigit():
            return None
        return timedelta(seconds=int(value))
    return None


def min_ttl(responses: Iterable[Response]) -> int:
    """Return the smallest max-age in seconds among the responses, or -1 if none has one."""
    ttls = [int(age.total_seconds()) for age in map(max_age, responses) if age is not None]
    return min(ttls, default=-1)