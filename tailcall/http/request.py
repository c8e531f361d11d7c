"""An outgoing HTTP request."""

from __future__ import annotations

from dataclasses import dataclass, field

from tailcall.http.method import Method


@dataclass
class Request:
    """A request ready to be sent upstream; header names are kept in lower case."""

    method: Method
    url: str
    headers: dict[str, str] = field(default_factory=dict)
    body: bytes = b""

    def __post_init__(self) -> None:
        self.headers = {name.lower(): value for name, value in self.headers.items()}

    def copy(self) -> Request:
        """Return a request equal to this one that shares no mutable state with it."""
        return Request(self.method, self.url, dict(self.headers), self.body)