"""Requests used as keys for batching and de-duplicating upstream calls."""

from __future__ import annotations

from collections.abc import Iterable

from tailcall.http.method import Method
from tailcall.http.request import Request


class DataLoaderRequest:
    """A request identified by its URL and the values of selected headers.

    Two keys are equal when their URLs match and they carry the same values
    for the header names they consider. The method and the body are ignored.
    """

    def __init__(self, request: Request, headers: Iterable[str] = ()) -> None:
        self.request = request.copy()
        self.headers: tuple[str, ...] = tuple(sorted(set(headers)))

    def to_request(self) -> Request:
        """Return a GET request for the same URL and headers."""
        return Request(Method.GET, self.request.url, dict(self.request.headers))

    def _identity(self) -> tuple[str, tuple[tuple[str, str], ...]]:
        present = self.request.headers
        return (
            self.request.url,
            tuple(
                (name, present[name.lower()])
                for name in self.headers
                if name.lower() in present
            ),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DataLoaderRequest):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())

    def __repr__(self) -> str:
        return f"DataLoaderRequest({self.request!r}, headers={self.headers!r})"