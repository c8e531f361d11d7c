"""Batching loader that groups upstream HTTP calls made close together."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from collections.abc import Iterable, Sequence
from dataclasses import replace
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from tailcall.http.data_loader_request import DataLoaderRequest
from tailcall.http.request import Request
from tailcall.http.response import Response
from tailcall.json_like import group_by

_DEFAULT_KEY = "id"


class HttpClient(ABC):
    """Something that sends a request upstream and returns its response."""

    @abstractmethod
    async def execute(self, request: Request) -> Response:
        """Send ``request`` and return the decoded response."""


def _query_pairs(url: str) -> list[tuple[str, str]]:
    return parse_qsl(urlsplit(url).query, keep_blank_values=True)


def _extend_query(url: str, pairs: Sequence[tuple[str, str]]) -> str:
    if not pairs:
        return url
    parts = urlsplit(url)
    encoded = urlencode(list(pairs))
    query = f"{parts.query}&{encoded}" if parts.query else encoded
    return urlunsplit(parts._replace(query=query))


class HttpDataLoader:
    """Collects keys requested within ``delay`` seconds and loads them together.

    Without ``group_by_path`` every distinct key becomes its own request, sent
    concurrently. With it, the keys of a batch are merged into one request whose
    query string holds all their parameters; the response body is then split
    by the value found along ``group_by_path``, whose last step names the query
    parameter that identifies each key.
    """

    def __init__(
        self,
        client: HttpClient,
        group_by_path: Sequence[str] | None = None,
        delay: float = 0.0,
        max_batch_size: int = 1000,
    ) -> None:
        self.client = client
        self.group_by_path = list(group_by_path) if group_by_path is not None else None
        self.delay = delay
        self.max_batch_size = max_batch_size
        self._pending: dict[DataLoaderRequest, list[asyncio.Future]] = {}
        self._timer: asyncio.Task | None = None
        self._tasks: set[asyncio.Task] = set()

    def _path(self) -> list[str]:
        return self.group_by_path or [_DEFAULT_KEY]

    def _key(self) -> str:
        return self._path()[-1]

    async def load(
        self, keys: Iterable[DataLoaderRequest]
    ) -> dict[DataLoaderRequest, Response]:
        """Load every key at once and return the response for each."""
        keys = list(keys)
        if not keys:
            return {}
        if self.group_by_path is None:
            responses = await asyncio.gather(
                *(self.client.execute(key.to_request()) for key in keys)
            )
            return dict(zip(keys, responses))
        return await self._load_batched(keys)

    async def _load_batched(
        self, keys: list[DataLoaderRequest]
    ) -> dict[DataLoaderRequest, Response]:
        keys = sorted(keys, key=lambda k: k.to_request().url)
        request = keys[0].to_request()
        extra = [pair for key in keys[1:] for pair in _query_pairs(key.to_request().url)]
        request.url = _extend_query(request.url, extra)

        response = await self.client.execute(request)
        groups = group_by(response.body, self._path())
        key_name = self._key()

        results: dict[DataLoaderRequest, Response] = {}
        for key in keys:
            params = dict(_query_pairs(key.to_request().url))
            if key_name not in params:
                raise ValueError(f"Unable to find key {key_name} in query params")
            found = groups.get(params[key_name])
            results[key] = replace(response, body=found[0] if found else None)
        return results

    async def load_one(self, key: DataLoaderRequest) -> Response | None:
        """Queue ``key`` for the next batch and wait for its response."""
        loop = asyncio.get_running_loop()
        future: asyncio.Future = loop.create_future()
        self._pending.setdefault(key, []).append(future)
        if len(self._pending) >= self.max_batch_size:
            self._dispatch()
        elif self._timer is None:
            self._timer = loop.create_task(self._dispatch_later())
        return await future

    async def _dispatch_later(self) -> None:
        await asyncio.sleep(self.delay)
        self._timer = None
        self._dispatch()

    def _dispatch(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
        batch, self._pending = self._pending, {}
        if not batch:
            return
        task = asyncio.get_running_loop().create_task(self._run(batch))
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)

    async def _run(self, batch: dict[DataLoaderRequest, list[asyncio.Future]]) -> None:
        try:
            results = await self.load(list(batch))
        except Exception as error:  # delivered to every waiter of the batch
            for futures in batch.values():
                for future in futures:
                    if not future.done():
                        future.set_exception(error)
            return
        for key, futures in batch.items():
            value = results.get(key)
            for future in futures:
                if not future.done():
                    future.set_result(value)