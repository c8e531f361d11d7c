# tailcall

Pieces for a gateway that answers GraphQL queries by calling upstream HTTP
APIs: JSON path lookups, URL templates with `{{a.b}}` placeholders, request and
response types, Cache-Control hints and a batching data loader. The package
uses only the standard library.

## Install

```
pip install .
```

To run the tests, install with the `test` extra and run `pytest`:

```
pip install ".[test]"
pytest
```

## What is inside

- `tailcall.json_like`: lookups over plain JSON values (`dict`, `list`, `str`,
  numbers, booleans, `None`).
  - `get_path(value, path)` follows keys and non-negative array indices and
    returns `None` when the path does not resolve.
  - `get_key(value, key)` returns a member of an object, or `None`.
  - `gather_path_matches(root, path)` collects `(value, parent)` pairs for every
    match of `path`, looking inside arrays at every level.
  - `group_by_key(pairs)` groups values by string or number keys (numbers are
    written as text, `1.0` as `"1"`); other keys are dropped.
  - `group_by(value, path)` combines the two.
- `tailcall.path_string`: `PathString` is the abstract interface with
  `path_string(path)`. `JsonPathString(value)` and `json_path_string(value,
  path)` return the string, number or boolean (`"true"`/`"false"`) at a path as
  text, and `None` for anything else.
- `tailcall.mustache`: `Mustache.parse(text)` splits text into `Literal` and
  `Expression` segments. Names in an expression start with a letter and hold
  letters and digits, separated by dots, with optional spaces around them.
  Text that does not parse becomes a single literal. `render(ctx)` fills each
  expression from `ctx.path_string(...)`; missing values render as empty text.
- `tailcall.print_schema`: `print_schema(sdl)` collapses runs of blank lines,
  turns tabs on tab-indented lines into two spaces and trims the result.
- `tailcall.http.method`: the `Method` enum (`GET`, `POST`, `PUT`, `PATCH`,
  `DELETE`, `HEAD`, `OPTIONS`, `CONNECT`, `TRACE`).
- `tailcall.http.request`: `Request(method, url, headers, body)` with header
  names kept in lower case, and `copy()`.
- `tailcall.http.response`: `Response(status, headers, body)`;
  `max_age(response)` reads `max-age` from the Cache-Control header as a
  `timedelta`, and `min_ttl(responses)` returns the smallest one in seconds, or
  `-1` when none has one.
- `tailcall.http.data_loader_request`: `DataLoaderRequest(request, headers)` is
  a hashable key made of the URL and the values of the named headers; the
  method and body do not count. `to_request()` gives back a GET request.
- `tailcall.http.data_loader`: `HttpClient` is the abstract async client with
  `execute(request)`. `HttpDataLoader(client, group_by_path, delay,
  max_batch_size)` gathers the keys asked for with `load_one(key)` within
  `delay` seconds, sends each distinct key once and hands the response to every
  caller. With `group_by_path`, a batch is merged into one request whose query
  string carries the parameters of every key, and the response body is split
  by the value at that path; its last step names the query parameter that
  identifies each key. `load(keys)` runs a batch directly.

## Examples

```python
from tailcall.mustache import Mustache
from tailcall.path_string import JsonPathString

template = Mustache.parse("http://localhost:3000/users/{{args.id}}")
print(template.render(JsonPathString({"args": {"id": 1}})))
# http://localhost:3000/users/1
```

```python
from tailcall.http.response import Response, max_age, min_ttl

responses = [
    Response(headers={"Cache-Control": "max-age=3600"}),
    Response(headers={"Cache-Control": "max-age=1800"}),
]
print(max_age(responses[0]))  # 1:00:00
print(min_ttl(responses))     # 1800
```

```python
import asyncio

from tailcall.http.data_loader import HttpClient, HttpDataLoader
from tailcall.http.data_loader_request import DataLoaderRequest
from tailcall.http.method import Method
from tailcall.http.request import Request
from tailcall.http.response import Response


class EchoClient(HttpClient):
    async def execute(self, request):
        return Response(body={"url": request.url})


async def main():
    loader = HttpDataLoader(EchoClient(), delay=0.001)
    key = DataLoaderRequest(Request(Method.GET, "http://localhost:3000/users/1"))
    results = await asyncio.gather(*(loader.load_one(key) for _ in range(10)))
    print(len(results), results[0].body)  # one upstream call, ten answers


asyncio.run(main())
```

## What it does not do

There is no GraphQL server, no schema or configuration handling and no
command to run. No HTTP client is included either: `HttpClient` only defines
the interface, and sending requests is left to the implementation you pass to
`HttpDataLoader`.