"""HTTP request methods."""

from __future__ import annotations

from enum import Enum


class Method(str, Enum):
    """An HTTP method; GET is the default."""

    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    HEAD = "HEAD"
    OPTIONS = "OPTIONS"
    CONNECT = "CONNECT"
    TRACE = "TRACE"