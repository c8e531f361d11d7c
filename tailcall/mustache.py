"""Templates with ``{{a.b}}`` placeholders filled from a path lookup."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Union

from tailcall.path_string import PathString

_WS = r"[ \t\r\n]*"
_NAME_BODY = r"[A-Za-z][A-Za-z0-9]*"
_NAME = _WS + _NAME_BODY + _WS
_EXPRESSION = re.compile(r"\{\{(" + _NAME + r"(?:\." + _NAME + r")*)\}\}")
_LITERAL = re.compile(r"[^{]+")
_NAME_ONLY = re.compile(_NAME_BODY)


@dataclass(frozen=True)
class Literal:
    """Text copied into the output unchanged."""

    text: str


@dataclass(frozen=True)
class Expression:
    """A path whose value is looked up while rendering."""

    parts: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "parts", tuple(self.parts))


Segment = Union[Literal, Expression]


@dataclass(frozen=True)
class Mustache:
    """A sequence of literal and expression segments."""

    segments: tuple[Segment, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "segments", tuple(self.segments))

    @classmethod
    def parse(cls, text: str) -> Mustache:
        """Parse ``text``; anything that does not parse becomes a single literal."""
        segments: list[Segment] = []
        pos = 0
        while pos < len(text):
            match = _EXPRESSION.match(text, pos)
            if match:
                segments.append(Expression(tuple(_NAME_ONLY.findall(match.group(1)))))
                pos = match.end()
                continue
            match = _LITERAL.match(text, pos)
            if match:
                segments.append(Literal(match.group(0)))
                pos = match.end()
                continue
            break
        if not segments:
            return cls((Literal(text),))
        return cls(tuple(segments))

    def render(self, ctx: PathString) -> str:
        """Fill every expression from ``ctx``; missing values render as empty text."""
        return "".join(
            segment.text
            if isinstance(segment, Literal)
            else ctx.path_string(list(segment.parts)) or ""
            for segment in self.segments
        )