"""Tidying of exported GraphQL SDL text."""

from __future__ import annotations


def print_schema(sdl: str) -> str:
    """Collapse runs of blank lines, turn leading tabs into spaces and trim the result."""
    lines: list[str] = []
    prev_empty = False
    for line in sdl.split("\n"):
        line = line.removesuffix("\r")
        if not line.strip():
            if not prev_empty:
                lines.append("")
            prev_empty = True
        else:
            if line.startswith("\t"):
                line = line.replace("\t", "  ")
            lines.append(line)
            prev_empty = False
    return "\n".join(lines).strip()