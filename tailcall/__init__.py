"""JSON path helpers, mustache templates and schema text tidying for an HTTP-backed GraphQL gateway."""

__version__ = "0.1.0"