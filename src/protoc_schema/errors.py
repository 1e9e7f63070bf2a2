"""Exceptions raised while reading schema text."""

from __future__ import annotations


class SchemaError(Exception):
    """Base class for errors raised by protoc_schema."""


class ParseError(SchemaError):
    """Raised when the parser encounters unexpected input.

    The whole parse is abandoned; no partial tree is returned.
    """

    def __init__(
        self,
        expected: str,
        position: int,
        line: int,
        column: int,
        found: str | None = None,
    ):
        self.expected = expected
        self.position = position
        self.line = line
        self.column = column
        self.found = found
        message = f"Line {line}:{column}: expected {expected}"
        if found is not None:
            message += f", got {found}"
        super().__init__(message)
