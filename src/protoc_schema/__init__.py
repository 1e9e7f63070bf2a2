"""Parser and pretty-printer for a small protobuf-style schema language."""

from protoc_schema.errors import ParseError, SchemaError
from protoc_schema.models import (
    Enum,
    EnumField,
    Frequency,
    Message,
    MessageField,
    Oneof,
    Type,
)
from protoc_schema.parser.schema_loader import parse, parse_enum, parse_message
from protoc_schema.printer.pretty_printer import pretty_print

__all__ = [
    "Enum",
    "EnumField",
    "Frequency",
    "Message",
    "MessageField",
    "Oneof",
    "ParseError",
    "SchemaError",
    "Type",
    "parse",
    "parse_enum",
    "parse_message",
    "pretty_print",
]
