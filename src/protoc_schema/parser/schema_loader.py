"""Entry points for turning schema text into AST nodes."""

from __future__ import annotations

import logging

from protoc_schema.models import Enum, Message, Schema

from .schema_parser import SchemaParser

logger = logging.getLogger(__name__)


def parse(text: str) -> Schema:
    """Parse schema text holding one top-level message or enum.

    Raises ParseError if the text does not follow the grammar, nests blocks
    deeper than the interpreter can recurse, or has anything other than
    whitespace and comments after the top-level block.
    """
    schema = SchemaParser(text).parse()
    _log_parsed(schema)
    return schema


def parse_message(text: str) -> Message:
    """Parse schema text holding exactly one top-level message."""
    message = SchemaParser(text).parse_message()
    _log_parsed(message)
    return message


def parse_enum(text: str) -> Enum:
    """Parse schema text holding exactly one top-level enum."""
    enum = SchemaParser(text).parse_enum()
    _log_parsed(enum)
    return enum


def _log_parsed(schema: Schema) -> None:
    if isinstance(schema, Enum):
        logger.debug("Parsed enum %s: %d field(s)", schema.name, len(schema.fields))
        return
    logger.debug(
        "Parsed message %s: %d field(s), %d enum(s), %d message(s), %d oneof(s)",
        schema.name,
        len(schema.fields),
        len(schema.enums),
        len(schema.messages),
        len(schema.oneofs),
    )
