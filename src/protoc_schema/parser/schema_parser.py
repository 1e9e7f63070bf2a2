"""Recursive descent parser for schema text.

Reads characters through a Cursor and produces the AST nodes defined in
protoc_schema.models.
"""

from __future__ import annotations

from typing import Callable, List, TypeVar

from protoc_schema.models import (
    Enum,
    EnumField,
    Frequency,
    Message,
    MessageField,
    Oneof,
    Schema,
    Type,
)

from .cursor import Cursor

# Tried first-match-wins, in this order.
TYPES = ("string", "int32")
FREQUENCIES = ("optional", "repeated", "required")

MESSAGE = "message"
ONEOF = "oneof"
ENUM = "enum"

_Compound = TypeVar("_Compound", Message, Oneof)
_Parsed = TypeVar("_Parsed", Message, Enum)


class SchemaParser:
    """Recursive descent parser over a single schema source."""

    def __init__(self, text: str):
        self._cursor = Cursor(text)

    # -- public API --

    def parse(self) -> Schema:
        """Parse one top-level message or enum spanning the whole input."""
        self._cursor.skip_whitespace_or_comment()
        if self.is_message():
            return self.parse_message()
        if self.is_enum():
            return self.parse_enum()
        raise self._cursor.error(f"{MESSAGE!r} or {ENUM!r}")

    def parse_message(self) -> Message:
        """Parse exactly one top-level message spanning the whole input."""
        message = self._guard_nesting(self.consume_message)
        self.expect_end()
        return message

    def parse_enum(self) -> Enum:
        """Parse exactly one top-level enum spanning the whole input."""
        enum = self._guard_nesting(self.consume_enum)
        self.expect_end()
        return enum

    def _guard_nesting(self, consume: Callable[[], _Parsed]) -> _Parsed:
        # Blocks nest by recursion; too deep a tree is reported as a parse error.
        try:
            return consume()
        except RecursionError:
            raise self._cursor.error("shallower nesting") from None

    def expect_end(self) -> None:
        """Consume trailing whitespace and comments; nothing else may remain."""
        self._cursor.skip_whitespace_or_comment()
        if not self._cursor.is_finished():
            raise self._cursor.error("end of input")

    def is_finished(self) -> bool:
        return self._cursor.is_finished()

    # -- lookahead predicates --

    def is_message_field(self) -> bool:
        return self._cursor.matches_any(TYPES + FREQUENCIES)

    def is_enum(self) -> bool:
        return self._cursor.matches(ENUM)

    def is_message(self) -> bool:
        return self._cursor.matches(MESSAGE)

    def is_oneof(self) -> bool:
        return self._cursor.matches(ONEOF)

    # -- compound types --

    def consume_message(self) -> Message:
        return self._consume_compound(MESSAGE, Message)

    def consume_oneof(self) -> Oneof:
        return self._consume_compound(ONEOF, Oneof)

    def _consume_compound(
        self, keyword: str, node_cls: Callable[..., _Compound]
    ) -> _Compound:
        """Parse: keyword name { member* }

        Messages and oneofs share this body grammar; only the introducing
        keyword and the node class built differ.
        """
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        cursor.consume(keyword)
        name = self._consume_block_open()

        fields: List[MessageField] = []
        enums: List[Enum] = []
        messages: List[Message] = []
        oneofs: List[Oneof] = []

        while (
            self.is_message_field()
            or self.is_enum()
            or self.is_message()
            or self.is_oneof()
        ):
            if self.is_message_field():
                fields.append(self.consume_message_field())
            elif self.is_enum():
                enums.append(self.consume_enum())
            elif self.is_message():
                messages.append(self.consume_message())
            else:
                oneofs.append(self.consume_oneof())
            cursor.skip_whitespace_or_comment()

        self._consume_block_close()
        return node_cls(
            name=name,
            fields=fields,
            enums=enums,
            messages=messages,
            oneofs=oneofs,
        )

    def consume_enum(self) -> Enum:
        """Parse: enum name { enum_field* }"""
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        cursor.consume(ENUM)
        name = self._consume_block_open()

        fields: List[EnumField] = []
        while cursor.current_char("'}'") != "}":
            start = cursor.position
            fields.append(self.consume_enum_field())
            if cursor.position == start:
                raise cursor.error("enum field")

        self._consume_block_close()
        return Enum(name=name, fields=fields)

    def _consume_block_open(self) -> str:
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        name = cursor.consume_name()
        cursor.skip_whitespace_or_comment()
        cursor.skip("{")
        cursor.skip_whitespace_or_comment()
        return name

    def _consume_block_close(self) -> None:
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        cursor.skip("}")
        cursor.skip_whitespace_or_comment()

    # -- fields --

    def consume_message_field(self) -> MessageField:
        """Parse: [frequency] type name = number ;"""
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        frequency = self.consume_frequency()
        cursor.skip_whitespace_or_comment()
        field_type = self.consume_type()
        cursor.skip_whitespace_or_comment()
        name = cursor.consume_name()
        position = self._consume_position()
        return MessageField(
            type=field_type,
            frequency=frequency,
            name=name,
            position=position,
        )

    def consume_enum_field(self) -> EnumField:
        """Parse: name = number ;"""
        self._cursor.skip_whitespace_or_comment()
        name = self._cursor.consume_name()
        position = self._consume_position()
        return EnumField(name=name, position=position)

    def _consume_position(self) -> int:
        # "=" and ";" are stepped over when present, so "name 1;" also parses.
        cursor = self._cursor
        cursor.skip_whitespace_or_comment()
        cursor.skip("=")
        cursor.skip_whitespace_or_comment()
        position = cursor.consume_number()
        cursor.skip_whitespace_or_comment()
        cursor.skip(";")
        cursor.skip_whitespace_or_comment()
        return position

    def consume_type(self) -> Type:
        keyword = self._cursor.consume_any(TYPES)
        if keyword is None:
            raise self._cursor.error("field type (" + " or ".join(TYPES) + ")")
        return Type(keyword)

    def consume_frequency(self) -> Frequency | None:
        keyword = self._cursor.consume_any(FREQUENCIES)
        if keyword is None:
            return None
        return Frequency(keyword)
