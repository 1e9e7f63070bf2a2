"""AST node definitions for schema files."""

from __future__ import annotations

import enum
from dataclasses import dataclass
from functools import total_ordering
from typing import Optional, Tuple, Union


@total_ordering
class _KeywordEnum(enum.Enum):
    """Enum whose values are schema keywords, ordered by declaration."""

    def __lt__(self, other):
        if self.__class__ is not other.__class__:
            return NotImplemented
        members = list(self.__class__)
        return members.index(self) < members.index(other)


class Type(_KeywordEnum):
    STRING = "string"
    INT32 = "int32"


class Frequency(_KeywordEnum):
    OPTIONAL = "optional"
    REPEATED = "repeated"
    REQUIRED = "required"


@total_ordering
@dataclass(frozen=True)
class MessageField:
    """A field declaration: [frequency] type name = position;

    ``frequency`` is None when the source had no qualifier keyword.
    """

    type: Type
    frequency: Optional[Frequency]
    name: str
    position: int

    def __lt__(self, other):
        if not isinstance(other, MessageField):
            return NotImplemented
        return self._sort_key() < other._sort_key()

    def _sort_key(self):
        # int32 fields sort before string fields; an absent frequency sorts
        # before any present one.
        return (
            _TYPE_RANK[self.type],
            self.frequency is not None,
            self.frequency,
            self.name,
            self.position,
        )


_TYPE_RANK = {Type.INT32: 0, Type.STRING: 1}


def _freeze_children(node, *names: str) -> None:
    # Child sequences are stored as tuples so nodes stay immutable and hashable.
    for name in names:
        object.__setattr__(node, name, tuple(getattr(node, name)))


@dataclass(frozen=True, order=True)
class EnumField:
    """An enum member: name = position;"""

    name: str
    position: int


@dataclass(frozen=True, order=True)
class Enum:
    name: str
    fields: Tuple[EnumField, ...] = ()

    def __post_init__(self):
        _freeze_children(self, "fields")


@dataclass(frozen=True, order=True)
class Oneof:
    """A oneof block. Same body shape as a message.

    Comparison runs over name, messages, enums, fields, oneofs, in that order.
    """

    name: str
    messages: Tuple[Message, ...] = ()
    enums: Tuple[Enum, ...] = ()
    fields: Tuple[MessageField, ...] = ()
    oneofs: Tuple[Oneof, ...] = ()

    def __post_init__(self):
        _freeze_children(self, "messages", "enums", "fields", "oneofs")


@dataclass(frozen=True, order=True)
class Message:
    """A message definition, possibly containing nested blocks."""

    name: str
    messages: Tuple[Message, ...] = ()
    enums: Tuple[Enum, ...] = ()
    fields: Tuple[MessageField, ...] = ()
    oneofs: Tuple[Oneof, ...] = ()

    def __post_init__(self):
        _freeze_children(self, "messages", "enums", "fields", "oneofs")


Schema = Union[Message, Enum]
Node = Union[Message, Oneof, Enum, MessageField, EnumField]
