"""Render AST nodes back into canonical schema text.

The output grammar is not the input grammar: message fields are written as
``type name position;`` without ``=``, while enum fields keep it. Only leaf
lines are indented; block headers and closing braces never are.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import List, Union

from jinja2 import Environment, FileSystemLoader

from protoc_schema.models import Enum, EnumField, Message, MessageField, Node, Oneof

INDENT = "\t"


@lru_cache(maxsize=None)
def _get_template_env() -> Environment:
    template_dir = Path(__file__).parent.parent / "templates"
    return Environment(
        loader=FileSystemLoader(str(template_dir)),
        keep_trailing_newline=True,
    )


def pretty_print(node: Node, depth: int = 0) -> str:
    """Render ``node`` as schema text, indenting leaf lines from ``depth``."""
    if isinstance(node, Message):
        return _render_compound("message", node, depth, field_depth=depth)
    if isinstance(node, Oneof):
        return _render_compound("oneof", node, depth, field_depth=depth + 1)
    if isinstance(node, Enum):
        return _render_enum(node, depth)
    if isinstance(node, MessageField):
        return _render_message_field(node, depth)
    if isinstance(node, EnumField):
        return _render_enum_field(node, depth)
    raise TypeError(f"Cannot pretty-print {type(node).__name__}")


def _render_compound(
    keyword: str,
    node: Union[Message, Oneof],
    depth: int,
    field_depth: int,
) -> str:
    members: List[str] = [_render_message_field(f, field_depth) for f in node.fields]
    # Fields first, then enums, messages and oneofs, regardless of source order.
    for child in [*node.enums, *node.messages, *node.oneofs]:
        members.append(pretty_print(child, depth + 1))

    template = _get_template_env().get_template("compound.j2")
    return template.render(keyword=keyword, name=node.name, members=members)


def _render_enum(node: Enum, depth: int) -> str:
    template = _get_template_env().get_template("enum.j2")
    return template.render(
        name=node.name,
        fields=[_render_enum_field(f, depth + 1) for f in node.fields],
    )


def _render_message_field(node: MessageField, depth: int) -> str:
    template = _get_template_env().get_template("message_field.j2")
    return template.render(
        indent=INDENT * depth,
        frequency=node.frequency.value if node.frequency is not None else None,
        type=node.type.value,
        name=node.name,
        position=node.position,
    )


def _render_enum_field(node: EnumField, depth: int) -> str:
    template = _get_template_env().get_template("enum_field.j2")
    return template.render(
        indent=INDENT * depth,
        name=node.name,
        position=node.position,
    )
