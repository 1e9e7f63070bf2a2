"""Properties that tie the parser and the pretty-printer together."""

from protoc_schema import parse, pretty_print
from protoc_schema.models import (
    Enum,
    EnumField,
    Frequency,
    Message,
    MessageField,
    Oneof,
    Type,
)
from protoc_schema.parser.schema_parser import SchemaParser


def _sample_message() -> Message:
    return Message(
        name="Order",
        fields=[
            MessageField(Type.INT32, Frequency.REQUIRED, "order_id", 1),
            MessageField(Type.STRING, None, "customer", 2),
            MessageField(Type.STRING, Frequency.REPEATED, "tags", 3),
        ],
        enums=[
            Enum("Status", [EnumField("pending", 0), EnumField("shipped", 1)]),
            Enum("Priority", [EnumField("low", 0)]),
        ],
        messages=[
            Message(
                name="Line",
                fields=[MessageField(Type.STRING, Frequency.OPTIONAL, "sku", 1)],
                messages=[
                    Message(
                        name="Discount",
                        fields=[MessageField(Type.INT32, None, "percent", 1)],
                    )
                ],
            ),
            Message(name="Note"),
        ],
        oneofs=[
            Oneof(
                name="payment",
                fields=[
                    MessageField(Type.STRING, None, "card", 4),
                    MessageField(Type.STRING, None, "voucher", 5),
                ],
                enums=[Enum("Provider", [EnumField("visa", 1)])],
                oneofs=[Oneof(name="fallback", fields=[MessageField(Type.INT32, None, "cash", 6)])],
            )
        ],
    )


class TestRoundTrip:
    def test_printed_message_parses_back(self):
        message = _sample_message()
        assert parse(pretty_print(message, 0)) == message

    def test_printed_enum_parses_back(self):
        enum = Enum("Color", [EnumField("red", 0), EnumField("green", 1)])
        assert parse(pretty_print(enum, 0)) == enum

    def test_mixed_source_order_is_regrouped(self):
        source = """\
message M {
    message Inner {}
    string a = 1;
    enum E { x = 1; }
    int32 b = 2;
}"""
        message = parse(source)
        printed = pretty_print(message)
        assert printed == (
            "message M {\nstring a 1;\nint32 b 2;\nenum E {\n\t\tx = 1;\n}message Inner {\n}}"
        )
        assert parse(printed) == message


class TestIndentation:
    def test_each_nested_message_adds_one_tab(self):
        message = Message(
            name="A",
            fields=[MessageField(Type.STRING, None, "a", 1)],
            messages=[
                Message(
                    name="B",
                    fields=[MessageField(Type.STRING, None, "b", 1)],
                    messages=[
                        Message(name="C", fields=[MessageField(Type.STRING, None, "c", 1)])
                    ],
                )
            ],
        )
        lines = pretty_print(message, 1).split("\n")
        assert "\tstring a 1;" in lines
        assert "\t\tstring b 1;" in lines
        assert "\t\t\tstring c 1;" in lines

    def test_missing_frequency_has_no_leading_space(self):
        printed = pretty_print(Message(name="M", fields=[MessageField(Type.INT32, None, "n", 1)]))
        assert "\nint32 n 1;\n" in printed


class TestComments:
    def test_comments_between_tokens_do_not_change_the_tree(self):
        plain = """\
message Person {
    optional string name = 1;
    enum Kind { a = 1; }
    oneof contact { string email = 2; }
}"""
        commented = """\
// leading
message // after keyword
Person // after name
{ // after brace
    optional // after frequency
    string // after type
    name // after field name
    = // after equals
    1 // after number
    ; // after semicolon
    enum Kind // enum name
    { a // member
    = 1; }
    oneof contact { string email = 2; } // trailing
}
// end"""
        assert parse(commented) == parse(plain)


class TestCursorExhaustion:
    def test_trailing_whitespace_and_comments_are_consumed(self):
        parser = SchemaParser("message M { string a = 1; }\n\n  // one\n// two\n   ")
        parser.consume_message()
        assert parser.is_finished()
