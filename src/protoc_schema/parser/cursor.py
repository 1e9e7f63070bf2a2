"""Character cursor over schema source text.

Positions count characters, not bytes. The cursor only moves forward.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from protoc_schema.errors import ParseError

logger = logging.getLogger(__name__)

# ASCII whitespace; vertical tab is not included.
_WHITESPACE = frozenset(" \t\n\r\f")
_DIGITS = frozenset("0123456789")


def _is_name_char(ch: str) -> bool:
    return ch == "_" or "a" <= ch <= "z" or "A" <= ch <= "Z"


class Cursor:
    """Position-tracked, read-only view of the input text."""

    def __init__(self, text: str):
        self._text = text
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def location(self) -> Tuple[int, int]:
        """Return the 1-based (line, column) of the current position."""
        consumed = self._text[: self._pos]
        line = consumed.count("\n") + 1
        column = self._pos - consumed.rfind("\n")
        return line, column

    def is_finished(self) -> bool:
        return self._pos == len(self._text)

    # -- lookahead --

    def peek_current(self) -> Optional[str]:
        if self._pos < len(self._text):
            return self._text[self._pos]
        return None

    def peek_next(self) -> Optional[str]:
        if self._pos + 1 < len(self._text):
            return self._text[self._pos + 1]
        return None

    def current_char(self, expected: str) -> str:
        """Return the current character, failing at end of input."""
        ch = self.peek_current()
        if ch is None:
            raise self.error(expected)
        return ch

    def matches(self, literal: str) -> bool:
        return self._text.startswith(literal, self._pos)

    def matches_any(self, choices: Sequence[str]) -> bool:
        return any(self.matches(choice) for choice in choices)

    # -- consuming --

    def consume(self, literal: str) -> str:
        if not self.matches(literal):
            raise self.error(repr(literal))
        self._pos += len(literal)
        return literal

    def consume_any(self, choices: Sequence[str]) -> Optional[str]:
        """Consume the first candidate that matches, in the given order."""
        for choice in choices:
            if self.matches(choice):
                return self.consume(choice)
        return None

    def skip(self, ch: str) -> bool:
        """Step over ``ch`` if it is the current character."""
        if self.current_char(repr(ch)) == ch:
            self._pos += 1
            return True
        return False

    def consume_name(self) -> str:
        self.skip_whitespace_or_comment()
        start = self._pos
        while _is_name_char(self.current_char("name")):
            self._pos += 1
        return self._text[start : self._pos]

    def consume_number(self) -> int:
        # No upper bound: field numbers are not range-checked.
        value = 0
        ch = self.current_char("number")
        while ch in _DIGITS:
            value = value * 10 + int(ch)
            self._pos += 1
            ch = self.current_char("number")
        return value

    # -- whitespace and comments --

    def skip_whitespace(self) -> bool:
        skipped = False
        while self.peek_current() in _WHITESPACE:
            self._pos += 1
            skipped = True
        return skipped

    def skip_comment(self) -> bool:
        """Skip a // comment up to, not past, the next newline."""
        if self.peek_current() == "/" and self.peek_next() == "/":
            end = self._text.find("\n", self._pos)
            self._pos = len(self._text) if end == -1 else end
            return True
        return False

    def skip_whitespace_or_comment(self) -> None:
        while self.skip_whitespace() or self.skip_comment():
            pass

    # -- errors --

    def error(self, expected: str) -> ParseError:
        """Build a ParseError for the current position."""
        line, column = self.location()
        ch = self.peek_current()
        found = "end of input" if ch is None else repr(ch)
        logger.debug(
            "Parse failed at offset %d (line %d:%d): expected %s, got %s",
            self._pos, line, column, expected, found,
        )
        return ParseError(expected, self._pos, line, column, found=found)
