"""
Token definitions for the jlang lexer.

This module defines the source span type shared by every later phase and
the tokens produced by the lexer:
- Arithmetic operators (+ - * /)
- Numeric literals (decimal and hexadecimal integers, floats)
- Identifiers and caller-classified keywords
"""

from enum import Enum
from dataclasses import dataclass, field
from typing import Union


# Signed 64-bit bounds for integer literals
INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1

DIGITS = frozenset("0123456789")
HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


@dataclass(frozen=True)
class Position:
    """
    A contiguous span of characters inside a named source buffer.

    Offsets and lengths count codepoints. The source string is shared, not
    copied, so every Position derived from one buffer refers to the same
    object.
    """
    start_index: int
    length: int
    source: str = field(repr=False)
    filename: str = "<unknown>"

    def __post_init__(self):
        if self.start_index < 0 or self.length < 0:
            raise ValueError(
                f"Position must not be negative: start={self.start_index}, length={self.length}"
            )
        if self.start_index + self.length > len(self.source):
            raise ValueError(
                f"Position {self} runs past the end of {self.filename!r} "
                f"({len(self.source)} characters)"
            )

    @property
    def end_index(self) -> int:
        """Offset one past the last covered character."""
        return self.start_index + self.length

    @property
    def text(self) -> str:
        """The covered slice of the source."""
        return self.source[self.start_index:self.end_index]

    @property
    def line(self) -> int:
        """1-based line of the first covered character."""
        return self.source.count("\n", 0, self.start_index) + 1

    @property
    def column(self) -> int:
        """1-based column of the first covered character."""
        line_start = self.source.rfind("\n", 0, self.start_index) + 1
        return self.start_index - line_start + 1

    def extend(self, other: "Position") -> "Position":
        """Return the smallest span covering both this span and ``other``."""
        if other.source is not self.source and other.source != self.source:
            raise ValueError("Cannot extend a position across different sources")
        if other.filename != self.filename:
            raise ValueError(
                f"Cannot extend a position in {self.filename!r} with one in {other.filename!r}"
            )
        start = min(self.start_index, other.start_index)
        end = max(self.end_index, other.end_index)
        return Position(start, end - start, self.source, self.filename)

    def __str__(self) -> str:
        return f"{{{self.start_index}:{self.length}}}"


class TokenType(Enum):
    """Enumeration of all token types in jlang."""

    # Operators
    PLUS = "Plus"
    MINUS = "Minus"
    STAR = "Star"
    SLASH = "Slash"

    # Literals
    INT = "Int"
    FLOAT = "Float"

    # Words
    IDENTIFIER = "Identifier"
    KEYWORD = "Keyword"


@dataclass(frozen=True)
class Token:
    """
    A lexical token in the jlang language.

    Operator tokens carry only their position. Literal tokens carry the
    parsed number, identifier and keyword tokens carry their raw text.
    """
    type: TokenType
    position: Position
    value: Union[int, float, str, None] = None

    @property
    def lexeme(self) -> str:
        """Raw text from source."""
        return self.position.text

    @property
    def is_operator(self) -> bool:
        return self.type in OPERATOR_SYMBOLS

    @property
    def is_literal(self) -> bool:
        return self.type in (TokenType.INT, TokenType.FLOAT)

    def __str__(self) -> str:
        if self.type in OPERATOR_SYMBOLS:
            return OPERATOR_SYMBOLS[self.type]
        if self.type == TokenType.FLOAT:
            return repr(self.value)
        if self.type == TokenType.KEYWORD:
            return f"Keyword({self.value})"
        return str(self.value)

    def __repr__(self) -> str:
        if self.value is None:
            return f"Token({self.type.value}, {self.position})"
        return f"Token({self.type.value}, {self.position}, {self.value!r})"


# Lookup table used by the lexer for single-character operators
OPERATORS = {
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.STAR,
    "/": TokenType.SLASH,
}

OPERATOR_SYMBOLS = {token_type: symbol for symbol, token_type in OPERATORS.items()}
