"""
jlang Lexer - handles tokenizing source code

Walks the source one codepoint at a time with a single forward cursor.
Numeric literals are the only tricky part: decimal integers, floats (with
a decimal point or an ``f`` suffix) and ``0x`` hexadecimal integers all
start the same way, so the rules in ``_tokenize_number`` are checked in a
fixed order.
"""

import logging
from typing import FrozenSet, Iterable, List, Optional, Tuple
from dataclasses import dataclass

from .tokens import (
    Token, TokenType, Position, OPERATORS, DIGITS, HEX_DIGITS, INT64_MIN, INT64_MAX
)
from .errors import (
    LexerError, create_invalid_number_error, create_unknown_token_error,
    create_end_of_file_error, create_empty_input_error
)

logger = logging.getLogger(__name__)

MAX_DECIMAL_DIGITS = len(str(INT64_MAX))


class Lexer:
    """
    jlang lexical analyzer.

    Converts source code text into a list of tokens. Lexing stops at the
    first error; the error is kept in ``errors`` and no tokens are returned.
    """

    def __init__(self, source: str, filename: str = "<unknown>",
                 keywords: Optional[Iterable[str]] = None):
        """
        Initialize the lexer with source code.

        Args:
            source: Source code string
            filename: Name of source file for error reporting
            keywords: Words to emit as keyword tokens instead of identifiers
        """
        self.source = source
        self.filename = filename
        self.keywords: FrozenSet[str] = frozenset(keywords or ())
        self.pos = 0
        self.tokens: List[Token] = []
        self.errors: List[LexerError] = []

    def tokenize(self) -> List[Token]:
        """
        Tokenize the entire source code.

        Returns:
            List of tokens, empty if an error was recorded
        """
        self.pos = 0
        self.tokens.clear()
        self.errors.clear()

        if not self.source:
            self.errors.append(create_empty_input_error(self._position(0, 0)))
            return self.tokens

        self._skip_whitespace()
        while self.pos < len(self.source):
            try:
                token = self._next_token()
            except LexerError as e:
                logger.debug("Lexing %s failed at %s: %s", self.filename, e.position, e.message)
                self.errors.append(e)
                self.tokens.clear()
                break

            self.tokens.append(token)
            self._skip_whitespace()

        return self.tokens

    def _next_token(self) -> Token:
        """Get the next token from the source."""
        if self.pos >= len(self.source):
            raise create_end_of_file_error(self._position(len(self.source), 0))

        start_pos = self.pos
        current_char = self.source[self.pos]

        # Basic one character tokens
        token_type = OPERATORS.get(current_char)
        if token_type is not None:
            self._advance()
            return Token(token_type, self._position_from(start_pos))

        if current_char in DIGITS:
            return self._tokenize_number(start_pos)

        if current_char.isalpha():
            return self._tokenize_identifier_or_keyword(start_pos)

        raise create_unknown_token_error(current_char, self._position(start_pos, 1))

    def _tokenize_number(self, start_pos: int) -> Token:
        """Tokenize integer, float or hexadecimal literals."""
        digits: List[str] = []
        dots = 0
        is_float = False
        is_hex = False

        while self.pos < len(self.source):
            char = self.source[self.pos]
            lower = char.lower()

            # A trailing 'f' makes it a float, but in hex it's just a digit
            if lower == "f" and not is_hex:
                is_float = True
                self._advance()
                break

            if lower == "x" and not is_hex:
                # Hex is written 0xABCD, so only a lone zero may precede the x
                if digits != ["0"]:
                    break
                is_hex = True
                self._advance()
                digits.clear()
                continue

            if char == ".":
                if is_hex:
                    self._advance()
                    raise create_invalid_number_error(
                        "Hex number cannot be a float.", self._position_from(start_pos)
                    )
                dots += 1
                # 12.34. ends the literal before the second dot
                if dots > 1:
                    break
                is_float = True
            elif char not in DIGITS and not (is_hex and char in HEX_DIGITS):
                break

            digits.append(char)
            self._advance()

        literal = "".join(digits)

        if literal.endswith("."):
            raise create_invalid_number_error(
                "Expected number after decimal point.", self._position_from(start_pos)
            )

        if not literal:
            raise create_invalid_number_error("Expected number.", self._position_from(start_pos))

        position = self._position_from(start_pos)
        if not is_float and not is_hex:
            literal = literal.lstrip("0") or "0"
            # Longer than INT64_MAX; also keeps int() clear of the str conversion digit limit
            if len(literal) > MAX_DECIMAL_DIGITS:
                raise self._out_of_range_error(position)

        try:
            if is_float:
                return Token(TokenType.FLOAT, position, float(literal))
            value = int(literal, 16) if is_hex else int(literal, 10)
        except ValueError as e:
            # The accumulation rules above only let well-formed numerals through
            raise RuntimeError(f"lexer produced a malformed numeral {literal!r}") from e

        if not INT64_MIN <= value <= INT64_MAX:
            raise self._out_of_range_error(position)

        return Token(TokenType.INT, position, value)

    @staticmethod
    def _out_of_range_error(position: Position) -> LexerError:
        return create_invalid_number_error(
            "Integer literal out of range for a 64-bit signed integer.", position
        )

    def _tokenize_identifier_or_keyword(self, start_pos: int) -> Token:
        """Tokenize an identifier, or a keyword if the caller listed it."""
        # First character is already validated as identifier start
        self._advance()

        while self.pos < len(self.source) and self.source[self.pos].isalnum():
            self._advance()

        position = self._position_from(start_pos)
        lexeme = position.text
        token_type = TokenType.KEYWORD if lexeme in self.keywords else TokenType.IDENTIFIER

        return Token(token_type, position, lexeme)

    def _skip_whitespace(self):
        """Skip a run of whitespace."""
        while self.pos < len(self.source) and self.source[self.pos].isspace():
            self._advance()

    def _advance(self):
        """Advance position by one character."""
        if self.pos < len(self.source):
            self.pos += 1

    def _position(self, start: int, length: int) -> Position:
        return Position(start, length, self.source, self.filename)

    def _position_from(self, start: int) -> Position:
        """Span from ``start`` up to the current character."""
        return self._position(start, self.pos - start)

    def has_errors(self) -> bool:
        """Check if lexer encountered any errors."""
        return len(self.errors) > 0


@dataclass(frozen=True)
class LexResult:
    """Outcome of lexing one source buffer: either tokens or an error."""
    tokens: Tuple[Token, ...] = ()
    error: Optional[LexerError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> List[Token]:
        """Return the tokens, raising the lexer error if there is one."""
        if self.error is not None:
            raise self.error
        return list(self.tokens)


def lex(filename: str, source: str, keywords: Optional[Iterable[str]] = None) -> LexResult:
    """
    Tokenize ``source`` and report the outcome as a value.

    Args:
        filename: Filename for error reporting
        source: Source code string
        keywords: Words to emit as keyword tokens

    Returns:
        LexResult holding the tokens, or the first lexical error
    """
    lexer = Lexer(source, filename, keywords)
    tokens = lexer.tokenize()

    if lexer.has_errors():
        return LexResult(error=lexer.errors[0])

    logger.debug("Lexed %s into %d tokens", filename, len(tokens))
    return LexResult(tokens=tuple(tokens))


def tokenize_string(source: str, filename: str = "<string>",
                    keywords: Optional[Iterable[str]] = None) -> List[Token]:
    """
    Convenience function to tokenize a source string.

    Args:
        source: Source code string
        filename: Filename for error reporting
        keywords: Words to emit as keyword tokens

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
    """
    return lex(filename, source, keywords).unwrap()


def tokenize_file(filepath: str, keywords: Optional[Iterable[str]] = None) -> List[Token]:
    """
    Convenience function to tokenize a source file.

    Args:
        filepath: Path to source file
        keywords: Words to emit as keyword tokens

    Returns:
        List of tokens

    Raises:
        LexerError: If lexing fails
        IOError: If file cannot be read
    """
    with open(filepath, 'r', encoding='utf-8') as f:
        source = f.read()

    return tokenize_string(source, filepath, keywords)
