"""
Error handling for the jlang lexer.

Provides the positioned error protocol shared by every phase: a short kind
tag, a human-readable message and the offending source span.
"""

from typing import Optional
from dataclasses import dataclass
from .tokens import Position


@dataclass
class Diagnostic:
    """A positioned message produced by one of the front end phases."""
    kind: str  # "NumberFormat", "UnknownToken", "TypeMismatch", ...
    message: str
    position: Position
    severity: str = "error"
    code: Optional[str] = None
    help_text: Optional[str] = None

    def __str__(self) -> str:
        result = f"{self.kind} Error: {self.message}\n"
        result += f"  --> {self.position.filename}:{self.position.line}:{self.position.column}\n"

        if self.help_text:
            result += f"  help: {self.help_text}\n"

        return result


class PositionedError(Exception):
    """
    Base class for errors that point at a span of source code.

    Both lexical and type errors are modelled the same way, so the
    diagnostics renderer can format either one.
    """

    def __init__(
        self,
        kind: str,
        message: str,
        position: Position,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(message)
        self.diagnostic = Diagnostic(
            kind=kind,
            message=message,
            position=position,
            code=code,
            help_text=help_text
        )

    @property
    def kind(self) -> str:
        return self.diagnostic.kind

    @property
    def message(self) -> str:
        return self.diagnostic.message

    @property
    def position(self) -> Position:
        return self.diagnostic.position

    def __str__(self) -> str:
        return str(self.diagnostic)


class LexerError(PositionedError):
    """Exception raised when the lexer cannot produce the next token."""


# Lexical error kinds
NUMBER_FORMAT = "NumberFormat"
UNKNOWN_TOKEN = "UnknownToken"
END_OF_FILE = "EndOfFile"
EMPTY_INPUT = "EmptyInput"

# Common error codes for categorization
ERROR_CODES = {
    "L001": NUMBER_FORMAT,
    "L002": UNKNOWN_TOKEN,
    "L003": END_OF_FILE,
    "L004": EMPTY_INPUT,
}


def create_invalid_number_error(reason: str, position: Position) -> LexerError:
    """Create an error for a malformed numeric literal."""
    return LexerError(
        NUMBER_FORMAT,
        reason,
        position,
        code="L001",
        help_text=f"Check the format of the literal '{position.text}'."
    )


def create_unknown_token_error(char: str, position: Position) -> LexerError:
    """Create an error for a character no token can start with."""
    if char.isprintable():
        help_text = f"The character '{char}' is not valid in jlang source code."
    else:
        help_text = f"Non-printable character (Unicode: U+{ord(char):04X}) is not allowed."

    return LexerError(
        UNKNOWN_TOKEN,
        "Unknown symbol or token.",
        position,
        code="L002",
        help_text=help_text
    )


def create_end_of_file_error(position: Position) -> LexerError:
    """Create an error for a token request past the end of the source."""
    return LexerError(END_OF_FILE, "Unexpected end of file.", position, code="L003")


def create_empty_input_error(position: Position) -> LexerError:
    """Create an error for a source buffer with no characters at all."""
    return LexerError(
        EMPTY_INPUT,
        "Source is empty.",
        position,
        code="L004",
        help_text="Pass at least one character of source code."
    )
