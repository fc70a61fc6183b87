"""
jlang Lexer Package

Implements the tokenizer for the jlang expression language together with
the source span type that every later phase uses for diagnostics.

Key Features:
- Decimal, hexadecimal and floating-point literal disambiguation
- Identifier capture with optional keyword classification
- Positioned errors for malformed input
"""

from .tokens import Token, TokenType, Position
from .lexer import Lexer, LexResult, lex, tokenize_string, tokenize_file
from .errors import Diagnostic, PositionedError, LexerError

__all__ = [
    "Lexer",
    "LexResult",
    "lex",
    "tokenize_string",
    "tokenize_file",
    "Token",
    "TokenType",
    "Position",
    "Diagnostic",
    "PositionedError",
    "LexerError",
]
