"""
jlang Front End Package

Tokenizer, expression tree and type checker for the jlang expression
language, plus the diagnostics renderer that turns positioned errors into
underlined source excerpts.

Architecture:
    jlang/
    ├── lexer/           # Positions, tokens and tokenization
    ├── parser/          # Expression tree nodes
    ├── analyzer/        # Types and type propagation
    ├── diagnostics.py   # Error excerpts and message formatting
    └── cli.py           # Tokenizer demo program

License: MIT
"""

__version__ = "0.1.0"
__license__ = "MIT"

from .lexer import Lexer, Token, TokenType, Position, LexerError, LexResult, lex
from .analyzer import JType, TypeChecker, TypeCheckError, TypeResult, check_type
from .diagnostics import DiagnosticsConfig, format_error, underline_selection

__all__ = [
    # Lexing
    "Lexer",
    "Token",
    "TokenType",
    "Position",
    "LexerError",
    "LexResult",
    "lex",

    # Types
    "JType",
    "TypeChecker",
    "TypeCheckError",
    "TypeResult",
    "check_type",

    # Diagnostics
    "DiagnosticsConfig",
    "format_error",
    "underline_selection",

    # Version info
    "__version__",
    "__license__",
]
