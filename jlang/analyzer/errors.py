"""
Type checking error handling for jlang.

Type errors use the same positioned protocol as lexical errors so the
diagnostics renderer can display either.
"""

from typing import Optional

from ..lexer.tokens import Position
from ..lexer.errors import PositionedError
from ..parser.ast_nodes import Expr
from .types import JType


class TypeCheckError(PositionedError):
    """
    Exception raised when an expression's operands have unusable types.

    Keeps a reference to the offending node alongside the diagnostic.
    """

    def __init__(
        self,
        kind: str,
        message: str,
        position: Position,
        node: Optional[Expr] = None,
        code: Optional[str] = None,
        help_text: Optional[str] = None
    ):
        super().__init__(kind, message, position, code=code, help_text=help_text)
        self.node = node


TYPE_MISMATCH = "TypeMismatch"

# Type error codes for categorization
TYPE_ERROR_CODES = {
    "T001": TYPE_MISMATCH,
}


def create_type_mismatch_error(
    operator: str,
    left: JType,
    right: JType,
    position: Position,
    node: Optional[Expr] = None
) -> TypeCheckError:
    """Create an error for a binary operator applied to non-numeric operands."""
    return TypeCheckError(
        TYPE_MISMATCH,
        f"Cannot apply '{operator}' to types '{left}' and '{right}'.",
        position,
        node=node,
        code="T001",
        help_text="Both operands of an arithmetic operator must be int or float."
    )
