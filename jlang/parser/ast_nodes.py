"""
Expression tree node definitions for jlang.

Trees are built by a parser from the token stream and read by the type
checker. Each node owns its children exclusively and carries the span it
was parsed from.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence
from enum import Enum

from ..lexer.tokens import Position


class ASTNodeType(Enum):
    """Enumeration of all expression node types."""

    # Statements
    BODY = "Body"

    # Literals
    INT_LITERAL = "Int"
    FLOAT_LITERAL = "Float"

    # Binary operations
    ADD = "Add"
    SUB = "Sub"
    MUL = "Mul"
    DIV = "Div"


class Expr(ABC):
    """Base class for all expression tree nodes."""

    def __init__(self, node_type: ASTNodeType, span: Position):
        self.node_type = node_type
        self.span = span

    @abstractmethod
    def children(self) -> List['Expr']:
        """Get all child nodes."""
        pass

    def __str__(self) -> str:
        return f"{self.node_type.value}@{self.span}"

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(span={self.span})"


class Body(Expr):
    """A statement block holding an ordered list of expressions."""

    def __init__(self, statements: Sequence[Expr], span: Position):
        super().__init__(ASTNodeType.BODY, span)
        self.statements = tuple(statements)

    def children(self) -> List[Expr]:
        return list(self.statements)


class IntLiteral(Expr):
    """Integer literal expression."""

    def __init__(self, value: int, span: Position):
        super().__init__(ASTNodeType.INT_LITERAL, span)
        self.value = value

    def children(self) -> List[Expr]:
        return []

    def __repr__(self) -> str:
        return f"IntLiteral({self.value!r}, span={self.span})"


class FloatLiteral(Expr):
    """Floating-point literal expression."""

    def __init__(self, value: float, span: Position):
        super().__init__(ASTNodeType.FLOAT_LITERAL, span)
        self.value = value

    def children(self) -> List[Expr]:
        return []

    def __repr__(self) -> str:
        return f"FloatLiteral({self.value!r}, span={self.span})"


class BinaryOp(Expr):
    """
    Binary operation expression.

    When no span is given the node covers both operands.
    """
    operator: str = "?"

    def __init__(self, node_type: ASTNodeType, left: Expr, right: Expr,
                 span: Optional[Position] = None):
        if span is None:
            span = left.span.extend(right.span)
        super().__init__(node_type, span)
        self.left = left
        self.right = right

    def children(self) -> List[Expr]:
        return [self.left, self.right]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.left!r}, {self.right!r}, span={self.span})"


class Add(BinaryOp):
    operator = "+"

    def __init__(self, left: Expr, right: Expr, span: Optional[Position] = None):
        super().__init__(ASTNodeType.ADD, left, right, span)


class Sub(BinaryOp):
    operator = "-"

    def __init__(self, left: Expr, right: Expr, span: Optional[Position] = None):
        super().__init__(ASTNodeType.SUB, left, right, span)


class Mul(BinaryOp):
    operator = "*"

    def __init__(self, left: Expr, right: Expr, span: Optional[Position] = None):
        super().__init__(ASTNodeType.MUL, left, right, span)


class Div(BinaryOp):
    operator = "/"

    def __init__(self, left: Expr, right: Expr, span: Optional[Position] = None):
        super().__init__(ASTNodeType.DIV, left, right, span)
