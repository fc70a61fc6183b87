"""
jlang Parser Package

Expression tree nodes consumed by the type checker. The grammar that
builds these trees from tokens lives outside this package.
"""

from .ast_nodes import (
    ASTNodeType, Expr, Body, IntLiteral, FloatLiteral,
    BinaryOp, Add, Sub, Mul, Div,
)

__all__ = [
    "ASTNodeType", "Expr", "Body",
    "IntLiteral", "FloatLiteral",
    "BinaryOp", "Add", "Sub", "Mul", "Div",
]
