"""
Type propagation over jlang expression trees.

Literals have fixed types, blocks are void, and every arithmetic operator
follows the same numeric promotion rule: int with int stays int, anything
mixed with float becomes float.
"""

import logging
from typing import List, Optional, Tuple
from dataclasses import dataclass

from ..parser.ast_nodes import Expr, Body, IntLiteral, FloatLiteral, BinaryOp
from .types import JType, is_numeric
from .errors import TypeCheckError, create_type_mismatch_error

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TypeResult:
    """Outcome of type checking one tree: either a type or an error."""
    type: Optional[JType] = None
    error: Optional[TypeCheckError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> JType:
        """Return the type, raising the type error if there is one."""
        if self.error is not None:
            raise self.error
        return self.type


class TypeChecker:
    """
    Computes the result type of an expression tree.

    Stateless; one instance can check any number of trees.
    """

    def check(self, expr: Expr) -> TypeResult:
        """
        Type check ``expr`` and report the outcome as a value.

        Args:
            expr: Root of the tree to check

        Returns:
            TypeResult holding the tree's type, or the first type error
        """
        try:
            return TypeResult(type=self.get_type(expr))
        except TypeCheckError as e:
            logger.debug("Type check failed at %s: %s", e.position, e.message)
            return TypeResult(error=e)

    def get_type(self, expr: Expr) -> JType:
        """
        Get the type of an expression, raising TypeCheckError on a mismatch.

        The tree is walked post-order with an explicit stack, so depth is
        limited by memory rather than the interpreter's recursion limit.
        Each left subtree is finished before its right sibling is visited,
        which makes the leftmost error the one reported.
        """
        types: List[JType] = []
        stack: List[Tuple[Expr, bool]] = [(expr, False)]

        while stack:
            node, operands_checked = stack.pop()
            if not isinstance(node, BinaryOp):
                types.append(self._leaf_type(node))
            elif operands_checked:
                right_type = types.pop()
                left_type = types.pop()
                types.append(self._check_binary_op_types(node, left_type, right_type))
            else:
                stack.append((node, True))
                stack.append((node.right, False))
                stack.append((node.left, False))

        return types.pop()

    def _leaf_type(self, expr: Expr) -> JType:
        if isinstance(expr, Body):
            return JType.VOID
        elif isinstance(expr, IntLiteral):
            return JType.INT
        elif isinstance(expr, FloatLiteral):
            return JType.FLOAT
        raise TypeError(f"not an expression node: {expr!r}")

    def _check_binary_op_types(self, binary_op: BinaryOp,
                               left_type: JType, right_type: JType) -> JType:
        if not (is_numeric(left_type) and is_numeric(right_type)):
            raise create_type_mismatch_error(
                binary_op.operator, left_type, right_type, binary_op.span, binary_op
            )

        if JType.FLOAT in (left_type, right_type):
            return JType.FLOAT
        return JType.INT


def check_type(expr: Expr) -> TypeResult:
    """Convenience function to type check a single tree."""
    return TypeChecker().check(expr)
