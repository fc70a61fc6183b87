"""
jlang Type Analysis Package

Implements the primitive type set and type propagation over expression
trees, reporting mismatches with the node's source span.
"""

from .types import JType, is_numeric
from .type_checker import TypeChecker, TypeResult, check_type
from .errors import TypeCheckError

__all__ = [
    # Types
    "JType", "is_numeric",

    # Checking
    "TypeChecker", "TypeResult", "check_type",

    # Error handling
    "TypeCheckError",
]
