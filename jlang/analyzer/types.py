"""
Primitive types of the jlang language.
"""

from enum import Enum


class JType(Enum):
    """Enum for each type in the language."""
    INT = "int"
    FLOAT = "float"
    VOID = "void"

    def __str__(self) -> str:
        return self.value


NUMERIC_TYPES = frozenset({JType.INT, JType.FLOAT})


def is_numeric(t: JType) -> bool:
    """Returns if a type is a numeric type, aka either a float or int."""
    return t in NUMERIC_TYPES
