"""
Test suite for jlang type propagation.

Tests cover:
- Literal and block types
- Numeric promotion through binary operators
- Type mismatch detection and error positions
"""

import unittest
import sys
import os

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from jlang.lexer.tokens import Position
from jlang.parser.ast_nodes import Body, IntLiteral, FloatLiteral, Add, Sub, Mul, Div
from jlang.analyzer.types import JType, is_numeric
from jlang.analyzer.type_checker import TypeChecker, check_type
from jlang.analyzer.errors import TypeCheckError
from jlang.diagnostics import DiagnosticsConfig, format_error


SOURCE = "1 + 2.5 * 3 - 4 / 5"
FILENAME = "expr.j"


def span(start: int, length: int) -> Position:
    return Position(start, length, SOURCE, FILENAME)


class TestTypes(unittest.TestCase):

    def test_display(self):
        self.assertEqual(str(JType.INT), "int")
        self.assertEqual(str(JType.FLOAT), "float")
        self.assertEqual(str(JType.VOID), "void")

    def test_numeric_predicate(self):
        self.assertTrue(is_numeric(JType.INT))
        self.assertTrue(is_numeric(JType.FLOAT))
        self.assertFalse(is_numeric(JType.VOID))


class TestTypeChecker(unittest.TestCase):
    """Test cases for the type checker."""

    def setUp(self):
        self.checker = TypeChecker()

    def test_literals(self):
        self.assertEqual(self.checker.get_type(IntLiteral(1, span(0, 1))), JType.INT)
        self.assertEqual(self.checker.get_type(FloatLiteral(2.5, span(4, 3))), JType.FLOAT)

    def test_body_is_void(self):
        body = Body([IntLiteral(1, span(0, 1))], span(0, len(SOURCE)))
        self.assertEqual(self.checker.get_type(body), JType.VOID)

    def test_int_operands_stay_int(self):
        for node_class in (Add, Sub, Mul, Div):
            with self.subTest(operator=node_class.operator):
                tree = node_class(IntLiteral(1, span(0, 1)), IntLiteral(3, span(10, 1)))
                self.assertEqual(check_type(tree).unwrap(), JType.INT)

    def test_float_operand_promotes(self):
        for node_class in (Add, Sub, Mul, Div):
            with self.subTest(operator=node_class.operator):
                tree = node_class(IntLiteral(1, span(0, 1)), FloatLiteral(2.5, span(4, 3)))
                self.assertEqual(check_type(tree).unwrap(), JType.FLOAT)
                tree = node_class(FloatLiteral(2.5, span(4, 3)), IntLiteral(3, span(10, 1)))
                self.assertEqual(check_type(tree).unwrap(), JType.FLOAT)

    def test_nested_promotion(self):
        # 1 + 2.5 * 3 - 4 / 5
        product = Mul(FloatLiteral(2.5, span(4, 3)), IntLiteral(3, span(10, 1)))
        quotient = Div(IntLiteral(4, span(14, 1)), IntLiteral(5, span(18, 1)))
        tree = Sub(Add(IntLiteral(1, span(0, 1)), product), quotient)

        self.assertEqual(str(tree.span), "{0:19}")
        self.assertEqual(self.checker.get_type(quotient), JType.INT)
        self.assertEqual(self.checker.get_type(tree), JType.FLOAT)

    def test_tree_structure(self):
        one = IntLiteral(1, span(0, 1))
        rate = FloatLiteral(2.5, span(4, 3))
        tree = Add(one, rate)
        body = Body([tree], span(0, len(SOURCE)))

        self.assertEqual(tree.children(), [one, rate])
        self.assertEqual(body.children(), [tree])
        self.assertEqual(one.children(), [])
        self.assertEqual(str(tree), "Add@{0:7}")

    def test_void_operand_is_a_mismatch(self):
        add = Add(IntLiteral(1, span(0, 1)), Body([], span(4, 3)), span(2, 1))
        result = check_type(add)

        self.assertFalse(result.ok)
        self.assertIsNone(result.type)
        error = result.error
        self.assertIsInstance(error, TypeCheckError)
        self.assertEqual(error.kind, "TypeMismatch")
        self.assertIs(error.position, add.span)
        self.assertIs(error.node, add)
        self.assertIn("'int'", error.message)
        self.assertIn("'void'", error.message)
        self.assertEqual(error.diagnostic.code, "T001")

    def test_left_subtree_error_wins(self):
        left = Mul(Body([], span(0, 1)), IntLiteral(1, span(4, 3)), span(2, 1))
        right = Div(IntLiteral(4, span(14, 1)), Body([], span(18, 1)), span(16, 1))
        tree = Sub(left, right, span(12, 1))

        error = check_type(tree).error
        self.assertIs(error.position, left.span)

    def test_inner_error_propagates_unchanged(self):
        inner = Div(IntLiteral(4, span(14, 1)), Body([], span(18, 1)), span(16, 1))
        tree = Add(IntLiteral(1, span(0, 1)), Mul(FloatLiteral(2.5, span(4, 3)), inner))

        error = check_type(tree).error
        self.assertIs(error.node, inner)
        self.assertIn("'/'", error.message)

    def test_deep_left_chain(self):
        # 1 + 1 + ... + 1 with a few thousand terms
        tree = IntLiteral(1, span(0, 1))
        for _ in range(3000):
            tree = Add(tree, IntLiteral(1, span(0, 1)), span(2, 1))
        self.assertEqual(check_type(tree).unwrap(), JType.INT)

        tree = Mul(tree, FloatLiteral(2.5, span(4, 3)), span(8, 1))
        self.assertEqual(check_type(tree).unwrap(), JType.FLOAT)

    def test_deep_chain_reports_innermost_mismatch(self):
        innermost = Sub(Body([], span(0, 1)), IntLiteral(1, span(4, 3)), span(2, 1))
        tree = innermost
        for _ in range(3000):
            tree = Add(tree, Body([], span(18, 1)), span(16, 1))

        result = check_type(tree)
        self.assertFalse(result.ok)
        self.assertIs(result.error.node, innermost)
        self.assertIn("'-'", result.error.message)

    def test_deep_right_chain(self):
        tree = IntLiteral(1, span(0, 1))
        for _ in range(3000):
            tree = Div(IntLiteral(4, span(14, 1)), tree, span(16, 1))
        self.assertEqual(check_type(tree).unwrap(), JType.INT)

    def test_unwrap_raises(self):
        tree = Add(Body([], span(0, 1)), Body([], span(4, 1)), span(2, 1))
        with self.assertRaises(TypeCheckError):
            check_type(tree).unwrap()

    def test_mismatch_renders_with_diagnostics(self):
        add = Add(IntLiteral(1, span(0, 1)), Body([], span(4, 3)), span(2, 1))
        message = format_error(check_type(add).error, DiagnosticsConfig(unicode=False))
        self.assertEqual(
            message,
            "TypeMismatch Error: Cannot apply '+' to types 'int' and 'void'.\n"
            "File expr.j, line 1\n"
            f"{SOURCE}\n"
            "  ^\n",
        )

    def test_rejects_non_expressions(self):
        with self.assertRaises(TypeError):
            self.checker.get_type("1 + 2")


if __name__ == '__main__':
    unittest.main()
