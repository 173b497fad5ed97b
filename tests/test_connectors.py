import unittest
from tunnel_encoding.constraints.connector_factory import add_eq, add_not, add_and, add_implies, add_or, Connectors, \
    add_atmost1, expand_atmost1
from tunnel_encoding.constraints.connector import Connector
from tunnel_encoding.constraints.variable import BoolVar


class TestConnectors(unittest.TestCase):
    def test_commutative_correct(self):
        x_0_1_0 = BoolVar(('x', 0, 1, 0))
        y_1_0_4 = BoolVar(('y', 1, 0, 4))
        y_0_0_4 = BoolVar(('y', 0, 0, 4))
        y_1_1_6 = BoolVar(('y', 1, 1, 6))

        formula1 = add_implies(x_0_1_0, add_and(y_1_0_4, add_not(y_1_1_6), add_eq(y_0_0_4, y_1_0_4)))
        formula2 = add_implies(x_0_1_0, add_and(add_eq(y_1_0_4, y_0_0_4), add_not(y_1_1_6), y_1_0_4))
        self.assertEqual(formula1, formula2)

    def test_commutative_incorrect(self):
        x_0_1_0 = BoolVar(('x', 0, 1, 0))
        x_1_0_0 = BoolVar(('x', 1, 0, 0))
        y_1_0_4 = BoolVar(('y', 1, 0, 4))

        # implies is not commutative
        formula1 = add_implies(x_0_1_0, add_and(y_1_0_4, x_1_0_0))
        formula2 = add_implies(add_and(y_1_0_4, x_1_0_0), x_0_1_0)
        self.assertNotEqual(formula1, formula2)

    def test_commutative_repeated_arguments(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))

        self.assertNotEqual(add_or(a, a, b), add_or(a, b, b))

    def test_connector_and_with_false(self):
        u = BoolVar(('u',))
        v = BoolVar(('v',))
        w = BoolVar(('w',))
        x = BoolVar(('x',))

        formula = add_and(add_and(x, u), add_and(v, w), True, False)
        expected_result = False
        self.assertEqual(formula, expected_result)

    def test_connector_and_with_true(self):
        u = BoolVar(('u',))
        v = BoolVar(('v',))
        w = BoolVar(('w',))
        x = BoolVar(('x',))

        formula = add_and(True, add_and(x, u), True, add_and(v, w), True)
        expected_result = Connector('and', True, w, x, u, v)
        self.assertEqual(formula, expected_result)

    def test_and_one_term(self):
        v = BoolVar(('v',))

        formula = add_and(True, add_not(v), True)
        expected_result = Connector('not', True, v)
        self.assertEqual(formula, expected_result)

    def test_empty_and_or(self):
        self.assertEqual(add_and(), True)
        self.assertEqual(add_or(), False)

    def test_connector_or_nested(self):
        u = BoolVar(('u',))
        x = BoolVar(('x',))
        y = BoolVar(('y',))
        z = BoolVar(('z',))

        formula = add_or(False, add_or(u, add_or(y, z, x)), add_or(x))
        expected_result = Connector('or', True, u, y, z, x, x)
        self.assertEqual(formula, expected_result)

    def test_connector_or_with_true(self):
        u = BoolVar(('u',))
        x = BoolVar(('x',))

        formula = add_or(False, add_and(x, u), True)
        self.assertEqual(formula, True)

    def test_odd_nested_not(self):
        a = BoolVar(('a',))

        formula = add_not(add_not(add_not(add_not(add_not(a)))))
        expected_result = add_not(a)
        self.assertEqual(formula, expected_result)

    def test_even_nested_not(self):
        a = BoolVar(('a',))

        formula = add_not(add_not(add_not(add_not(add_not(add_not(a))))))
        self.assertEqual(formula, a)

    def test_bool_not(self):
        self.assertEqual(add_not(True), False)

    def test_connector_implies_false_lhs(self):
        u = BoolVar(('u',))
        v = BoolVar(('v',))

        self.assertEqual(add_implies(False, add_and(u, v)), True)

    def test_connector_implies_false_rhs(self):
        u = BoolVar(('u',))
        v = BoolVar(('v',))

        formula = add_implies(add_and(u, v), False)
        expected_result = add_not(add_and(u, v))
        self.assertEqual(formula, expected_result)

    def test_connector_implies_true_lhs(self):
        u = BoolVar(('u',))
        v = BoolVar(('v',))

        self.assertEqual(add_implies(True, add_and(u, v)), add_and(v, u))

    def test_eq_true_false(self):
        self.assertEqual(add_eq(True, False), False)

    def test_eq_with_bool(self):
        a = BoolVar(('a',))

        self.assertEqual(add_eq(a, True), a)
        self.assertEqual(add_eq(False, a), add_not(a))

    def test_eq_same_var(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))

        formula = add_eq(add_and(True, a, b), add_and(b, a))
        self.assertEqual(formula, True)

    def test_eq_diff_var(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))
        d = BoolVar(('d',))

        formula = add_eq(add_and(True, d, b), add_and(b, a))
        expected_result = Connector('equal', True, add_and(b, a), add_and(d, b))
        self.assertEqual(formula, expected_result)

    def test_nested_operations(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))
        u = BoolVar(('u',))

        formula = add_and(add_not(add_implies(add_eq(a, b), add_not(add_eq(add_or(u, False), add_and(u, True))))),
                          add_implies(False, a), True)
        expected_result = add_eq(b, a)
        self.assertEqual(formula, expected_result)

    def test_atmost1_drops_false(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))

        formula = add_atmost1(a, False, b)
        expected_result = Connector('atmost1', True, b, a)
        self.assertEqual(formula, expected_result)

    def test_atmost1_with_true(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))

        self.assertEqual(add_atmost1(a, True, b), add_and(add_not(a), add_not(b)))
        self.assertEqual(add_atmost1(True, a, True), False)

    def test_atmost1_trivial(self):
        a = BoolVar(('a',))

        self.assertEqual(add_atmost1(), True)
        self.assertEqual(add_atmost1(a), True)
        self.assertEqual(add_atmost1(False, a, False), True)

    def test_expand_atmost1(self):
        a = BoolVar(('a',))
        b = BoolVar(('b',))
        c = BoolVar(('c',))

        self.assertEqual(expand_atmost1([a, b]), add_or(add_not(a), add_not(b)))
        expected_result = add_and(add_or(add_not(a), add_not(b)), add_or(add_not(a), add_not(c)),
                                  add_or(add_not(b), add_not(c)))
        self.assertEqual(expand_atmost1([a, b, c]), expected_result)

    def test_invalid_connector(self):
        with self.assertRaises(ValueError):
            Connectors().create_connector('xor', True, False)


if __name__ == '__main__':
    unittest.main()
