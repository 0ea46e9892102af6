import unittest
from fractions import Fraction
from cfarith.matrices import TransformMatrix, BihomographicMatrix


class TestTransformMatrix(unittest.TestCase):

    def setUp(self):
        self.m = TransformMatrix(7, 2, 3, 1)

    def test_rejects_non_integers(self):
        with self.assertRaises(TypeError):
            TransformMatrix(1.5, 0, 0, 1)

    def test_composition(self):
        """
        (t + 1/x) composed twice
        """
        composed = TransformMatrix.homographic(1) * TransformMatrix.homographic(2)
        self.assertEqual(composed, TransformMatrix(3, 1, 2, 1))
        self.assertEqual(composed.determinant, 1)
        self.assertEqual(composed.coefficients, (3, 1, 2, 1))

    def test_evaluate(self):
        self.assertEqual(self.m.evaluate(Fraction(1, 2)), Fraction(11, 5))
        self.assertIsNone(TransformMatrix(1, 0, 1, -1).evaluate(1))

    def test_try_produce_term(self):
        # (7x+2)/(3x+1) lies between 2 and 7/3
        q, rest = self.m.try_produce_term()
        self.assertEqual(q, 2)
        self.assertEqual(rest, TransformMatrix(3, 1, 1, 0))

    def test_exact_integer_boundary(self):
        """
        floors one apart with the larger limit an exact integer: the smaller floor is the term
        """
        # (8x+3)/(4x+2) lies between 3/2 and 2, reaching 2 only at infinity
        q, rest = TransformMatrix(8, 3, 4, 2).try_produce_term()
        self.assertEqual(q, 1)
        self.assertEqual(rest, TransformMatrix(4, 2, 4, 1))
        # (4x+2)/(4x+1) lies between 1 and 2, reaching 2 only at 0
        q, rest = TransformMatrix(4, 2, 4, 1).try_produce_term()
        self.assertEqual(q, 1)
        self.assertEqual(rest, TransformMatrix(4, 1, 0, 1))
        # the larger limit 9/4 is not an integer
        self.assertIsNone(TransformMatrix(9, 3, 4, 2).try_produce_term())

    def test_no_term_when_floors_differ(self):
        self.assertIsNone(TransformMatrix(1, 0, 0, 1).try_produce_term())
        self.assertIsNone(TransformMatrix(3, 1, 1, 1).try_produce_term())

    def test_no_term_across_pole(self):
        self.assertIsNone(TransformMatrix(1, 0, 1, -2).try_produce_term())

    def test_limit(self):
        self.assertEqual(TransformMatrix(3, 1, 2, 1).limit(), (3, 2))
        self.assertEqual(TransformMatrix(0, 5, 0, 7).limit(), (5, 7))

    def test_denominator_is_zero(self):
        self.assertTrue(TransformMatrix(1, 2, 0, 0).denominator_is_zero())
        self.assertFalse(self.m.denominator_is_zero())


class TestBihomographicMatrix(unittest.TestCase):

    def test_initial_matrices(self):
        cases = [
            (BihomographicMatrix.addition(), Fraction(5)),
            (BihomographicMatrix.subtraction(), Fraction(-1)),
            (BihomographicMatrix.multiplication(), Fraction(6)),
            (BihomographicMatrix.division(), Fraction(2, 3)),
        ]
        for matrix, expected in cases:
            with self.subTest(matrix=str(matrix)):
                self.assertEqual(matrix.evaluate(2, 3), expected)

    def test_ingest(self):
        """
        ingesting t substitutes x -> t + 1/x
        """
        m = BihomographicMatrix.multiplication()
        x, y = Fraction(3, 2), Fraction(5, 4)
        self.assertEqual(m.ingest_x(4).evaluate(x, y), m.evaluate(4 + 1 / x, y))
        self.assertEqual(m.ingest_y(4).evaluate(x, y), m.evaluate(x, 4 + 1 / y))

    def test_produce(self):
        m = BihomographicMatrix.addition()
        x, y = Fraction(3, 2), Fraction(5, 4)
        self.assertEqual(m.produce(2).evaluate(x, y), 1 / (m.evaluate(x, y) - 2))

    def test_try_next_term(self):
        # x + y with x in [3, 4], y in [1, 2]
        m = BihomographicMatrix.addition().ingest_x(3).ingest_y(1)
        self.assertIsNone(m.try_next_term())
        # x*y after consuming 2 from both: product in [4, 9]
        self.assertIsNone(BihomographicMatrix.multiplication().ingest_x(2).ingest_y(2).try_next_term())

    def test_bounds(self):
        m = BihomographicMatrix.addition().ingest_x(3).ingest_y(1)
        self.assertEqual(m.bounds(), (Fraction(4), Fraction(6)))
        self.assertIsNone(BihomographicMatrix.division().bounds())

    def test_exhaust(self):
        m = BihomographicMatrix.addition().ingest_x(3).exhaust_x()
        self.assertEqual(m.limit(), (1, 0))
        m = BihomographicMatrix.addition().ingest_x(3).ingest_y(2).exhaust_x().exhaust_y()
        self.assertEqual(m.limit(), (5, 1))


if __name__ == '__main__':
    unittest.main()
