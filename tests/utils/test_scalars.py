import unittest
from fractions import Fraction
import numpy as np
from cfarith.errors import DivisionByZero
from cfarith.utils import as_frac, is_scalar


class TestScalars(unittest.TestCase):

    def test_as_frac(self):
        cases = [
            (3, (3, 1)),
            (-4, (-4, 1)),
            (Fraction(6, 4), (3, 2)),
            ((6, -4), (-3, 2)),
            ((0, 5), (0, 1)),
            (np.int64(7), (7, 1)),
        ]
        for value, expected in cases:
            with self.subTest(value=value):
                self.assertEqual(as_frac(value), expected)

    def test_zero_denominator(self):
        with self.assertRaises(DivisionByZero):
            as_frac((1, 0))

    def test_rejected(self):
        for value in (1.5, "1/2", True, (1, 2, 3), (1.0, 2)):
            with self.subTest(value=value):
                self.assertFalse(is_scalar(value))
                with self.assertRaises(TypeError):
                    as_frac(value)


if __name__ == '__main__':
    unittest.main()
