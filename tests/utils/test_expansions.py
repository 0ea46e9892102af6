import unittest
from fractions import Fraction
import numpy as np
from cfarith.utils import expandcf, fromcf, convergents, simplest_between

# Define a list of test cases, each case is a tuple of (NUM, FRAC, CI)
# where NUM is the real number to be expanded into a continued fraction
# where FRAC is a tuple of (numerator, denominator) corresponding to the convergents of NUM with length equal to the length of CI
# and CI is a list of coefficients of the continued fraction expansion
test_cases = [
    (5/7, (5, 7), [0, 1, 2, 2]),
    (-5/7, (-5, 7), [-1, 3, 2]),
# Content is available under The OEIS End-User License Agreement: http://oeis.org/LICENSE
    # OEIS A010124: Continued fraction for sqrt(19)
    (np.sqrt(19), (1421, 326), [4, 2, 1, 3, 1, 2, 8]),
    # OEIS A001203: Continued fraction for pi
    (np.pi, (833719, 265381), [3, 7, 15, 1, 292, 1, 1, 1, 2]),
    # OEIS A003417: Continued fraction for e
    (np.e, (193, 71), [2, 1, 2, 1, 1, 4, 1, 1]),
]


class TestContinuedFractionFunctions(unittest.TestCase):
    def test_expandcf(self):
        for num, frac, ci in test_cases:
            with self.subTest(ci=ci, frac=frac, num=num):
                result = expandcf(num, len(ci))
                expected = ci
                np.testing.assert_array_equal(result, expected, f"Failed to correctly expand num={num} into ci={ci}.")

    def test_expandcf_stops_on_rationals(self):
        np.testing.assert_array_equal(expandcf(0.75), [0, 1, 3])
        np.testing.assert_array_equal(expandcf(3.0), [3])

    def test_expandcf_invalid(self):
        for value in (np.inf, np.nan):
            with self.subTest(value=value):
                with self.assertRaises(ValueError):
                    expandcf(value)
        with self.assertRaises(ValueError):
            expandcf(0.5, 0)

    def test_fromcf(self):
        for num, frac, ci in test_cases:
            with self.subTest(ci=ci, frac=frac, num=num):
                result = fromcf(ci)
                expected = frac
                self.assertEqual(result, expected, f"Failed to correctly convert ci={ci} back to fraction frac={frac}.")

    def test_fromcf_empty(self):
        self.assertEqual(fromcf([]), (1, 0))

    def test_convergents(self):
        self.assertEqual(list(convergents([1, 2, 2, 2])), [(1, 1), (3, 2), (7, 5), (17, 12)])


class TestSimplestBetween(unittest.TestCase):
    def test_cases(self):
        cases = [
            ((Fraction(1, 3), Fraction(1, 2)), Fraction(1, 2)),
            ((Fraction(3, 10), Fraction(2, 5)), Fraction(1, 3)),
            ((Fraction(5, 3), Fraction(7, 3)), Fraction(2)),
            ((Fraction(-1, 2), Fraction(3)), Fraction(0)),
            ((Fraction(-7, 10), Fraction(-3, 5)), Fraction(-2, 3)),
            ((Fraction(22, 7), Fraction(22, 7)), Fraction(22, 7)),
            ((Fraction(141, 100), Fraction(142, 100)), Fraction(17, 12)),
        ]
        for (lo, hi), expected in cases:
            with self.subTest(lo=lo, hi=hi):
                self.assertEqual(simplest_between(lo, hi), expected)

    def test_empty_interval(self):
        with self.assertRaises(ValueError):
            simplest_between(Fraction(1), Fraction(0))


if __name__ == '__main__':
    unittest.main()
