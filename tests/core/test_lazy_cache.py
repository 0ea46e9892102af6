import itertools
import unittest
from cfarith.core import LazyCoefficientCache, compare
from cfarith.errors import MalformedCoefficients


class TestLazyCoefficientCache(unittest.TestCase):

    def test_trailing_one_is_folded(self):
        cache = LazyCoefficientCache(iter([5, 1]))
        self.assertEqual(cache.at(0), 6)
        self.assertIsNone(cache.at(1))
        self.assertTrue(cache.exhausted)

    def test_single_one_is_kept(self):
        self.assertEqual(LazyCoefficientCache([1]).take(3), [1])

    def test_from_terms(self):
        cache = LazyCoefficientCache.from_terms([0, 3, 1])
        self.assertTrue(cache.exhausted)
        self.assertEqual(cache.take(5), [0, 4])

    def test_lookahead(self):
        """
        reading index i pulls one term ahead, two when the next term is a 1
        """
        cache = LazyCoefficientCache(itertools.count(1))
        self.assertEqual(cache.at(0), 1)
        self.assertEqual(cache.known, 2)

        ones = LazyCoefficientCache(itertools.repeat(1))
        self.assertEqual(ones.at(0), 1)
        self.assertEqual(ones.known, 3)
        self.assertFalse(ones.exhausted)

    def test_take(self):
        cache = LazyCoefficientCache(itertools.count(1))
        self.assertEqual(cache.take(4), [1, 2, 3, 4])
        self.assertEqual(cache.take(0), [])
        self.assertEqual(LazyCoefficientCache([2, 3]).take(10), [2, 3])

    def test_negative_index(self):
        with self.assertRaises(IndexError):
            LazyCoefficientCache([1, 2]).at(-1)

    def test_malformed(self):
        cache = LazyCoefficientCache([1, 2, 0, 4])
        self.assertEqual(cache.at(0), 1)
        with self.assertRaises(MalformedCoefficients):
            cache.take(4)

    def test_malformed_is_remembered(self):
        cache = LazyCoefficientCache(iter([3, 1, -1]))
        for _ in range(2):
            with self.assertRaises(MalformedCoefficients):
                cache.take(5)
        with self.assertRaises(MalformedCoefficients):
            cache.at(1)
        self.assertFalse(cache.exhausted)

    def test_prefix_before_error(self):
        cache = LazyCoefficientCache(iter([1, 2, 3, 0]))
        self.assertEqual(cache.take(1), [1])
        with self.assertRaises(MalformedCoefficients):
            cache.take(4)
        self.assertEqual(cache.take(1), [1])

    def test_source_failure_is_remembered(self):
        def failing():
            yield 2
            yield 3
            raise RuntimeError("source failed")

        cache = LazyCoefficientCache(failing())
        for _ in range(2):
            with self.assertRaises(RuntimeError):
                cache.take(5)

    def test_non_integer(self):
        cache = LazyCoefficientCache([1, 2.5])
        for _ in range(2):
            with self.assertRaises(TypeError):
                cache.at(1)

    def test_empty_is_infinity(self):
        cache = LazyCoefficientCache()
        self.assertIsNone(cache.at(0))
        self.assertEqual(cache.known, 0)


class TestCompare(unittest.TestCase):

    def test_order(self):
        cases = [
            # 1/3 < 1/2
            ([0, 3], [0, 2], -1),
            # 3/2 > 1
            ([1, 2], [1], 1),
            # 3/2 > 10/7
            ([1, 2], [1, 2, 3], 1),
            # -7/3 < 0
            ([-3, 1, 2], [0], -1),
            # infinity is above everything
            ([], [10 ** 9], 1),
            ([], [], 0),
            ([2, 5], [2, 5], 0),
        ]
        for x, y, expected in cases:
            with self.subTest(x=x, y=y):
                xc = LazyCoefficientCache.from_terms(x)
                yc = LazyCoefficientCache.from_terms(y)
                self.assertEqual(compare(xc, yc), expected)
                self.assertEqual(compare(yc, xc), -expected)

    def test_depth(self):
        x = LazyCoefficientCache(itertools.repeat(2))
        y = LazyCoefficientCache(itertools.chain(itertools.repeat(2, 10), [3]))
        self.assertEqual(compare(x, y, depth=10), 0)
        self.assertNotEqual(compare(x, y, depth=11), 0)


if __name__ == '__main__':
    unittest.main()
