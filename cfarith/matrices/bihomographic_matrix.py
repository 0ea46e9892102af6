"""
bihomographic_matrix.py
==================

Contains the 8-coefficient tensor used by Gosper's algorithm for binary operations.
"""

from fractions import Fraction

from .base_transform import BaseTransform


class BihomographicMatrix(BaseTransform):
    """
    Coefficients :math:`(A, B, C, D, E, F, G, H)` of the bihomographic function

    .. math::
        Z(x, y) = \\frac{Axy + Bx + Cy + D}{Exy + Fx + Gy + H}

    where :math:`x` and :math:`y` are the not yet consumed tails of the two input continued
    fractions. Consuming a term of an input substitutes :math:`x \\to t + 1/x'`, producing an
    output term :math:`q` replaces :math:`Z` by :math:`1/(Z - q)`.
    """

    __slots__ = ()

    def __init__(self, a, b, c, d, e, f, g, h):
        super().__init__(a, b, c, d, e, f, g, h)

    ## Initial matrices of the four operations

    @classmethod
    def addition(cls):
        """:math:`Z = x + y`"""
        return cls(0, 1, 1, 0, 0, 0, 0, 1)

    @classmethod
    def subtraction(cls):
        """:math:`Z = x - y`"""
        return cls(0, 1, -1, 0, 0, 0, 0, 1)

    @classmethod
    def multiplication(cls):
        """:math:`Z = xy`"""
        return cls(1, 0, 0, 0, 0, 0, 0, 1)

    @classmethod
    def division(cls):
        """:math:`Z = x / y`"""
        return cls(0, 1, 0, 0, 0, 0, 1, 0)

    ## Mutators

    def ingest_x(self, t):
        """
        Substitutes :math:`x \\to t + 1/x'`.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        return BihomographicMatrix(a * t + c, b * t + d, a, b, e * t + g, f * t + h, e, f)

    def ingest_y(self, t):
        """
        Substitutes :math:`y \\to t + 1/y'`.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        return BihomographicMatrix(a * t + b, a, c * t + d, c, e * t + f, e, g * t + h, g)

    def exhaust_x(self):
        """
        Substitutes :math:`x \\to \\infty` once the first input has ended, giving
        :math:`Z = (Ay + B)/(Ey + F)` with no dependence left on :math:`x`.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        return BihomographicMatrix(0, 0, a, b, 0, 0, e, f)

    def exhaust_y(self):
        """
        Substitutes :math:`y \\to \\infty` once the second input has ended.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        return BihomographicMatrix(0, a, 0, c, 0, e, 0, g)

    def produce(self, q):
        """
        Replaces :math:`Z` by :math:`1/(Z - q)` after the output term :math:`q` was emitted.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        return BihomographicMatrix(e, f, g, h, a - q * e, b - q * f, c - q * g, d - q * h)

    ## Term extraction

    def _corners(self):
        """
        The limits of :math:`Z` at the four corners of the domain.

        With :math:`x = 1 + u` and :math:`y = 1 + v`, :math:`u, v \\in [0, \\infty]`, the corners are
        :math:`(\\infty,\\infty)`, :math:`(\\infty,0)`, :math:`(0,\\infty)` and :math:`(0,0)`. Corners of the
        form 0/0 are dropped.

        Returns:
            list: The (numerator, denominator) pairs, or None if :math:`Z` is unbounded on the domain.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        pairs = (
            (a, e),
            (a + b, e + f),
            (a + c, e + g),
            (a + b + c + d, e + f + g + h),
        )

        corners = []
        for num, den in pairs:
            if den == 0:
                if num != 0:
                    return None
                continue
            corners.append((num, den))

        # a sign change of the denominator means a pole inside the domain
        if any(den > 0 for _, den in corners) and any(den < 0 for _, den in corners):
            return None
        return corners

    def try_next_term(self):
        """
        Tries to determine the next output term.

        Returns:
            int: The common floor of all the corner limits, or None if they disagree, if a
            pole lies inside the domain, or if no corner is defined.
        """
        corners = self._corners()
        if not corners:
            return None

        floors = {num // den for num, den in corners}
        if len(floors) == 1:
            return floors.pop()
        return None

    def bounds(self):
        """
        The exact range spanned by the corner limits.

        Returns:
            tuple: :math:`(low, high)` as fractions.Fraction, or None if :math:`Z` is unbounded.
        """
        corners = self._corners()
        if not corners:
            return None
        values = [Fraction(num, den) for num, den in corners]
        return min(values), max(values)

    def evaluate(self, x, y):
        a, b, c, d, e, f, g, h = self._coefficients
        den = e * x * y + f * x + g * y + h
        if den == 0:
            return None
        return Fraction(a * x * y + b * x + c * y + d) / den

    def limit(self):
        """
        The value of :math:`Z` when both tails go to infinity.

        This is :math:`A/E`; when :math:`A = E = 0` the transform has lost its :math:`xy` term
        (an input was exhausted) and the next-order term decides.
        """
        a, b, c, d, e, f, g, h = self._coefficients
        for num, den in ((a, e), (b + c, f + g), (d, h)):
            if num != 0 or den != 0:
                return num, den
        return 0, 0

    def __str__(self):
        a, b, c, d, e, f, g, h = self._coefficients
        return f"({a}xy+{b}x+{c}y+{d})/({e}xy+{f}x+{g}y+{h})"
