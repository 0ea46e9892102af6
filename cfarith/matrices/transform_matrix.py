"""
transform_matrix.py
==================

Contains the 2x2 integer matrix encoding a linear fractional transform.
"""

from fractions import Fraction

from .base_transform import BaseTransform


class TransformMatrix(BaseTransform):
    """
    Integer matrix :math:`\\begin{bmatrix} a & b \\\\ c & d \\end{bmatrix}` standing for the
    linear fractional transform

    .. math::
        f(x) = \\frac{ax + b}{cx + d}.

    Composition of transforms is matrix multiplication: if :math:`M_f` encodes :math:`f` and
    :math:`M_g` encodes :math:`g`, then :math:`M_f M_g` encodes :math:`f \\circ g`.
    """

    __slots__ = ()

    def __init__(self, a, b, c, d):
        super().__init__(a, b, c, d)

    @classmethod
    def identity(cls):
        return cls(1, 0, 0, 1)

    @classmethod
    def homographic(cls, t):
        """
        The matrix of :math:`x \\mapsto t + 1/x`, used to consume the term :math:`t` of a continued fraction.
        """
        return cls(t, 1, 1, 0)

    @property
    def determinant(self):
        a, b, c, d = self._coefficients
        return a * d - b * c

    def __mul__(self, other):
        if not isinstance(other, TransformMatrix):
            return NotImplemented
        a, b, c, d = self._coefficients
        e, f, g, h = other._coefficients
        return TransformMatrix(a * e + b * g, a * f + b * h, c * e + d * g, c * f + d * h)

    __matmul__ = __mul__

    def evaluate(self, x):
        """
        Computes :math:`f(x)` exactly.

        Args:
            x (fractions.Fraction or int): The argument.

        Returns:
            fractions.Fraction: The value, or None if :math:`x` is a pole of :math:`f`.
        """
        a, b, c, d = self._coefficients
        den = c * x + d
        if den == 0:
            return None
        return Fraction(a * x + b) / den

    def limit(self):
        a, b, c, d = self._coefficients
        if a == 0 and c == 0:
            return b, d
        return a, c

    def try_produce_term(self):
        """
        Tries to extract the next output term from the transform.

        The transform is applied to a continued fraction tail :math:`x \\geq 1`; the value is
        bounded by the limits :math:`a/c` (:math:`x \\to \\infty`) and :math:`b/d` (:math:`x \\to 0`).
        The term is known once the floors of both limits agree. When they differ by one and
        the larger limit is an exact integer, that limit is only reached at :math:`0` or
        :math:`\\infty`, so the smaller floor is still the term.

        Returns:
            tuple: :math:`(q, r)` with the term :math:`q` and the matrix :math:`r` of
            :math:`1/(f(x) - q)`, or None if more input is needed.
        """
        a, b, c, d = self._coefficients

        # A limit of the form 0/0 carries no information, n/0 means f is unbounded
        corners = []
        for num, den in ((a, c), (b, d)):
            if den == 0:
                if num != 0:
                    return None
                continue
            corners.append((num, den))

        if not corners:
            return None

        # pole between 0 and infinity
        if len(corners) == 2 and (c > 0) != (d > 0):
            return None

        if len(corners) == 1:
            num, den = corners[0]
            q = num // den
        else:
            floor_ac = a // c
            floor_bd = b // d
            if floor_ac == floor_bd:
                q = floor_ac
            elif floor_ac == floor_bd + 1 and a % c == 0:
                q = floor_bd
            elif floor_bd == floor_ac + 1 and b % d == 0:
                q = floor_ac
            else:
                return None

        return q, TransformMatrix(c, d, a - q * c, b - q * d)

    def __str__(self):
        a, b, c, d = self._coefficients
        return f"({a}x+{b})/({c}x+{d})"
