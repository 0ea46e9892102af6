"""
rational_engine.py
==================

Contains the Euclidean engine expanding a rational number.
"""

from .base_engine import BaseEngine
from ..errors import IndeterminateForm


class RationalEngine(BaseEngine):
    """
    Expands :math:`n/d` with the Euclidean algorithm: emit :math:`\\lfloor n/d \\rfloor`, then continue
    with :math:`d / (n \\bmod d)`.

    The denominator is made positive first so that floor division leaves non-negative
    remainders, hence only the first term can be negative. A zero denominator gives the
    empty expansion (infinity).
    """

    def __init__(self, numerator, denominator):
        """
        Args:
            numerator (int): The numerator :math:`n`.
            denominator (int): The denominator :math:`d`.

        Raises:
            IndeterminateForm: if both the numerator and the denominator are zero.
        """
        if numerator == 0 and denominator == 0:
            raise IndeterminateForm("The rational 0/0 is indeterminate.")
        super().__init__()
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        self._num = numerator
        self._den = denominator

    def next_term(self):
        if self._den == 0:
            self._finished = True
            return None
        q, r = divmod(self._num, self._den)
        self._num, self._den = self._den, r
        return q
