"""
homographic_engine.py
==================

Contains the engine applying a linear fractional transform to a continued fraction.
"""

from .base_engine import BaseEngine
from .rational_engine import RationalEngine
from ..matrices import TransformMatrix
import logging

logger = logging.getLogger(__name__)


class HomographicEngine(BaseEngine):
    """
    Produces the terms of :math:`f(x) = (ax+b)/(cx+d)` for a continued fraction :math:`x`.

    The engine keeps a running matrix :math:`m`. Each consumed input term :math:`t` updates
    :math:`m \\leftarrow m \\cdot (t, 1; 1, 0)`; after each consumption output terms are extracted
    with :meth:`TransformMatrix.try_produce_term` for as long as they are determined. When the
    input ends, the tail is infinite and the remaining value is the rational :math:`m(\\infty)`,
    which is finished off by a :class:`RationalEngine`.

    Attributes:
        matrix (TransformMatrix): The current state of the transform.
        consumed (int): The number of input terms consumed so far.
    """

    def __init__(self, source, matrix):
        """
        Args:
            source: The input coefficients; any object with an ``at(i)`` method returning the
                coefficient at index i or None past the end (a LazyCoefficientCache).
            matrix (TransformMatrix): The initial transform :math:`(a, b; c, d)`.
        """
        if not isinstance(matrix, TransformMatrix):
            raise ValueError("The initial matrix is not a TransformMatrix.")
        super().__init__()
        self._x = source
        self.matrix = matrix
        self.consumed = 0
        self._tail = None

    def next_term(self):
        while not self._finished:
            if self._tail is not None:
                term = self._tail.next_term()
                if term is None:
                    self._finished = True
                return term

            if self.matrix.denominator_is_zero():
                # 1/(f - q) with f == q: the output is complete
                self._finished = True
                return None

            # nothing is known about x before its first term is consumed
            if self.consumed > 0:
                produced = self.matrix.try_produce_term()
                if produced is not None:
                    q, self.matrix = produced
                    return q

            term = self._x.at(self.consumed)
            if term is None:
                num, den = self.matrix.limit()
                logger.debug(f"Input ended after {self.consumed} terms, finishing with {num}/{den}.")
                self._tail = RationalEngine(num, den)
                continue

            self.matrix = self.matrix * TransformMatrix.homographic(term)
            self.consumed += 1

        return None
