"""
gosper_engine.py
==================

Contains the engine computing a binary operation between two continued fractions with
Gosper's algorithm.
"""

from .base_engine import BaseEngine
from .rational_engine import RationalEngine
from ..matrices import BihomographicMatrix
from ..utils.continued_fraction import simplest_between
import logging

logger = logging.getLogger(__name__)


class GosperEngine(BaseEngine):
    """
    Produces the terms of :math:`Z(x, y) = (Axy+Bx+Cy+D)/(Exy+Fx+Gy+H)`.

    Each round first emits every term already determined by the matrix (see
    :meth:`BihomographicMatrix.try_next_term`), then consumes one term from each input that
    has not ended. An exhausted input is substituted by infinity and stops contributing.
    Once both inputs are exhausted the matrix is a constant and its rational value is
    expanded by a :class:`RationalEngine`.

    Some results cannot be decided from any finite number of input terms, e.g.
    :math:`\\sqrt{2}\\cdot\\sqrt{2}`: the range of :math:`Z` keeps straddling the integer 2. The
    engine therefore carries a fuse: after ``fuse`` consecutive rounds without output it
    stops reading its inputs and emits the continued fraction of a limiting rational. This
    trades exactness for termination; it is not a proof that the result is rational.

    Attributes:
        matrix (BihomographicMatrix): The current state of the transform.
        rounds (int): The number of consumption rounds since the last emitted term.
    """

    def __init__(self, x, y, matrix, **params):
        """
        Sets up the engine.

        Args:
            x: The first input; any object with an ``at(i)`` method (a LazyCoefficientCache).
            y: The second input.
            matrix (BihomographicMatrix): The initial matrix selecting the operation.
            **params: Arbitrary keyword arguments.
                - fuse (int, optional): Rounds without output before giving up on the inputs. Defaults to 50.
                - fuse_resolution (str, optional): How the limiting rational is chosen when the fuse
                  trips. 'simplest' takes the simplest rational between the current bounds and ends
                  the output if the bounds straddle a pole; 'corner' takes :math:`A/E`. Defaults to 'simplest'.
        """
        if not isinstance(matrix, BihomographicMatrix):
            raise ValueError("The initial matrix is not a BihomographicMatrix.")

        if "fuse" not in params.keys():
            params["fuse"] = 50
        if params["fuse"] < 1:
            raise ValueError("The fuse should be a positive number of rounds.")

        if "fuse_resolution" not in params.keys():
            params["fuse_resolution"] = "simplest"
        if params["fuse_resolution"] not in ("simplest", "corner"):
            raise ValueError(f"Fuse resolution {params['fuse_resolution']} is not implemented.")

        super().__init__(params)

        self._x = x
        self._y = y
        self.matrix = matrix
        self.rounds = 0
        self._ix = 0
        self._iy = 0
        self._x_done = False
        self._y_done = False
        self._primed = False
        self._tail = None

    @property
    def fuse(self):
        return self._params["fuse"]

    @property
    def fuse_tripped(self):
        """
        Whether the output was cut short by the fuse.
        """
        return self._tail is not None and not (self._x_done and self._y_done)

    def next_term(self):
        while not self._finished:
            if self._tail is not None:
                term = self._tail.next_term()
                if term is None:
                    self._finished = True
                return term

            if self.matrix.denominator_is_zero():
                self._finished = True
                return None

            # the corner analysis assumes tails >= 1, i.e. the leading terms are consumed
            if self._primed:
                q = self.matrix.try_next_term()
                if q is not None:
                    self.matrix = self.matrix.produce(q)
                    self.rounds = 0
                    return q

                if self._x_done and self._y_done:
                    num, den = self.matrix.limit()
                    logger.debug(f"Both inputs ended, finishing with {num}/{den}.")
                    self._tail = RationalEngine(num, den)
                    continue

                if self.rounds >= self.fuse:
                    self._tail = self._blow_fuse()
                    continue

            self._consume()

        return None

    def _consume(self):
        """
        Consumes one term from each input that has not ended.

        Both terms are read before the matrix changes, so a failing input leaves the state untouched.
        """
        tx = None if self._x_done else self._x.at(self._ix)
        ty = None if self._y_done else self._y.at(self._iy)

        if not self._x_done:
            if tx is None:
                self._x_done = True
                self.matrix = self.matrix.exhaust_x()
            else:
                self._ix += 1
                self.matrix = self.matrix.ingest_x(tx)

        if not self._y_done:
            if ty is None:
                self._y_done = True
                self.matrix = self.matrix.exhaust_y()
            else:
                self._iy += 1
                self.matrix = self.matrix.ingest_y(ty)

        self._primed = True
        self.rounds += 1

    def _blow_fuse(self):
        """
        Builds the engine emitting the limiting rational once the fuse has tripped.
        """
        if self._params["fuse_resolution"] == "corner":
            num, den = self.matrix.limit()
        else:
            bounds = self.matrix.bounds()
            if bounds is None:
                # the remainder is unbounded, treat it as infinite
                num, den = 1, 0
            else:
                value = simplest_between(*bounds)
                num, den = value.numerator, value.denominator

        logger.warning(
            f"No term produced after {self.rounds} rounds ({self._ix} and {self._iy} input terms consumed), "
            f"finishing with {num}/{den}."
        )
        return RationalEngine(num, den)
