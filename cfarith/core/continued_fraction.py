"""
continued_fraction.py
==================

Contains the lazy continued fraction value.
"""

from fractions import Fraction
import math
import operator

import numpy as np

from .arithmetic import binary_operation, scalar_operation
from .comparison import compare
from .lazy_cache import LazyCoefficientCache
from ..engines import HomographicEngine, RationalEngine
from ..errors import MalformedCoefficients, RangeOverflow
from ..matrices import TransformMatrix
from ..utils.continued_fraction import convergents, expandcf, fromcf
from ..utils.scalars import as_frac, is_scalar


class ContinuedFraction:
    """
    A real number :math:`[a_0; a_1, a_2, ...] = a_0 + 1/(a_1 + 1/(a_2 + ...))`.

    The coefficients are computed on demand and memoized in a
    :class:`~cfarith.core.LazyCoefficientCache`. All the coefficients after :math:`a_0` are positive
    and a finite expansion never ends with a 1 unless it is :math:`[1]`. The empty expansion
    is infinity, :math:`[0]` is zero.

    Values are immutable: every operator returns a new continued fraction driven by its own
    engine, reading the operands through their shared caches. Since reading a coefficient
    advances the cache, a value must not be read from several threads at once.

    Attributes:
        comparison_depth (int): Number of coefficients inspected by comparisons and hashing.
        display_depth (int): Number of coefficients shown by ``str``.
        float_depth (int): Number of coefficients used by the conversion to float.
        gosper_params (dict): Keyword parameters of the :class:`~cfarith.engines.GosperEngine` built by binary operators.
    """

    comparison_depth = 40
    display_depth = 40
    float_depth = 40
    gosper_params = {"fuse": 50, "fuse_resolution": "simplest"}

    __slots__ = ("_cache",)

    def __init__(self, source=()):
        """
        Wraps a source of coefficients without validating it up front; malformed coefficients
        raise when they are first read.

        Args:
            source (iterable of int or LazyCoefficientCache): The coefficients.
        """
        if isinstance(source, LazyCoefficientCache):
            self._cache = source
        else:
            self._cache = LazyCoefficientCache(source)

    @classmethod
    def _from_source(cls, source):
        return cls(LazyCoefficientCache(source))

    ## Factories

    @classmethod
    def from_rational(cls, numerator, denominator=1):
        """
        The continued fraction of :math:`n/d`, computed with the Euclidean algorithm.

        Args:
            numerator (int): The numerator.
            denominator (int, optional): The denominator. A zero denominator gives infinity. Defaults to 1.

        Raises:
            IndeterminateForm: for :math:`0/0`.
        """
        return cls._from_source(RationalEngine(operator.index(numerator), operator.index(denominator)))

    @classmethod
    def from_coefficients(cls, coefficients):
        """
        The continued fraction with the given finite list of coefficients.

        A trailing 1 is folded into the previous coefficient, e.g. :math:`[5; 1]` becomes :math:`[6]`.

        Raises:
            MalformedCoefficients: if a coefficient after the first is not strictly positive.
        """
        terms = [operator.index(c) for c in coefficients]
        for i, c in enumerate(terms[1:], start=1):
            if c <= 0:
                raise MalformedCoefficients(
                    f"Coefficient {i} is {c}, only the first coefficient may be non-positive."
                )
        return cls(LazyCoefficientCache.from_terms(terms))

    @classmethod
    def from_generator(cls, generator):
        """
        Wraps an arbitrary, possibly infinite, iterable of coefficients. Validation happens
        when the coefficients are read.
        """
        return cls(generator)

    @classmethod
    def from_float(cls, x, n=40, thres=1e-12):
        """
        The continued fraction of a float, expanded up to :math:`n` terms (see :func:`~cfarith.utils.expandcf`).
        """
        if x in (np.inf, -np.inf):
            return cls.from_rational(1, 0)
        return cls.from_coefficients(int(a) for a in expandcf(x, n, thres))

    @classmethod
    def sqrt(cls, n):
        """
        The square root of a non-negative integer, an infinite periodic expansion unless :math:`n` is a square.
        """
        from .constants import sqrt_terms

        n = operator.index(n)
        if n < 0:
            raise ValueError(f"Cannot take the square root of the negative number {n}.")
        return cls(sqrt_terms(n))

    ## Coefficient access

    def __getitem__(self, i):
        """
        The coefficient at index :math:`i`, None past the end of a finite expansion.
        """
        return self._cache.at(operator.index(i))

    def take(self, n):
        """
        The first :math:`n` coefficients, fewer if the expansion is shorter.
        """
        return self._cache.take(n)

    def __iter__(self):
        i = 0
        while True:
            term = self._cache.at(i)
            if term is None:
                return
            yield term
            i += 1

    @property
    def is_infinity(self):
        return self._cache.at(0) is None

    @property
    def is_zero(self):
        return self._cache.at(0) == 0 and self._cache.at(1) is None

    @property
    def is_negative(self):
        first = self._cache.at(0)
        return first is not None and first < 0

    ## Unary operators

    def transform(self, a, b, c, d):
        """
        The continued fraction of :math:`(ax + b)/(cx + d)`, :math:`x` being this continued fraction.
        """
        return self._from_source(HomographicEngine(self._cache, TransformMatrix(a, b, c, d)))

    def reciprocal(self):
        """
        :math:`1/x`; the reciprocal of zero is infinity and the reciprocal of infinity is zero.
        """
        return self.transform(0, 1, 1, 0)

    def __neg__(self):
        return self.transform(-1, 0, 0, 1)

    def __pos__(self):
        return self

    def __abs__(self):
        return -self if self.is_negative else self

    ## Binary operators

    def _operate(self, other, op):
        if isinstance(other, ContinuedFraction):
            return binary_operation(self, other, op)
        if is_scalar(other):
            return scalar_operation(self, op, as_frac(other))
        return NotImplemented

    def __add__(self, other):
        return self._operate(other, "add")

    def __radd__(self, other):
        return self._operate(other, "add")

    def __sub__(self, other):
        return self._operate(other, "sub")

    def __rsub__(self, other):
        if is_scalar(other):
            return scalar_operation(self, "rsub", as_frac(other))
        return NotImplemented

    def __mul__(self, other):
        return self._operate(other, "mul")

    def __rmul__(self, other):
        return self._operate(other, "mul")

    def __truediv__(self, other):
        return self._operate(other, "div")

    def __rtruediv__(self, other):
        if is_scalar(other):
            return scalar_operation(self, "rdiv", as_frac(other))
        return NotImplemented

    ## Comparison

    def _coerce(self, other):
        if isinstance(other, ContinuedFraction):
            return other
        if is_scalar(other) and not isinstance(other, tuple):
            return type(self).from_rational(*as_frac(other))
        return None

    def compare(self, other):
        """
        Compares with another number on the first :attr:`comparison_depth` coefficients (see :func:`~cfarith.core.compare`).

        Returns:
            int: -1, 0 or 1.
        """
        other_cf = self._coerce(other)
        if other_cf is None:
            raise TypeError(f"Cannot compare a continued fraction with {other!r}.")
        return compare(self._cache, other_cf._cache, self.comparison_depth)

    def _rich_compare(self, other, predicate):
        other_cf = self._coerce(other)
        if other_cf is None:
            return NotImplemented
        return predicate(compare(self._cache, other_cf._cache, self.comparison_depth), 0)

    def __eq__(self, other):
        return self._rich_compare(other, operator.eq)

    def __ne__(self, other):
        return self._rich_compare(other, operator.ne)

    def __lt__(self, other):
        return self._rich_compare(other, operator.lt)

    def __le__(self, other):
        return self._rich_compare(other, operator.le)

    def __gt__(self, other):
        return self._rich_compare(other, operator.gt)

    def __ge__(self, other):
        return self._rich_compare(other, operator.ge)

    def __hash__(self):
        """
        Hashes the first :attr:`comparison_depth` coefficients.

        An expansion shorter than that is an exact rational and hashes like the equal
        ``int`` or ``fractions.Fraction``. A rational with more coefficients only compares
        equal to its ``Fraction`` within the bounded precision and hashes differently.
        """
        terms = self.take(self.comparison_depth)
        if not terms:
            return hash(math.inf)
        if len(terms) < self.comparison_depth:
            return hash(Fraction(*fromcf(terms)))
        return hash(tuple(terms))

    ## Conversions

    def convergents(self, n=None):
        """
        Generates the convergents :math:`p_k/q_k`, reading coefficients as needed.

        Args:
            n (int, optional): The maximum number of convergents. Defaults to all of them, which
                never ends for an irrational number.

        Yields:
            tuple: The pairs :math:`(p_k, q_k)`. Infinity yields the single pair :math:`(1, 0)`.
        """
        if self.is_infinity:
            yield 1, 0
            return
        terms = iter(self) if n is None else iter(self.take(n))
        yield from convergents(terms)

    def to_rational(self, max_terms=None):
        """
        The exact value of a finite continued fraction as :math:`(p, q)`; infinity is :math:`(1, 0)`.

        Args:
            max_terms (int, optional): Give up if the expansion is longer than this. Without it,
                the call does not return for an irrational number.

        Raises:
            ValueError: if the expansion has more than ``max_terms`` coefficients.
        """
        if max_terms is not None and self._cache.at(max_terms) is not None:
            raise ValueError(f"The continued fraction has more than {max_terms} coefficients.")
        last = None
        for last in self.convergents():
            pass
        return last

    def __float__(self):
        terms = self.take(self.float_depth)
        if not terms:
            return math.inf
        p, q = fromcf(terms)
        try:
            return p / q
        except OverflowError:
            return math.copysign(math.inf, p)

    def to_array(self, n, dtype=np.int64):
        """
        Exports the first :math:`n` coefficients to a fixed-width NumPy array.

        Raises:
            RangeOverflow: if a coefficient does not fit in ``dtype``.
        """
        info = np.iinfo(dtype)
        terms = self.take(n)
        for i, c in enumerate(terms):
            if c < info.min or c > info.max:
                raise RangeOverflow(f"Coefficient {i} = {c} is out of range for {np.dtype(dtype).name}.")
        return np.array(terms, dtype=dtype)

    ## Display

    def format(self, depth=None):
        """
        Formats the expansion as ``[a0; a1, a2]``, with a trailing ``...`` when more than ``depth`` coefficients exist.
        """
        depth = self.display_depth if depth is None else depth
        terms = self.take(depth + 1)
        truncated = len(terms) > depth
        terms = terms[:depth]

        if not terms:
            return "[]"
        head = str(terms[0])
        tail = [str(t) for t in terms[1:]]
        if truncated:
            tail.append("...")
        if not tail:
            return f"[{head}]"
        return f"[{head}; {', '.join(tail)}]"

    def __str__(self):
        return self.format()

    def __repr__(self):
        return f"{type(self).__name__}({self.format()})"
