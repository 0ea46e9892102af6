"""
lazy_cache.py
==================

Contains the memoizing cache behind every continued fraction value.
"""

import operator

from ..errors import MalformedCoefficients

_END = object()


class LazyCoefficientCache:
    """
    Memoized view of a possibly infinite source of coefficients.

    The cache owns the list of the coefficients already pulled and, until it is exhausted,
    the iterator producing the remaining ones. When the iterator ends it is dropped and the
    list is brought to canonical form once: a trailing 1 (other than in :math:`[1]`) is folded
    into the previous coefficient. To hand out canonical coefficients only, reading index
    :math:`i` pulls up to two terms ahead.

    Coefficients pulled from the source are checked on the way in: all of them must be
    integers and all but the first strictly positive.

    The cache mutates internally on every read and is not safe for concurrent use from
    several threads.
    """

    __slots__ = ("_terms", "_source", "_error")

    def __init__(self, source=()):
        """
        Args:
            source (iterable of int): The coefficients; an engine, a generator, a list, ...
        """
        self._terms = []
        self._source = iter(source)
        self._error = None

    @classmethod
    def from_terms(cls, terms):
        """
        A cache over an already validated, finite list of coefficients.
        """
        cache = cls()
        cache._terms = list(terms)
        cache._source = None
        cache._canonicalize()
        return cache

    @property
    def exhausted(self):
        """
        Whether the whole continued fraction is known.
        """
        return self._source is None

    @property
    def known(self):
        """
        The number of coefficients memoized so far.
        """
        return len(self._terms)

    def _pull(self):
        """
        Pulls one coefficient from the source.

        A failure of the source, or an invalid coefficient, is remembered and raised again by
        every later pull, so the cache never passes for a shorter expansion.

        Returns:
            bool: False if the source has ended.
        """
        if self._error is not None:
            raise self._error

        try:
            term = next(self._source, _END)
        except Exception as error:
            self._error = error
            raise

        if term is _END:
            self._source = None
            self._canonicalize()
            return False

        try:
            term = operator.index(term)
        except TypeError:
            self._error = TypeError(f"Continued fraction coefficients must be integers, found {term!r}.")
            raise self._error from None

        if self._terms and term <= 0:
            self._error = MalformedCoefficients(
                f"Coefficient {len(self._terms)} is {term}, only the first coefficient may be non-positive."
            )
            raise self._error
        self._terms.append(term)
        return True

    def _fill(self, n):
        """
        Pulls coefficients until :math:`n` are memoized or the source ends.
        """
        while self._source is not None and len(self._terms) < n:
            if not self._pull():
                break

    def _canonicalize(self):
        terms = self._terms
        if len(terms) > 1 and terms[-1] == 1:
            terms.pop()
            terms[-1] += 1

    def _settle(self, n):
        """
        Makes the first :math:`n` memoized coefficients final.

        Coefficient :math:`n - 1` is final once the next one is known not to be a trailing 1.
        """
        self._fill(n + 1)
        if self._source is not None and len(self._terms) > n and self._terms[n] == 1:
            self._fill(n + 2)

    def at(self, i):
        """
        The coefficient at index :math:`i`.

        Args:
            i (int): A non-negative index.

        Returns:
            int: The coefficient, or None if the continued fraction has fewer than :math:`i + 1` terms.
        """
        if i < 0:
            raise IndexError(f"Index should be non negative. Found: i = {i}")
        if self._source is not None:
            self._settle(i + 1)
        if i < len(self._terms):
            return self._terms[i]
        return None

    def take(self, n):
        """
        The first :math:`n` coefficients, fewer if the continued fraction is shorter.

        Returns:
            list of int: A copy of the prefix.
        """
        if n <= 0:
            return []
        self._settle(n)
        return self._terms[:n]
