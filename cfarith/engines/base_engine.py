"""
base_engine.py
==================

Contains the abstract base class for the term engines.
"""

from abc import ABC, abstractmethod


## Class that produces the coefficients of a continued fraction on demand.
#
# This is an abstract class, should never be used as an instance.
#
# All engines derived from BaseEngine should contain the following member function
#
#   - next_term -- return the next coefficient, or None once the continued fraction has ended
#   .
class BaseEngine(ABC):
    """
    Abstract base class for the pull-based term engines.

    An engine holds its whole state (current transform, input cursors) in plain attributes
    and advances only when asked for a term. Engines are also iterators over their terms, so
    they can be handed to a :class:`~cfarith.core.LazyCoefficientCache` as a source.
    """

    def __init__(self, params=None):
        """
        Set up the engine.

        Args:
            params (dict, optional): The parameters of the engine.
        """
        self._params = dict(params) if params is not None else dict()
        self._finished = False

    @property
    def finished(self):
        """
        Whether the engine has emitted its last term.
        """
        return self._finished

    @abstractmethod
    def next_term(self):
        """
        Computes the next coefficient.

        Returns:
            int: The coefficient, or None if the continued fraction has ended.
        """
        raise NotImplementedError("ERROR: Engine has to implement next_term")

    def __iter__(self):
        return self

    def __next__(self):
        term = self.next_term()
        if term is None:
            raise StopIteration
        return term
