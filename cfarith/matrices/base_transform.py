"""
base_transform.py
==================

Contains the abstract base class for the integer transforms driving the engines.
"""

from abc import ABC, abstractmethod


class BaseTransform(ABC):
    """
    Defines an abstract base class for the transform subclasses.

    A transform is an immutable tuple of integer coefficients describing a rational
    function of one or two continued fraction tails. Every mutation (consuming an input
    term, producing an output term) returns a new transform.

    Attributes:
        coefficients (tuple of int): The integer coefficients, numerator row first.
    """

    __slots__ = ("_coefficients",)

    def __init__(self, *coefficients):
        """
        Initializes the BaseTransform object.

        Args:
            *coefficients (int): The coefficients of the numerator followed by the ones of the denominator.
        """
        for c in coefficients:
            if not isinstance(c, int):
                raise TypeError(f"Transform coefficients must be integers, found {c!r}.")
        self._coefficients = tuple(coefficients)

    @property
    def coefficients(self):
        return self._coefficients

    @property
    def denominator(self):
        """
        The coefficients of the denominator.
        """
        return self._coefficients[len(self._coefficients) // 2 :]

    def denominator_is_zero(self):
        """
        Whether the denominator vanishes identically, i.e. the transform is infinite everywhere.
        """
        return not any(self.denominator)

    @abstractmethod
    def evaluate(self, *args):
        """
        Evaluates the transform on exact rational arguments.

        Args:
            *args (fractions.Fraction): The values of the inputs.
        """
        raise NotImplementedError("A BaseTransform object should have an evaluate method.")

    @abstractmethod
    def limit(self):
        """
        The value of the transform when every remaining input tail goes to infinity.

        Returns:
            tuple: A pair :math:`(n, d)`, :math:`d = 0` standing for infinity.
        """
        raise NotImplementedError("A BaseTransform object should have a limit method.")

    def __iter__(self):
        return iter(self._coefficients)

    def __eq__(self, other):
        if type(other) is not type(self):
            return NotImplemented
        return self._coefficients == other._coefficients

    def __hash__(self):
        return hash((type(self).__name__, self._coefficients))

    def __repr__(self):
        return f"{type(self).__name__}{self._coefficients}"
