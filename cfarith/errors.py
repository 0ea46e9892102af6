"""
errors.py
==================

Exceptions raised by continued fraction construction and arithmetic.

Every error derives from :class:`ContinuedFractionError` and from the closest builtin
exception, so ``except ZeroDivisionError`` keeps working for callers that do not know
about this package.
"""


class ContinuedFractionError(ArithmeticError):
    """
    Base class of all the errors raised by cfarith.
    """


class DivisionByZero(ContinuedFractionError, ZeroDivisionError):
    """
    Raised when dividing by a zero-valued operand, rational or continued fraction.
    """


class IndeterminateForm(ContinuedFractionError):
    """
    Raised for :math:`\\infty - \\infty`, :math:`\\infty \\cdot 0` and :math:`\\infty / \\infty`.
    """


class MalformedCoefficients(ContinuedFractionError, ValueError):
    """
    Raised when a coefficient after the first one is not strictly positive.
    """


class RangeOverflow(ContinuedFractionError, OverflowError):
    """
    Raised when a coefficient does not fit in a fixed-width integer type.

    The arithmetic itself works on Python integers and never overflows; only exports to
    fixed-width containers (see :meth:`ContinuedFraction.to_array`) can raise it.
    """
