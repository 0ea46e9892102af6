"""
This module provides the coercion of the rational operands (integers, fractions and
:math:`(p, q)` tuples) accepted by the continued fraction operators.
"""

from fractions import Fraction
import math
import numbers

from ..errors import DivisionByZero


def is_scalar(value):
    """
    Whether the value can be used as a rational operand.
    """
    if isinstance(value, bool):
        return False
    if isinstance(value, (numbers.Integral, Fraction)):
        return True
    return isinstance(value, tuple) and len(value) == 2 and all(isinstance(v, numbers.Integral) for v in value)


def as_frac(value):
    """
    Converts a rational operand to a reduced pair :math:`(p, q)` with :math:`q > 0`.

    Args:
        value (int, fractions.Fraction or tuple): The operand; tuples are read as numerator, denominator.

    Returns:
        tuple: The pair :math:`(p, q)`.

    Raises:
        DivisionByZero: if the denominator of a tuple is zero.
        TypeError: for any other type of operand.
    """
    if not is_scalar(value):
        raise TypeError(f"Cannot use {value!r} as a rational operand.")

    if isinstance(value, tuple):
        p, q = int(value[0]), int(value[1])
        if q == 0:
            raise DivisionByZero(f"The rational operand {p}/{q} has a zero denominator.")
        if q < 0:
            p, q = -p, -q
        g = math.gcd(p, q)
        return p // g, q // g

    value = Fraction(int(value)) if isinstance(value, numbers.Integral) else value
    return value.numerator, value.denominator
