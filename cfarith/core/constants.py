"""
constants.py
==================

Contains the generators of some classic irrational numbers and the corresponding
continued fraction constants.
"""

import itertools
import math

from .continued_fraction import ContinuedFraction


def e_terms():
    """
    Generates :math:`e = [2; 1, 2, 1, 1, 4, 1, 1, 6, ...]`.
    """
    yield 2
    for k in itertools.count(1):
        yield 1
        yield 2 * k
        yield 1


def sqrt2_terms():
    """
    Generates :math:`\\sqrt{2} = [1; 2, 2, 2, ...]`.
    """
    yield 1
    yield from itertools.repeat(2)


def phi_terms():
    """
    Generates the golden ratio :math:`\\varphi = [1; 1, 1, ...]`.
    """
    yield from itertools.repeat(1)


def sqrt_terms(n):
    """
    Generates the continued fraction of :math:`\\sqrt{n}`.

    For a perfect square this is the single term :math:`\\sqrt{n}`. Otherwise the expansion is
    periodic and obtained from the recurrence on :math:`(\\sqrt{n} + m_k) / d_k`:

    .. math::
        m_{k+1} = d_k a_k - m_k, \\quad d_{k+1} = (n - m_{k+1}^2) / d_k, \\quad a_{k+1} = \\lfloor (a_0 + m_{k+1}) / d_{k+1} \\rfloor.

    Args:
        n (int): A non-negative integer.
    """
    if n < 0:
        raise ValueError(f"Cannot take the square root of the negative number {n}.")
    a0 = math.isqrt(n)
    yield a0
    if a0 * a0 == n:
        return

    m, d, a = 0, 1, a0
    while True:
        m = d * a - m
        d = (n - m * m) // d
        a = (a0 + m) // d
        yield a


E = ContinuedFraction(e_terms())
SQRT2 = ContinuedFraction(sqrt2_terms())
PHI = ContinuedFraction(phi_terms())
ZERO = ContinuedFraction.from_rational(0)
ONE = ContinuedFraction.from_rational(1)
INFINITY = ContinuedFraction.from_rational(1, 0)
