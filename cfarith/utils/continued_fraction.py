"""
This module provides helper functions on plain lists of continued fraction coefficients. Reference in Ivan Niven, Irrational Numbers (Cambridge University Press, 2005).
"""

from fractions import Fraction
import math

import numpy as np


def expandcf(realnumber, n=40, thres=1e-12):
    """
    Expands a real number in its continued fraction.

    The first coefficient is :math:`\\lfloor x \\rfloor` and may be negative, all the following ones are positive.

    Args:
        realnumber (float): The real number to expand.
        n (int, optional): The maximum number of terms in the expansion. Default to 40.
        thres (float, optional): The threshold on the fractional part to stop the expansion. Default to 1e-12.

    Returns:
        np.ndarray: A NumPy array containing the continued fraction expansion of the real number up to the `nth` term or until the threshold is met.
    """
    if not np.isfinite(realnumber):
        raise ValueError(f"Cannot expand the non-finite number {realnumber}.")
    if n < 1:
        raise ValueError("At least one term should be requested.")

    ais = np.zeros(n, dtype=np.int64)
    residue = float(realnumber)

    for i in range(n):
        int_part = np.floor(residue)
        # snap to the next integer when the residue is within rounding noise of it
        if np.ceil(residue) - residue < thres:
            int_part = np.ceil(residue)

        ais[i] = int_part
        f = residue - int_part

        if f < thres:
            break
        residue = 1.0 / f

    return ais[: i + 1]


def convergents(ai):
    """
    Generates the convergents :math:`p_n/q_n` of the coefficients :math:`[a_0; a_1, ...]`.

    Uses the recurrences :math:`p_n = a_n p_{n-1} + p_{n-2}` and :math:`q_n = a_n q_{n-1} + q_{n-2}` seeded
    with :math:`p_{-1} = 1, p_{-2} = 0, q_{-1} = 0, q_{-2} = 1`.

    Args:
        ai (iterable of int): The coefficients, possibly an infinite iterator.

    Yields:
        tuple: The pairs :math:`(p_n, q_n)`.
    """
    p_prev, p_before = 1, 0
    q_prev, q_before = 0, 1
    for a in ai:
        a = int(a)
        p, q = a * p_prev + p_before, a * q_prev + q_before
        yield p, q
        p_before, p_prev = p_prev, p
        q_before, q_prev = q_prev, q


def fromcf(ai):
    """
    Obtains the fraction :math:`n/m` from the coefficients :math:`[a_0, a_1, ..., a_m]` of the continued fraction.

    Args:
        ai (list of int): An integer list containing ai for the continued fraction expansion.

    Returns:
        tuple: A tuple :math:`(n, m)`, representing the fraction. The empty list gives :math:`(1, 0)`.
    """
    last = (1, 0)
    for last in convergents(ai):
        pass
    return last


def simplest_between(lo, hi):
    """
    The rational with the smallest denominator in the closed interval :math:`[lo, hi]`.

    Among integers the one closest to zero is chosen. Non-integer intervals are resolved by
    expanding both ends as continued fractions until they differ.

    Args:
        lo (fractions.Fraction): The lower end.
        hi (fractions.Fraction): The upper end.

    Returns:
        fractions.Fraction: The simplest rational of the interval.
    """
    lo, hi = Fraction(lo), Fraction(hi)
    if lo > hi:
        raise ValueError(f"Empty interval [{lo}, {hi}].")

    if lo <= 0 <= hi:
        return Fraction(0)
    if hi < 0:
        return -simplest_between(-hi, -lo)

    # 0 < lo <= hi from here; collect the common leading terms
    terms = []
    while True:
        fl = math.floor(lo)
        if fl == lo:
            terms.append(fl)
            break
        if fl + 1 <= hi:
            terms.append(fl + 1)
            break
        terms.append(fl)
        lo, hi = 1 / (hi - fl), 1 / (lo - fl)

    p, q = fromcf(terms)
    return Fraction(p, q)
