"""
comparison.py
==================

Contains the ordering of continued fractions.
"""


def compare(x, y, depth=40):
    """
    Compares two continued fractions term by term.

    Increasing a coefficient of even index increases the value, increasing one of odd index
    decreases it, so the terms are compared with their sign flipped at odd indices. When one
    expansion ends first its missing term counts as :math:`+\\infty` (again flipped at odd
    indices), which matches the order of the Stern-Brocot tree.

    Only the first ``depth`` coefficients are inspected: two numbers agreeing on all of them
    compare equal. With the default depth this is about the resolution of a double, and the
    same caveat applies as for floating point equality.

    Args:
        x (LazyCoefficientCache): The first continued fraction.
        y (LazyCoefficientCache): The second continued fraction.
        depth (int, optional): The number of coefficients to inspect. Defaults to 40.

    Returns:
        int: -1, 0 or 1 as :math:`x < y`, :math:`x = y` or :math:`x > y`.
    """
    for i in range(depth):
        a = x.at(i)
        b = y.at(i)

        if a is None and b is None:
            return 0
        if a == b:
            continue

        if a is None:
            sign = 1
        elif b is None:
            sign = -1
        else:
            sign = 1 if a > b else -1

        return sign if i % 2 == 0 else -sign

    return 0
