"""
arithmetic.py
==================

Contains the dispatch of the arithmetic operators: special values (zero and infinity) are
resolved here, everything else is handed to the homographic engine (rational operand) or
to Gosper's engine (continued fraction operand).
"""

from ..engines import GosperEngine, HomographicEngine
from ..errors import DivisionByZero, IndeterminateForm
from ..matrices import BihomographicMatrix, TransformMatrix

SCALAR_OPERATIONS = ("add", "sub", "rsub", "mul", "div", "rdiv")
BINARY_OPERATIONS = ("add", "sub", "mul", "div")

_SYMBOLS = {"add": "+", "sub": "-", "rsub": "-", "mul": "*", "div": "/", "rdiv": "/"}
_INITIAL_MATRICES = {
    "add": BihomographicMatrix.addition,
    "sub": BihomographicMatrix.subtraction,
    "mul": BihomographicMatrix.multiplication,
    "div": BihomographicMatrix.division,
}


def _scalar_matrix(op, p, q):
    """
    The transform of :math:`x \\mapsto x \\circ p/q` for the given operation.
    """
    if op == "add":
        return TransformMatrix(q, p, 0, q)
    elif op == "sub":
        return TransformMatrix(q, -p, 0, q)
    elif op == "rsub":
        return TransformMatrix(-q, p, 0, q)
    elif op == "mul":
        return TransformMatrix(p, 0, 0, q)
    elif op == "div":
        return TransformMatrix(q, 0, 0, p)
    elif op == "rdiv":
        return TransformMatrix(0, p, q, 0)
    raise ValueError(f"Operation {op} is not implemented.")


def scalar_operation(cf, op, frac):
    """
    Combines a continued fraction with a rational :math:`p/q`.

    Args:
        cf (ContinuedFraction): The continued fraction :math:`x`.
        op (str): One of 'add' (x + p/q), 'sub' (x - p/q), 'rsub' (p/q - x), 'mul' (x * p/q),
            'div' (x / (p/q)) and 'rdiv' (p/q / x).
        frac (tuple): The normalized pair :math:`(p, q)`, :math:`q > 0`.

    Returns:
        ContinuedFraction: The result.
    """
    if op not in SCALAR_OPERATIONS:
        raise ValueError(f"Operation {op} is not implemented.")
    cls = type(cf)
    p, q = frac
    symbol = _SYMBOLS[op]

    if op == "div" and p == 0:
        raise DivisionByZero(f"Division by zero in: ContinuedFraction / {p}/{q}.")
    if op == "rdiv" and cf.is_zero:
        raise DivisionByZero(f"Division by zero in: {p}/{q} / {cf}.")

    if cf.is_infinity:
        if op == "mul" and p == 0:
            raise IndeterminateForm(f"Indeterminate form in: {cf} {symbol} {p}/{q}.")
        if op == "rdiv":
            return cls.from_rational(0)
        return cls.from_rational(1, 0)

    if op == "mul" and (p == 0 or cf.is_zero):
        return cls.from_rational(0)
    if op == "rdiv" and p == 0:
        return cls.from_rational(0)

    return cls._from_source(HomographicEngine(cf._cache, _scalar_matrix(op, p, q)))


def binary_operation(x, y, op):
    """
    Combines two continued fractions with Gosper's algorithm.

    Args:
        x (ContinuedFraction): The left operand.
        y (ContinuedFraction): The right operand.
        op (str): One of 'add', 'sub', 'mul' and 'div'.

    Returns:
        ContinuedFraction: The result.
    """
    if op not in BINARY_OPERATIONS:
        raise ValueError(f"Operation {op} is not implemented.")
    cls = type(x)
    x_inf, y_inf = x.is_infinity, y.is_infinity

    if op == "div" and y.is_zero:
        raise DivisionByZero(f"Division by zero in: ContinuedFraction / {y}.")

    if x_inf or y_inf:
        if op == "add":
            return cls.from_rational(1, 0)
        if op == "sub":
            if x_inf and y_inf:
                raise IndeterminateForm(f"Indeterminate form in: {x} - {y}.")
            return cls.from_rational(1, 0)
        if op == "mul":
            if (x_inf and y.is_zero) or (y_inf and x.is_zero):
                raise IndeterminateForm(f"Indeterminate form in: {x} * {y}.")
            return cls.from_rational(1, 0)
        # division
        if x_inf and y_inf:
            raise IndeterminateForm(f"Indeterminate form in: {x} / {y}.")
        if x_inf:
            return cls.from_rational(1, 0)
        return cls.from_rational(0)

    if op == "mul" and (x.is_zero or y.is_zero):
        return cls.from_rational(0)
    if op == "div" and x.is_zero:
        return cls.from_rational(0)

    matrix = _INITIAL_MATRICES[op]()
    return cls._from_source(GosperEngine(x._cache, y._cache, matrix, **cls.gosper_params))
