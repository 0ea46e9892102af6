from importlib import metadata

try:
    __version__ = metadata.version('cfarith')
except metadata.PackageNotFoundError:
    __version__ = "unknown"

from . import errors
from . import matrices
from . import engines
from . import utils
from . import core

from .errors import (
    ContinuedFractionError,
    DivisionByZero,
    IndeterminateForm,
    MalformedCoefficients,
    RangeOverflow,
)
from .core import ContinuedFraction, E, SQRT2, PHI, ZERO, ONE, INFINITY
