"""
This submodule provides the lazy continued fraction value and its arithmetic.
"""

from .lazy_cache import LazyCoefficientCache
from .comparison import compare
from .continued_fraction import ContinuedFraction
from .constants import *
