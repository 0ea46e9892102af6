"""
This submodule provides various utility functions for the cfarith package.
"""

import logging
logger = logging.getLogger(__name__)

from .continued_fraction import *
from .scalars import *
try:
    from .plot import *
except ImportError as e:
    logger.debug(e)
