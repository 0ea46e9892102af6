"""
This submodule provides the pull-based engines producing continued fraction terms.
"""

from .base_engine import BaseEngine
from .rational_engine import RationalEngine
from .homographic_engine import HomographicEngine
from .gosper_engine import GosperEngine
