"""
This submodule provides the integer transforms consumed by the engines.
"""

from .base_transform import BaseTransform
from .transform_matrix import TransformMatrix
from .bihomographic_matrix import BihomographicMatrix
