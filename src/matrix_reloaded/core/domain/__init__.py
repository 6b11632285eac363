"""
Domain models and value objects.

Contains the addressing value objects: Index, Dimension, Orientation.
"""

from matrix_reloaded.core.domain.shapes import (
    Dimension,
    Index,
    Orientation,
    parse_dimension,
    parse_index,
)

__all__ = [
    "Dimension",
    "Index",
    "Orientation",
    "parse_dimension",
    "parse_index",
]
