"""
Core infrastructure for densematrix.

This module provides the shared error taxonomy, validators and numerical
tolerances used by the Matrix value type.

Key components:
    exceptions: Exception hierarchy
    validation: Input validators (shapes, grids, indices, operand shapes)
    tolerances: Tolerance tiers for approximate comparison
"""

from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidShapeError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
)
from densematrix.core.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP64_LOOSE,
    select_tolerance,
)

__all__ = [
    # Exceptions
    "MatrixError",
    "ValidationError",
    "InvalidShapeError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_LOOSE",
    "select_tolerance",
]
