"""
densematrix: dense real-valued matrices for Python.

A small numeric building block: a rectangular float64 grid with
bounds-checked element access, addition, subtraction and multiplication.
Not a linear-algebra library (no determinants, inversion, decomposition
or transposition).

Submodules:
    core: Exceptions, validators, tolerance tiers
    matrix: The Matrix type and functional arithmetic
"""

__version__ = "0.1.0"

from densematrix.matrix import Matrix, add, subtract, multiply
from densematrix.core.exceptions import (
    MatrixError,
    ValidationError,
    InvalidShapeError,
    IndexOutOfBoundsError,
    DimensionMismatchError,
)

__all__ = [
    "__version__",
    "Matrix",
    "add",
    "subtract",
    "multiply",
    "MatrixError",
    "ValidationError",
    "InvalidShapeError",
    "IndexOutOfBoundsError",
    "DimensionMismatchError",
]
