"""
Dense matrix module.

Public API:
    Matrix          - float64 matrix value type
    add(a, b)       - elementwise sum
    subtract(a, b)  - elementwise difference
    multiply(a, b)  - matrix product
"""

from densematrix.matrix.matrix import Matrix
from densematrix.matrix.operations import add, subtract, multiply

__all__ = [
    "Matrix",
    "add",
    "subtract",
    "multiply",
]
