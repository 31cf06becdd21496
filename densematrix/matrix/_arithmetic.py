"""
Arithmetic kernels on validated float64 grids.

Callers have already checked operand shapes; these functions only compute.
Every kernel allocates its result and leaves both inputs untouched.
"""

import warnings

import numpy as np
from numpy.typing import NDArray

Grid = NDArray[np.float64]


def _warn_if_overflowed(
    result: Grid,
    left: Grid,
    right: Grid,
    operation: str,
    stacklevel: int,
) -> None:
    """Warn when finite operands produced inf or NaN."""
    if np.all(np.isfinite(result)):
        return
    if not (np.all(np.isfinite(left)) and np.all(np.isfinite(right))):
        return
    n_bad = int(np.sum(~np.isfinite(result)))
    warnings.warn(
        f"{operation}: {n_bad} non-finite value(s) from finite operands "
        f"{left.shape[0]}x{left.shape[1]} and {right.shape[0]}x{right.shape[1]} "
        f"(floating-point overflow)",
        RuntimeWarning,
        stacklevel=stacklevel + 1,
    )


def add_grids(left: Grid, right: Grid, *, stacklevel: int) -> Grid:
    """Elementwise left + right."""
    with np.errstate(over='ignore', invalid='ignore'):
        result = np.add(left, right)
    _warn_if_overflowed(result, left, right, 'add', stacklevel)
    return result


def subtract_grids(left: Grid, right: Grid, *, stacklevel: int) -> Grid:
    """Elementwise left - right."""
    with np.errstate(over='ignore', invalid='ignore'):
        result = np.subtract(left, right)
    _warn_if_overflowed(result, left, right, 'subtract', stacklevel)
    return result


def product_grid(left: Grid, right: Grid, *, stacklevel: int) -> Grid:
    """
    Matrix product with a fixed left-to-right summation order.

    Cell (i, j) is accumulated as

        acc = 0.0
        for k in range(inner):
            acc = acc + left[i, k] * right[k, j]

    The loop runs over k and adds one rank-1 term (outer product of column
    k of left and row k of right) to the whole result per step, so each
    cell sees exactly the sequence above, rounded after every multiply and
    every add. numpy.matmul is not used: BLAS reorders and blocks the sum,
    which changes rounding.

    Args:
        left: (n, m) grid
        right: (m, p) grid
        stacklevel: Frame the overflow warning points at, counting this
            function as 1

    Returns:
        (n, p) grid
    """
    n_rows, inner = left.shape
    n_cols = right.shape[1]
    result = np.zeros((n_rows, n_cols), dtype=np.float64)
    with np.errstate(over='ignore', invalid='ignore'):
        for k in range(inner):
            result += np.multiply.outer(left[:, k], right[k, :])
    _warn_if_overflowed(result, left, right, 'multiply', stacklevel)
    return result
