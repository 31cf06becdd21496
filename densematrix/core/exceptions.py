"""
Exception hierarchy for densematrix.

All exceptions inherit from MatrixError to allow catching any
library-specific error. Every failure here is a caller-correctable
precondition violation: nothing is transient, nothing is retried.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class MatrixError(Exception):
    """Base exception for all densematrix errors."""
    pass


class ValidationError(MatrixError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks.
    """
    pass


class InvalidShapeError(ValidationError):
    """
    Declared or inferred matrix shape is not usable.

    Raised at construction time when rows or cols is less than 1, or when
    a supplied grid is empty, jagged, not two-dimensional or not numeric.

    Attributes:
        shape: Offending (rows, cols) pair, if one could be determined
    """

    def __init__(
        self,
        message: str,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.shape = shape


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element position lies outside the matrix.

    Raised by get/set when a position falls outside [0, rows) x [0, cols),
    including negative indices (there is no wraparound). Also an IndexError
    so generic sequence-handling code can catch it.

    Attributes:
        index: The requested (row, col)
        shape: The (rows, cols) of the matrix that was indexed
    """

    def __init__(
        self,
        message: str,
        index: tuple[int, int] | None = None,
        shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.index = index
        self.shape = shape


class DimensionMismatchError(ValidationError):
    """
    Operand shapes are incompatible for an arithmetic operation.

    Raised by add/subtract when shapes differ, and by multiply when the
    inner dimensions (left cols, right rows) differ.

    Attributes:
        operation: Name of the operation ('add', 'subtract', 'multiply')
        left_shape: Shape of the left operand
        right_shape: Shape of the right operand, or None if it was not a matrix
    """

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        left_shape: tuple[int, int] | None = None,
        right_shape: tuple[int, int] | None = None,
    ):
        super().__init__(message)
        self.operation = operation
        self.left_shape = left_shape
        self.right_shape = right_shape
