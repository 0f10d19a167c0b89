"""Exception hierarchy for tensor operations."""


class TensorError(Exception):
    """Base class for every error raised by tensor operations."""


class ShapeError(TensorError, ValueError):
    """Raised when shapes are incompatible or do not fit the data."""


class TensorIndexError(TensorError, IndexError):
    """Raised when an index is invalid or out of bounds."""


class TensorTypeError(TensorError, TypeError):
    """Raised when a data type conversion fails."""


class OperationError(TensorError):
    """Raised when an operation is unsupported or not allowed."""


class TensorMemoryError(TensorError):
    """Raised when tensor memory cannot be accessed as requested."""