"""exception classes raised by `Matrix` operations"""


class MatrixError(Exception):
    """base class for all errors raised by `Matrix`"""

    pass


class InvalidDimension(MatrixError, ValueError):
    """a row or column count is negative, or an array is not 2D"""

    pass


class DimensionMismatch(MatrixError, ValueError):
    """the shapes of two operands are not compatible for the operation"""

    pass


class DivisionByZero(MatrixError, ZeroDivisionError):
    """scalar division by exactly zero"""

    pass


class MatrixReadError(MatrixError, ValueError):
    """the input stream ran out of tokens or held an unparsable token"""

    pass
