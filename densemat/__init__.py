"""densemat: a dense 2D matrix of double-precision values.

`densemat.Matrix` supports elementwise addition, in-place subtraction,
scalar multiplication and division, matrix products, comparison by
element sum, and reading/writing through text streams.
"""

from .logger import Logger
from .densemat_warnings import DensematWarning
from .mat import (
    Matrix,
    MatrixError,
    InvalidDimension,
    DimensionMismatch,
    DivisionByZero,
    MatrixReadError,
)

__version__ = "0.1.0"
__all__ = [
    "Matrix",
    "MatrixError",
    "InvalidDimension",
    "DimensionMismatch",
    "DivisionByZero",
    "MatrixReadError",
    "Logger",
    "DensematWarning",
]
