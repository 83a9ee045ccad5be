"""This module contains the dense `Matrix` value type and the errors its
operations raise.  `Matrix` overloads `+`, `*`, `/`, `@` and the comparison
operators; in-place operations are named methods."""

from .mat_handler import Matrix, read_token
from .errors import (
    MatrixError,
    InvalidDimension,
    DimensionMismatch,
    DivisionByZero,
    MatrixReadError,
)
