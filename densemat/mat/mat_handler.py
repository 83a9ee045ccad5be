import numbers
import operator
import re
import numpy as np
import pandas as pd

from ..logger import Logger
from .errors import (
    DimensionMismatch,
    DivisionByZero,
    InvalidDimension,
    MatrixError,
    MatrixReadError,
)


def read_token(stream):
    """read the next whitespace-delimited token from a text stream,
    consuming nothing past the first whitespace character that follows it

    Args:
        stream (`io.TextIOBase`): an open, readable text stream

    Returns:
        `str`: the token

    Note:
        raises `MatrixReadError` if the stream is exhausted before a
        token is found

    """
    token = []
    while True:
        c = stream.read(1)
        if c == "":
            break
        if c.isspace():
            if len(token) > 0:
                break
            continue
        token.append(c)
    if len(token) == 0:
        raise MatrixReadError("read_token(): unexpected end of stream")
    return "".join(token)


_int_token = re.compile(r"[+-]?[0-9]+\Z")
_float_token = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?\Z")


def _parse_token(stream, cast, what):
    # only plain ASCII decimal literals; no "_", "inf", "nan" or unicode digits
    token = read_token(stream)
    pattern = _int_token if cast is int else _float_token
    if pattern.match(token) is None:
        raise MatrixReadError(
            "Matrix.from_stream(): can't cast '" + token + "' to " + what
        )
    return cast(token)


def _index(item):
    if not isinstance(item, tuple) or len(item) != 2:
        raise TypeError(
            "Matrix: elements are indexed by a (row, col) pair, not " + str(item)
        )
    return operator.index(item[0]), operator.index(item[1])


class Matrix(object):
    """A dense, row-major 2D matrix of double-precision values

    Args:
        nrow (`int`): number of rows. Default is 0
        ncol (`int`): number of columns. Default is 0
        x (`numpy.ndarray`): optional 2D array-like of numeric values. The
            values are copied, so the new `Matrix` never shares storage with `x`.
            If `nrow` and `ncol` are also passed, they must match `x.shape`

    Example::

        a = densemat.Matrix(2, 3)  # zero-filled
        a[0, 1] = 2.0
        b = densemat.Matrix(x=[[7, 8], [9, 10], [11, 12]])
        c = a.dot_product(b)
        print(c)

    Note:
        A `Matrix` with zero rows or zero columns holds no storage, but still
        records both counts, so a 0x3 and a 0x2 matrix do not match in shape.

        Comparison operators (including `==`) compare the sums of all
        elements, not the elements themselves.  Matrices of different shapes
        compare equal when their sums are equal.

    """

    double = np.float64
    value_fmt = "{0:g}"
    ascii_fmt = "%.17g"

    # numpy scalars on the left of an operator defer to Matrix.__rmul__
    __array_ufunc__ = None

    def __init__(self, nrow=0, ncol=0, x=None):
        nrow = operator.index(nrow)
        ncol = operator.index(ncol)
        if nrow < 0 or ncol < 0:
            raise InvalidDimension(
                "Matrix.__init__(): the number of rows/columns must be "
                + "a non-negative number: "
                + str((nrow, ncol))
            )
        if x is not None:
            x = np.array(x, dtype=Matrix.double)
            if x.ndim != 2:
                raise InvalidDimension("Matrix.__init__(): ndim != 2: " + str(x.ndim))
            if (nrow, ncol) != (0, 0) and (nrow, ncol) != x.shape:
                raise DimensionMismatch(
                    "Matrix.__init__(): (nrow, ncol) != x.shape "
                    + str((nrow, ncol))
                    + " "
                    + str(x.shape)
                )
            nrow, ncol = x.shape
        self.__nrow = nrow
        self.__ncol = ncol
        self.__x = None
        if nrow > 0 and ncol > 0:
            if x is None:
                x = np.zeros((nrow, ncol), dtype=Matrix.double)
            self.__x = x

    def __str__(self):
        """overload of object.__str__(), the display format written by
        `Matrix.write()`

        Returns:
            `str`: nested-bracket representation, ending with a newline

        """
        if self.isempty:
            return "[]\n"
        rows = []
        for row in self.__x:
            rows.append("[" + ", ".join(Matrix.value_fmt.format(v) for v in row) + "]")
        return "[" + ", \n ".join(rows) + "]\n"

    def __repr__(self):
        return "{0}(nrow={1}, ncol={2})".format(
            type(self).__name__, self.__nrow, self.__ncol
        )

    def __getitem__(self, item):
        """get a single element

        Args:
            item (`tuple`): (row, col) index pair

        Returns:
            `float`: the element value

        """
        i, j = _index(item)
        if self.__x is None:
            raise IndexError("Matrix.__getitem__(): empty Matrix has no elements")
        return float(self.__x[i, j])

    def __setitem__(self, item, value):
        """set a single element in place

        Args:
            item (`tuple`): (row, col) index pair
            value (`float`): new element value

        """
        i, j = _index(item)
        if self.__x is None:
            raise IndexError("Matrix.__setitem__(): empty Matrix has no elements")
        self.__x[i, j] = value

    def __copy__(self):
        return self.copy()

    def __deepcopy__(self, memo):
        return self.copy()

    def copy(self):
        """get a copy of `Matrix`

        Returns:
            `Matrix`: copy of this `Matrix` that shares no storage with it

        """
        return type(self)(nrow=self.__nrow, ncol=self.__ncol, x=self.__x)

    def assign(self, other):
        """replace the shape and contents of `Matrix` with a copy of `other`

        Args:
            other (`Matrix`): the matrix to copy from

        Note:
            operates in place.  Assigning a `Matrix` to itself does nothing

        """
        if other is self:
            return
        if not isinstance(other, Matrix):
            raise TypeError(
                "Matrix.assign(): unrecognized type for other: " + str(type(other))
            )
        self.__nrow = other.__nrow
        self.__ncol = other.__ncol
        self.__x = None if other.__x is None else other.__x.copy()

    def __add__(self, other):
        """elementwise addition

        Args:
            other (`Matrix`): the matrix to add, same shape as `Matrix`

        Returns:
            `Matrix`: the elementwise sum

        """
        if not isinstance(other, Matrix):
            raise TypeError(
                "Matrix.__add__(): unrecognized type for "
                + "other in __add__: "
                + str(type(other))
            )
        if self.shape != other.shape:
            raise DimensionMismatch(
                "Matrix.__add__(): shape mismatch: "
                + str(self.shape)
                + " "
                + str(other.shape)
            )
        return type(self)(x=self.as_2d + other.as_2d)

    def subtract(self, other):
        """elementwise subtraction of `other` from `Matrix`, in place

        Args:
            other (`Matrix`): the matrix to subtract, same shape as `Matrix`

        Returns:
            None

        Note:
            operates in place; unlike `+`, no new `Matrix` is produced.  The
            shapes are checked before anything is changed.

        Example::

            a.subtract(b)  # a now holds a - b

        """
        if not isinstance(other, Matrix):
            raise TypeError(
                "Matrix.subtract(): unrecognized type for other: " + str(type(other))
            )
        if self.shape != other.shape:
            raise DimensionMismatch(
                "Matrix.subtract(): shape mismatch: "
                + str(self.shape)
                + " "
                + str(other.shape)
            )
        if self.__x is not None:
            self.__x -= other.__x

    def __mul__(self, other):
        """scalar multiplication

        Args:
            other (`float`): the scalar

        Returns:
            `Matrix`: a new `Matrix` with every element scaled by `other`

        """
        if not isinstance(other, numbers.Real):
            raise TypeError(
                "Matrix.__mul__(): unrecognized "
                + "other arg type in __mul__: "
                + str(type(other))
                + ", use dot_product() for matrix products"
            )
        return type(self)(x=self.as_2d * other)

    def __rmul__(self, other):
        return self.__mul__(other)

    def __truediv__(self, other):
        """scalar division

        Args:
            other (`float`): the nonzero scalar

        Returns:
            `Matrix`: a new `Matrix` with every element divided by `other`

        """
        if not isinstance(other, numbers.Real):
            raise TypeError(
                "Matrix.__truediv__(): unrecognized "
                + "other arg type in __truediv__: "
                + str(type(other))
            )
        if other == 0:
            raise DivisionByZero("Matrix.__truediv__(): cannot divide by 0")
        return type(self)(x=self.as_2d / other)

    def dot_product(self, other):
        """matrix product of `Matrix` and `other`

        Args:
            other (`Matrix`): right-hand matrix; `other.nrow` must equal `Matrix.ncol`

        Returns:
            `Matrix`: a new `Matrix` of shape (`nrow`, `other.ncol`)

        Example::

            a = densemat.Matrix(x=[[1, 2, 3], [4, 5, 6]])
            b = densemat.Matrix(x=[[7, 8], [9, 10], [11, 12]])
            c = a.dot_product(b)  # or a @ b

        """
        if not isinstance(other, Matrix):
            raise TypeError(
                "Matrix.dot_product(): unrecognized type for other: "
                + str(type(other))
            )
        if self.__ncol != other.__nrow:
            raise DimensionMismatch(
                "Matrix.dot_product(): matrices are not aligned: "
                + str(self.shape)
                + " "
                + str(other.shape)
            )
        return type(self)(x=np.dot(self.as_2d, other.as_2d))

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.dot_product(other)

    @property
    def sum(self):
        """the sum of all elements, the key used by the comparison operators

        Returns:
            `float`: sum of all elements. 0.0 for an empty `Matrix`

        Note:
            elements are added one at a time in row-major order, so the
            result can differ in the last bits from `numpy.sum()`

        """
        total = 0.0
        if self.__x is None:
            return total
        for value in self.__x.ravel().tolist():
            total += value
        return total

    def __lt__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum < other.sum

    def __le__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum <= other.sum

    def __gt__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum > other.sum

    def __ge__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum >= other.sum

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum == other.sum

    def __ne__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sum != other.sum

    __hash__ = None

    def increment(self):
        """add the product of the row and column index to every element, in place

        Note:
            element (i, j) becomes `x[i, j] + i * j`, so row 0 and column 0
            are unchanged

        """
        if self.__x is None:
            return
        self.__x += np.outer(np.arange(self.__nrow), np.arange(self.__ncol))

    def decrement(self):
        """reset every element to zero, in place"""
        if self.__x is None:
            return
        self.__x[:, :] = 0.0

    @property
    def isempty(self):
        """`True` if `Matrix` has zero rows or zero columns"""
        return self.__x is None

    @property
    def shape(self):
        """get the shape of `Matrix`

        Returns:
            `tuple`: (`nrow`, `ncol`)

        """
        return (self.__nrow, self.__ncol)

    @property
    def nrow(self):
        """number of rows"""
        return self.__nrow

    @property
    def ncol(self):
        """number of columns"""
        return self.__ncol

    @property
    def x(self):
        """return a reference to the numeric storage of `Matrix`

        Returns:
            `numpy.ndarray`: reference to the storage, or `None` if `Matrix` is empty

        """
        return self.__x

    @property
    def as_2d(self):
        """get a 2D array of `Matrix` values.  If not empty, simply return
        a reference to `Matrix.x`, otherwise a zero-size array of `shape`

        Returns:
            `numpy.ndarray`: array of shape (`nrow`, `ncol`)

        """
        if self.__x is None:
            return np.zeros(self.shape, dtype=Matrix.double)
        return self.__x

    @property
    def newx(self):
        """return a copy of the `Matrix` values

        Returns:
            `numpy.ndarray`: a copy of `Matrix.as_2d`

        """
        return self.as_2d.copy()

    @property
    def T(self):
        """transpose of `Matrix`

        Returns:
            `Matrix`: a new, transposed `Matrix`

        """
        return type(self)(x=self.as_2d.transpose())

    @classmethod
    def from_stream(cls, stream):
        """read a new `Matrix` from a text stream.  The stream holds
        whitespace-separated tokens: the row count, the column count, then
        the values in row-major order

        Args:
            stream (`io.TextIOBase`): an open, readable text stream

        Returns:
            `Matrix`: the new `Matrix`

        Note:
            only the tokens of one matrix are consumed, so several matrices
            can be read from the same stream in turn

        Example::

            m = densemat.Matrix.from_stream(io.StringIO("2 2 1 0 0 1"))

        """
        nrow = _parse_token(stream, int, "row count")
        ncol = _parse_token(stream, int, "column count")
        m = cls(nrow, ncol)
        if m.__x is None:
            return m
        for i in range(nrow):
            for j in range(ncol):
                m.__x[i, j] = _parse_token(stream, float, "float")
        return m

    def read(self, stream):
        """replace `Matrix` with a matrix read from a text stream

        Args:
            stream (`io.TextIOBase`): an open, readable text stream

        Note:
            operates in place, but only once the whole matrix has been read.
            If the read fails, `Matrix` is left unchanged

        """
        temp = type(self).from_stream(stream)
        self.__nrow = temp.__nrow
        self.__ncol = temp.__ncol
        self.__x = temp.__x

    def write(self, stream):
        """write the display form of `Matrix` to a text stream

        Args:
            stream (`io.TextIOBase`): an open, writable text stream

        Note:
            the display form cannot be read back with `Matrix.read()`,
            use `Matrix.to_ascii()` for that

        """
        stream.write(str(self))

    def to_ascii(self, filename, verbose=False):
        """write `Matrix` to a file in the form read by `Matrix.from_ascii()`

        Args:
            filename (`str`): filename to write to
            verbose (`bool` or `str`): logging flag, passed to `Logger`.
                Default is False

        Note:
            non-finite values are written as `nan`/`inf`, which
            `Matrix.from_ascii()` does not read back

        """
        logger = Logger(verbose)
        try:
            logger.log("writing {0} to {1}".format(repr(self), filename))
            with open(filename, "w") as f:
                f.write("{0} {1}\n".format(self.__nrow, self.__ncol))
                if self.__x is not None:
                    np.savetxt(f, self.__x, fmt=Matrix.ascii_fmt, delimiter=" ")
            logger.log("writing {0} to {1}".format(repr(self), filename))
        except OSError as e:
            logger.error(
                "Matrix.to_ascii(): error writing " + str(filename) + ": " + str(e)
            )
            raise
        finally:
            logger.close()

    @classmethod
    def from_ascii(cls, filename, verbose=False):
        """load a `Matrix` from a file written by `Matrix.to_ascii()`
        (or any file in the `Matrix.from_stream()` form)

        Args:
            filename (`str`): name of the file to read
            verbose (`bool` or `str`): logging flag, passed to `Logger`.
                Default is False

        Returns:
            `Matrix`: `Matrix` loaded from the file

        Note:
            a warning is issued if the file holds tokens after the matrix

        Example::

            m.to_ascii("my.mat")
            m2 = densemat.Matrix.from_ascii("my.mat")

        """
        logger = Logger(verbose)
        try:
            logger.log("reading matrix from " + str(filename))
            with open(filename, "r") as f:
                try:
                    m = cls.from_stream(f)
                except MatrixError as e:
                    logger.lraise(
                        "Matrix.from_ascii(): error reading "
                        + str(filename)
                        + ": "
                        + str(e),
                        type(e),
                    )
                extra = f.read().split()
            if len(extra) > 0:
                logger.warn(
                    "Matrix.from_ascii(): {0} unread tokens after matrix in {1}".format(
                        len(extra), filename
                    )
                )
            logger.statement("read {0}".format(repr(m)))
            logger.log("reading matrix from " + str(filename))
        except (OSError, UnicodeDecodeError) as e:
            logger.error(
                "Matrix.from_ascii(): error reading " + str(filename) + ": " + str(e)
            )
            raise
        finally:
            logger.close()
        return m

    def df(self):
        """wrapper of Matrix.to_dataframe()"""
        return self.to_dataframe()

    @classmethod
    def from_dataframe(cls, df):
        """class method to create a new `Matrix` instance from a
         `pandas.DataFrame`

        Args:
            df (`pandas.DataFrame`): dataframe of numeric values

        Returns:
            `Matrix`: `Matrix` instance derived from `df.values`.  The index
            and columns are not kept

        Example::

            df = pd.read_csv("my.csv", index_col=0)
            mat = densemat.Matrix.from_dataframe(df)

        """
        if not isinstance(df, pd.DataFrame):
            raise TypeError("Matrix.from_dataframe(): df is not a DataFrame")
        return cls(x=df.values)

    def to_dataframe(self):
        """return a pandas.DataFrame representation of `Matrix`

        Returns:
            `pandas.DataFrame`: a dataframe with integer index and columns

        """
        return pd.DataFrame(data=self.newx)
