# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Dense real-valued matrix backed by a flat, row-major float64 array.

Arithmetic (`add`, `scale`, `transpose`, `multiply`, `augment`, the column
slices) always returns a new Matrix.  The elementary row operations,
`set`, `rref` and `upper_triangular` mutate the receiver in place.
"""

import numbers
import operator
from typing import List, Optional, Sequence, Tuple, Union

import numpy as np

from . import elimination
from .cursor import IndexCursor
from .formatting import format_matrix
from .tolerance import Tolerance, resolve

TolLike = Optional[Union[float, Tolerance]]


def _check_shape(rows: int, columns: int) -> Tuple[int, int]:
    # operator.index rejects floats instead of truncating them
    rows, columns = operator.index(rows), operator.index(columns)
    if rows <= 0 or columns <= 0:
        raise ValueError(f"matrix dimensions must be positive, got {rows}x{columns}")
    return rows, columns


class Matrix:
    """
    An m-by-n matrix of floats.

    Parameters
    ----------
    rows, columns : int
        Positive dimensions, fixed for the lifetime of the matrix.
    values : sequence of float, optional
        Row-major entries.  They are copied; a short sequence is padded
        with zeros and a long one is truncated.  Omitted means all zeros.
    """

    __slots__ = ("_rows", "_columns", "_data")

    def __init__(self, rows: int, columns: int, values: Optional[Sequence[float]] = None):
        self._rows, self._columns = _check_shape(rows, columns)
        data = np.zeros(self._rows * self._columns, dtype=float)
        if values is not None:
            flat = np.asarray(values, dtype=float)
            if flat.ndim == 0:
                raise TypeError("values must be a sequence of entries, not a scalar")
            flat = flat.ravel()
            n = min(flat.size, data.size)
            data[:n] = flat[:n]
        self._data = data

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def _wrap(cls, rows: int, columns: int, data: np.ndarray) -> "Matrix":
        # takes ownership of `data`, which must be a fresh float array
        m = cls.__new__(cls)
        m._rows = int(rows)
        m._columns = int(columns)
        m._data = data.reshape(m._rows * m._columns)
        return m

    @classmethod
    def zeros(cls, rows: int, columns: int) -> "Matrix":
        return cls(rows, columns)

    @classmethod
    def filled(cls, rows: int, columns: int, value: float) -> "Matrix":
        rows, columns = _check_shape(rows, columns)
        return cls._wrap(rows, columns, np.full(rows * columns, value, dtype=float))

    @classmethod
    def from_rows(cls, grid: Sequence[Sequence[float]]) -> "Matrix":
        """Build a matrix from a list of equally long rows."""
        if len(grid) == 0 or len(grid[0]) == 0:
            raise ValueError("grid must have at least one row and one column")
        width = len(grid[0])
        if any(len(row) != width for row in grid):
            raise ValueError("all rows of the grid must have the same length")
        return cls._wrap(len(grid), width, np.array(grid, dtype=float))

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> "Matrix":
        array = np.asarray(array, dtype=float)
        if array.ndim != 2:
            raise ValueError(f"expected a 2-D array, got {array.ndim}-D")
        _check_shape(*array.shape)
        return cls._wrap(array.shape[0], array.shape[1], array.copy())

    @classmethod
    def identity(cls, size: int) -> "Matrix":
        size = operator.index(size)
        if size <= 0:
            raise ValueError(f"identity size must be positive, got {size}")
        return cls._wrap(size, size, np.eye(size, dtype=float))

    def copy(self) -> "Matrix":
        return type(self)._wrap(self._rows, self._columns, self._data.copy())

    # ------------------------------------------------------------------
    # Shape and element access
    # ------------------------------------------------------------------
    @property
    def rows(self) -> int:
        return self._rows

    @property
    def columns(self) -> int:
        return self._columns

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._columns

    def is_square(self) -> bool:
        return self._rows == self._columns

    def _grid(self) -> np.ndarray:
        # writable (rows, columns) view over the backing store
        return self._data.reshape(self._rows, self._columns)

    def cursor(self) -> IndexCursor:
        return IndexCursor(self._rows, self._columns)

    def _check_cursor(self, cursor: IndexCursor) -> None:
        if cursor.columns != self._columns or cursor.cells != self._data.size:
            raise ValueError(
                f"cursor over {cursor.rows}x{cursor.columns} does not fit a "
                f"{self._rows}x{self._columns} matrix"
            )
        if not cursor.has_more():
            raise ValueError("cursor is past the last entry")

    def _offset(self, row: Union[int, IndexCursor], column: Optional[int]) -> int:
        if isinstance(row, IndexCursor):
            if column is not None:
                raise TypeError("pass either a cursor or a (row, column) pair")
            self._check_cursor(row)
            return row.linear_index()
        if column is None:
            raise TypeError("column index is required")
        if not (0 <= row < self._rows and 0 <= column < self._columns):
            raise ValueError(
                f"index ({row}, {column}) out of range for "
                f"{self._rows}x{self._columns} matrix"
            )
        return row * self._columns + column

    def get(self, row: Union[int, IndexCursor], column: Optional[int] = None) -> float:
        """Entry at ``(row, column)`` or at the cursor position."""
        return float(self._data[self._offset(row, column)])

    def set(self, *args) -> None:
        """
        Overwrite one entry in place: ``set(row, column, value)`` or
        ``set(cursor, value)``.
        """
        if len(args) == 2 and isinstance(args[0], IndexCursor):
            where, value = self._offset(args[0], None), args[1]
        elif len(args) == 3:
            where, value = self._offset(args[0], args[1]), args[2]
        else:
            raise TypeError("set() takes (row, column, value) or (cursor, value)")
        self._data[where] = value

    def __getitem__(self, key: Tuple[int, int]) -> float:
        row, column = key
        return self.get(row, column)

    def __setitem__(self, key: Tuple[int, int], value: float) -> None:
        row, column = key
        self.set(row, column, value)

    # ------------------------------------------------------------------
    # Algebra (pure, each returns a new Matrix)
    # ------------------------------------------------------------------
    def _check_same_shape(self, other: "Matrix") -> None:
        if self.shape != other.shape:
            raise ValueError(f"shape mismatch: {self.shape} vs {other.shape}")

    def add(self, other: "Matrix") -> "Matrix":
        self._check_same_shape(other)
        return type(self)._wrap(self._rows, self._columns, self._data + other._data)

    def subtract(self, other: "Matrix") -> "Matrix":
        return self.add(other.scale(-1.0))

    def scale(self, scalar: float) -> "Matrix":
        return type(self)._wrap(self._rows, self._columns, self._data * float(scalar))

    def transpose(self) -> "Matrix":
        return type(self)._wrap(self._columns, self._rows, self._grid().T.flatten())

    def multiply(self, right):
        """
        Matrix product ``self @ right``.

        Parameters
        ----------
        right : Matrix | Vector
            Needs ``right.rows == self.columns``.

        Returns
        -------
        Matrix of shape (self.rows, right.columns), or a Vector of
        ``self.rows`` components when `right` is a Vector.
        """
        from .vector import Vector

        if isinstance(right, Vector):
            if self._columns != right.rows:
                raise ValueError(
                    f"cannot multiply {self._rows}x{self._columns} matrix by "
                    f"vector of length {right.rows}"
                )
            product = self._grid() @ right.as_matrix()._data
            return Vector.from_matrix(type(self)._wrap(self._rows, 1, product))

        if not isinstance(right, Matrix):
            raise TypeError(f"cannot multiply Matrix by {type(right).__name__}")
        if self._columns != right._rows:
            raise ValueError(
                f"inner dimensions differ: {self.shape} @ {right.shape}"
            )
        product = self._grid() @ right._grid()
        return type(self)._wrap(self._rows, right._columns, product)

    def augment(self, right) -> "Matrix":
        """``[self | right]``; `right` may be a Matrix or a Vector."""
        right = _as_matrix(right)
        if self._rows != right._rows:
            raise ValueError(
                f"cannot augment {self._rows} rows with {right._rows} rows"
            )
        joined = np.hstack((self._grid(), right._grid()))
        return type(self)._wrap(self._rows, self._columns + right._columns, joined)

    def _check_slice_width(self, n: int) -> None:
        if not 0 < n <= self._columns:
            raise ValueError(f"column count must be in 1..{self._columns}, got {n}")

    def get_left_columns(self, n: int) -> "Matrix":
        self._check_slice_width(n)
        return type(self)._wrap(self._rows, n, self._grid()[:, :n].copy())

    def get_right_columns(self, n: int) -> "Matrix":
        self._check_slice_width(n)
        return type(self)._wrap(
            self._rows, n, self._grid()[:, self._columns - n :].copy()
        )

    # ------------------------------------------------------------------
    # Elementary row operations (in place)
    # ------------------------------------------------------------------
    def row_swap(self, row1: int, row2: int) -> None:
        U = self._grid()
        U[[row1, row2]] = U[[row2, row1]]

    def row_scale(self, scalar: float, row: int) -> None:
        self._grid()[row] *= scalar

    def row_add(self, row_to: int, scalar: float, row_from: int) -> None:
        """row[row_to] += scalar * row[row_from]"""
        U = self._grid()
        U[row_to] += scalar * U[row_from]

    # ------------------------------------------------------------------
    # Elimination
    # ------------------------------------------------------------------
    def is_identity(self, tol: TolLike = None) -> bool:
        if not self.is_square():
            return False
        t = resolve(tol)
        for row, column in self.cursor():
            value = self.get(row, column)
            if row == column:
                if not t.are_equal(value, 1.0):
                    return False
            elif not t.is_zero(value):
                return False
        return True

    def rref(self, tol: TolLike = None) -> None:
        """Reduce to reduced row echelon form **in place**."""
        elimination.rref(self, tol)

    def upper_triangular(self, tol: TolLike = None) -> float:
        """
        Reduce a square matrix to row-echelon form **in place**.

        Returns the determinant sign (+1.0 or -1.0) picked up from the row
        swaps.
        """
        return elimination.upper_triangular(self, tol)

    def inverse(self, tol: TolLike = None) -> "Matrix":
        return elimination.inverse(self, tol)

    def determinant(self, tol: TolLike = None) -> float:
        return elimination.determinant(self, tol)

    def rank(self, tol: TolLike = None) -> int:
        return elimination.rank(self, tol)

    def solve(self, b, tol: TolLike = None):
        """
        Unique solution x of ``self @ x = b``.

        `b` may be a Vector (a Vector is returned) or a Matrix of
        right-hand sides (one solution column per column of `b`).
        """
        from .vector import Vector

        solution = elimination.solve(self, _as_matrix(b), tol)
        if isinstance(b, Vector):
            return Vector.from_matrix(solution)
        return solution

    # ------------------------------------------------------------------
    # Interop and dunder sugar
    # ------------------------------------------------------------------
    def to_numpy(self) -> np.ndarray:
        return self._grid().copy()

    def tolist(self) -> List[List[float]]:
        return self._grid().tolist()

    def allclose(self, other: "Matrix", tol: TolLike = None) -> bool:
        """Same shape and every entry pair tolerance-equal."""
        other = _as_matrix(other)
        if self.shape != other.shape:
            return False
        t = resolve(tol)
        return bool(np.all(np.abs(self._data - other._data) < t.epsilon))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.shape == other.shape and bool(np.array_equal(self._data, other._data))

    __hash__ = None  # mutable

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.subtract(other)

    def __neg__(self) -> "Matrix":
        return self.scale(-1.0)

    def __mul__(self, scalar):
        if not isinstance(scalar, numbers.Real):
            return NotImplemented
        return self.scale(scalar)

    __rmul__ = __mul__

    def __matmul__(self, right):
        from .vector import Vector

        if not isinstance(right, (Matrix, Vector)):
            return NotImplemented
        return self.multiply(right)

    def __str__(self) -> str:
        return format_matrix(self)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}.from_rows({self.tolist()!r})"


def _as_matrix(value) -> Matrix:
    from .vector import Vector

    if isinstance(value, Vector):
        return value.as_matrix()
    if isinstance(value, Matrix):
        return value
    raise TypeError(f"expected Matrix or Vector, got {type(value).__name__}")
