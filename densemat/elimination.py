# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Row-reduction algorithms on `densemat.Matrix`.

Pivoting is by row *ordering*, not by magnitude: before each elimination
step the remaining rows are bubble-sorted by leading index, which pushes
zero rows to the bottom and keeps the leftmost pivot on top.  The swap
count of every sort is kept so the determinant sign can be recovered.

`rref` and `upper_triangular` mutate their argument; `inverse`,
`determinant`, `rank` and `solve` work on copies.
"""

import logging

import numpy as np

from .tolerance import resolve

logger = logging.getLogger(__name__)


class SingularMatrixError(ValueError):
    """Raised when an elimination needs a full set of pivots and lacks one."""


def leading_index(matrix, row: int, tol=None) -> int:
    """Column of the first non-zero entry of `row`, or `matrix.columns`."""
    if not 0 <= row < matrix.rows:
        raise ValueError(f"row {row} out of range for {matrix.rows} rows")
    t = resolve(tol)
    # NaN is not zero, matching Tolerance.is_zero
    nonzero = np.flatnonzero(~(np.abs(matrix._grid()[row]) < t.epsilon))
    return int(nonzero[0]) if nonzero.size else matrix.columns


def leading_entry(matrix, row: int, tol=None) -> float:
    """Value of the first non-zero entry of `row`, or 0.0 for a zero row."""
    col = leading_index(matrix, row, tol)
    if col == matrix.columns:
        return 0.0
    return matrix.get(row, col)


def is_zero_row(matrix, row: int, tol=None) -> bool:
    return leading_index(matrix, row, tol) == matrix.columns


def sort_rows(matrix, start: int, tol=None) -> int:
    """
    Stable bubble sort of rows ``start..rows-1`` by leading index.

    Each pass swaps the first adjacent out-of-order pair it finds and
    starts over, so rows only ever move one place at a time.

    Returns
    -------
    swaps : int
        Number of adjacent row swaps performed.
    """
    t = resolve(tol)
    swaps = 0
    while True:
        previous = leading_index(matrix, start, t)
        for i in range(start + 1, matrix.rows):
            current = leading_index(matrix, i, t)
            if previous > current:
                matrix.row_swap(i, i - 1)
                swaps += 1
                break
            previous = current
        else:
            return swaps


def rref(matrix, tol=None) -> None:
    """
    Reduce `matrix` to reduced row echelon form in place.

    Forward pass: order rows, scale the pivot row to a leading 1, clear
    the pivot column below it.  Backward pass: from the bottom row up,
    clear each pivot column above its pivot and write an exact 0 into the
    cleared cell.
    """
    t = resolve(tol)
    rows = matrix.rows

    for i in range(rows):
        sort_rows(matrix, i, t)
        if is_zero_row(matrix, i, t):
            # everything from here down sorted as zero too
            logger.debug(f"rref: rows {i}..{rows - 1} are zero, stopping forward pass")
            break
        col = leading_index(matrix, i, t)
        matrix.row_scale(1.0 / leading_entry(matrix, i, t), i)
        for j in range(i + 1, rows):
            matrix.row_add(j, -matrix.get(j, col), i)

    for i in range(rows - 1, 0, -1):
        if is_zero_row(matrix, i, t):
            continue
        col = leading_index(matrix, i, t)
        for j in range(i - 1, -1, -1):
            matrix.row_add(j, -matrix.get(j, col), i)
            matrix.set(j, col, 0.0)


def upper_triangular(matrix, tol=None) -> float:
    """
    Reduce a square `matrix` to upper-triangular form in place.

    Only row swaps and row additions are used, so the diagonal product
    times the returned sign is the determinant of the original matrix.

    Returns
    -------
    sign : float
        +1.0 or -1.0, the parity of all swaps made.
    """
    if not matrix.is_square():
        raise ValueError(
            f"upper_triangular needs a square matrix, got {matrix.rows}x{matrix.columns}"
        )
    t = resolve(tol)
    sign = 1.0

    for i in range(matrix.rows):
        swaps = sort_rows(matrix, i, t)
        sign *= 1.0 if swaps % 2 == 0 else -1.0
        if is_zero_row(matrix, i, t):
            logger.debug(f"upper_triangular: zero row reached at {i}")
            break
        col = leading_index(matrix, i, t)
        lead = matrix.get(i, col)
        for j in range(i + 1, matrix.rows):
            matrix.row_add(j, -matrix.get(j, col) / lead, i)

    return sign


def determinant(matrix, tol=None) -> float:
    """
    Calculate the determinant of an n-by-n matrix using elimination
    """
    U = matrix.copy()
    sign = upper_triangular(U, tol)
    diag_prod = float(np.prod(np.diag(U._grid())))
    return sign * diag_prod


def inverse(matrix, tol=None):
    """
    Gauss-Jordan inverse: reduce ``[A | I]`` and read off the right block.

    Raises
    ------
    ValueError : if `matrix` is not square.
    SingularMatrixError : if the left block does not reduce to I.
    """
    if not matrix.is_square():
        raise ValueError("Non-square matrices have no inverse.")
    t = resolve(tol)
    n = matrix.rows

    augmented = matrix.augment(type(matrix).identity(n))
    rref(augmented, t)
    if not augmented.get_left_columns(n).is_identity(t):
        logger.debug(f"inverse: left block of\n{augmented}\nis not the identity")
        raise SingularMatrixError("matrix is singular and has no inverse")
    return augmented.get_right_columns(n)


def rank(matrix, tol=None) -> int:
    """Matrix rank is the number of non-zero rows of its RREF"""
    R = matrix.copy()
    rref(R, tol)
    return sum(1 for i in range(R.rows) if not is_zero_row(R, i, tol))


def solve(matrix, b, tol=None):
    """
    Solve ``matrix @ x = b`` by reducing the augmented matrix ``[A | b]``.

    Parameters
    ----------
    matrix : Matrix  (m, n)
    b      : Matrix  (m, k)

    Returns
    -------
    x : Matrix  (n, k)

    Raises
    ------
    ValueError : if the row counts differ or the system is inconsistent.
    SingularMatrixError : if the system has infinitely many solutions.
    """
    if b.rows != matrix.rows:
        raise ValueError(f"right-hand side has {b.rows} rows, expected {matrix.rows}")
    t = resolve(tol)
    n = matrix.columns

    augmented = matrix.augment(b)
    rref(augmented, t)
    logger.debug(f"solve: reduced system\n{augmented}")

    pivots = 0
    for i in range(augmented.rows):
        col = leading_index(augmented, i, t)
        if col < n:
            pivots += 1
        elif col < augmented.columns:
            raise ValueError("inconsistent system (no solution)")
    if pivots < n:
        raise SingularMatrixError("rank deficient (infinitely many solutions)")

    return type(matrix).from_numpy(augmented._grid()[:n, n:])
