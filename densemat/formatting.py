# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
Plain-text rendering of matrices.

    [  1.0000 -2.5000 ]
    [ 10.0000  0.0000 ]
"""

from .cursor import IndexCursor

DISPLAY_DECIMALS: int = 4


def format_matrix(matrix, decimals: int = DISPLAY_DECIMALS) -> str:
    """
    Render every entry with `decimals` fixed places, right-aligned to the
    widest entry (never narrower than ``decimals + 2``), one bracketed
    line per row.
    """
    cursor = IndexCursor(matrix.rows, matrix.columns)
    cells = [f"{matrix.get(cursor):.{decimals}f}" for _ in _walk(cursor)]
    width = max([decimals + 2] + [len(c) for c in cells])

    lines = []
    for r in range(matrix.rows):
        row = cells[r * matrix.columns : (r + 1) * matrix.columns]
        lines.append("[ " + " ".join(c.rjust(width) for c in row) + " ]")
    return "\n".join(lines)


def _walk(cursor: IndexCursor):
    # yield before advancing so the caller can read at the cursor
    while cursor.has_more():
        yield cursor.linear_index()
        cursor.advance()
