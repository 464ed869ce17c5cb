# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

from typing import Iterator, Tuple


class IndexCursor:
    """
    Position over a row-major rows-by-columns grid.

    The cursor owns no data, it only tracks a linear index in
    ``[0, rows * columns]`` and derives row/column from it.  Iterating a
    cursor yields ``(row, column)`` pairs from the current position to the
    end of the grid.
    """

    __slots__ = ("rows", "columns", "cells", "_index")

    def __init__(self, rows: int, columns: int):
        if rows <= 0 or columns <= 0:
            raise ValueError(f"grid must be non-empty, got {rows}x{columns}")
        self.rows = rows
        self.columns = columns
        self.cells = rows * columns
        self._index = 0

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}({self.rows}, {self.columns})"
            f"@{self._index}"
        )

    def __iter__(self) -> Iterator[Tuple[int, int]]:
        while self.has_more():
            yield self.row(), self.column()
            self._index += 1

    def has_more(self) -> bool:
        return self._index < self.cells

    def has_next_row(self) -> bool:
        return self._index + self.columns < self.cells

    def advance(self) -> int:
        if not self.has_more():
            raise IndexError("cursor is exhausted")
        self._index += 1
        return self._index

    def advance_to_next_row(self) -> int:
        if not self.has_next_row():
            raise IndexError("cursor is on the last row")
        self._index = (self.row() + 1) * self.columns
        return self._index

    def reset(self) -> None:
        self._index = 0

    def row(self) -> int:
        return self._index // self.columns

    def column(self) -> int:
        return self._index % self.columns

    def linear_index(self) -> int:
        return self._index
