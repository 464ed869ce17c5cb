# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import pytest

from densemat.cursor import IndexCursor


def test_cursor_walks_row_major():
    c = IndexCursor(2, 3)
    seen = []
    while c.has_more():
        seen.append((c.row(), c.column(), c.linear_index()))
        c.advance()
    assert seen == [
        (0, 0, 0),
        (0, 1, 1),
        (0, 2, 2),
        (1, 0, 3),
        (1, 1, 4),
        (1, 2, 5),
    ]
    assert c.linear_index() == 6
    with pytest.raises(IndexError):
        c.advance()


def test_cursor_next_row_and_reset():
    c = IndexCursor(3, 4)
    c.advance()
    c.advance()
    assert c.advance_to_next_row() == 4
    assert (c.row(), c.column()) == (1, 0)
    c.advance_to_next_row()
    assert c.row() == 2
    assert not c.has_next_row()
    with pytest.raises(IndexError):
        c.advance_to_next_row()
    c.reset()
    assert c.linear_index() == 0
    assert c.has_next_row()


def test_cursor_iterates_remaining_cells():
    c = IndexCursor(2, 2)
    c.advance()
    assert list(c) == [(0, 1), (1, 0), (1, 1)]
    assert not c.has_more()
    assert list(c) == []


def test_cursor_rejects_empty_grid():
    with pytest.raises(ValueError):
        IndexCursor(0, 3)
