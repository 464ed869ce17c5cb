# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BUSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

"""
densemat
========

A small dense linear-algebra library built around Gauss-Jordan
elimination with tolerance-aware pivot decisions.

Public API
~~~~~~~~~~
- Containers
    - `Matrix`, `Vector`, `IndexCursor`
- Elimination (also available as Matrix methods)
    - `rref`, `upper_triangular`, `inverse`, `determinant`, `rank`, `solve`
- Tolerance
    - `Tolerance`, `set_tolerance`, `get_tolerance`, `tolerance`,
      `is_zero`, `are_equal`
- Display
    - `format_matrix`, `DISPLAY_DECIMALS`

Everything else lives in sub-modules and is **not** considered part of the
stable interface.

Example
-------
>>> from densemat import Matrix
>>> A = Matrix.from_rows([[2, 1], [1, 1]])
>>> A.determinant()
1.0
>>> (A @ A.inverse()).is_identity()
True
"""

from importlib.metadata import version as _pkg_version

from .cursor import IndexCursor
from .elimination import (
    SingularMatrixError,
    determinant,
    inverse,
    rank,
    rref,
    solve,
    sort_rows,
    upper_triangular,
)
from .formatting import DISPLAY_DECIMALS, format_matrix
from .matrix import Matrix
from .tolerance import (
    DEFAULT_TOLERANCE,
    Tolerance,
    are_equal,
    get_tolerance,
    is_zero,
    set_tolerance,
    tolerance,
)
from .vector import Vector

__all__ = [
    "Matrix",
    "Vector",
    "IndexCursor",
    "SingularMatrixError",
    "rref",
    "upper_triangular",
    "sort_rows",
    "inverse",
    "determinant",
    "rank",
    "solve",
    "Tolerance",
    "DEFAULT_TOLERANCE",
    "set_tolerance",
    "get_tolerance",
    "tolerance",
    "is_zero",
    "are_equal",
    "format_matrix",
    "DISPLAY_DECIMALS",
]

# ---------------------------------------------------------------------
# Version string (helps “pip show densemat”, Sphinx, etc.)
# ---------------------------------------------------------------------
try:  # installed via pip / build backend
    __version__ = _pkg_version(__name__)
except Exception:  # running from a checkout
    __version__ = "0.0.0.dev0"

# ---------------------------------------------------------------------
# Library stays silent unless the application configures logging.
# ---------------------------------------------------------------------
import logging as _logging

_logging.getLogger(__name__).addHandler(_logging.NullHandler())
